"""
passlens.generator
Strong password generator. The random source is injectable; the default is
Python's secrets-backed SystemRandom.
"""

import logging
import random
from secrets import SystemRandom
from typing import List, Optional

from .config import DIGITS, GENERATED_LENGTH, GENERATOR_SPECIAL_CHARACTERS, LOWERCASE, UPPERCASE

logger = logging.getLogger(__name__)

CHARSETS = {
    "upper": UPPERCASE,
    "lower": LOWERCASE,
    "numbers": DIGITS,
    "special": GENERATOR_SPECIAL_CHARACTERS,
}
ALL_CHARS = "".join(CHARSETS.values())

_sysrand = SystemRandom()


def shuffle(items: List[str], rng: random.Random) -> List[str]:
    """In-place Fisher-Yates shuffle driven by rng."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def generate(length: int = GENERATED_LENGTH, rng: Optional[random.Random] = None) -> str:
    """
    Generate a password containing at least one uppercase letter, lowercase
    letter, digit and special character.
    """
    if length < len(CHARSETS):
        raise ValueError(f"length must be at least {len(CHARSETS)}")

    rng = rng or _sysrand
    password_chars = [rng.choice(charset) for charset in CHARSETS.values()]
    for _ in range(length - len(password_chars)):
        password_chars.append(rng.choice(ALL_CHARS))

    shuffle(password_chars, rng)
    logger.debug("Generated %d-character password", length)
    return "".join(password_chars)
