"""
passlens.evaluator

Password strength analyzer:
- count_characters(password): per-class character counts (upper/lower/numbers/special)
- has_sequence(password): three consecutive ascending code points ('abc', '123')
- is_common(password): exact, case-insensitive denylist match
- calculate_score / strength_level: 0-100 score and its strength tier
- calculate_entropy / calculate_combinations / estimate_crack_time: keyspace figures
- analyze(password): runs all of the above and returns an immutable AnalysisResult

analyze() is total: every str, including the empty string and strings made of
characters outside all four classes, produces a well-formed result.
"""

import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from enum import Enum
from typing import Dict, NamedTuple

from .config import (
    COMMON_PASSWORDS,
    CRACK_CHARSET_SIZE,
    DIGIT_POOL,
    GUESSES_PER_SECOND,
    LOWER_POOL,
    SPECIAL_CHARACTERS,
    SPECIAL_POOL,
    UPPER_POOL,
)

logger = logging.getLogger(__name__)

UPPER_RE = re.compile(r"[A-Z]")
LOWER_RE = re.compile(r"[a-z]")
DIGIT_RE = re.compile(r"[0-9]")
SPECIAL_RE = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")
NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")

# above this many decimal digits, keyspace figures are computed in log space
_MAX_EXACT_DIGITS = 300

MINUTE = 60
HOUR = 3600
DAY = 86400
YEAR = 31536000
CENTURY = 3153600000

# (upper bound in seconds, unit in seconds, label)
_CRACK_TIME_UNITS = (
    (MINUTE, 1, "seconds"),
    (HOUR, MINUTE, "minutes"),
    (DAY, HOUR, "hours"),
    (YEAR, DAY, "days"),
    (CENTURY, YEAR, "years"),
)


class Strength(str, Enum):
    WEAK = "weak"
    FAIR = "fair"
    GOOD = "good"
    STRONG = "strong"
    VERY_STRONG = "very-strong"


class CharacterCounts(NamedTuple):
    upper: int = 0
    lower: int = 0
    numbers: int = 0
    special: int = 0

    @property
    def total(self) -> int:
        return self.upper + self.lower + self.numbers + self.special


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the view layer needs to render one password."""

    length: int
    has_upper: bool
    has_lower: bool
    has_numbers: bool
    has_special: bool
    character_counts: CharacterCounts
    has_sequence: bool
    is_common: bool
    score: int
    strength: Strength
    entropy: int
    combinations: str
    crack_time: str

    def to_dict(self) -> Dict:
        """camelCase structure for JSON consumers."""
        return {
            "length": self.length,
            "hasUpper": self.has_upper,
            "hasLower": self.has_lower,
            "hasNumbers": self.has_numbers,
            "hasSpecial": self.has_special,
            "characterCounts": self.character_counts._asdict(),
            "hasSequence": self.has_sequence,
            "isCommon": self.is_common,
            "score": self.score,
            "strength": self.strength.value,
            "entropy": self.entropy,
            "combinations": self.combinations,
            "crackTime": self.crack_time,
        }


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def _exponential(log10_value: float) -> str:
    """Render 10**log10_value as '1.23e+45' without materialising the number."""
    exponent = math.floor(log10_value)
    mantissa = round(10 ** (log10_value - exponent), 2)
    if mantissa >= 10:
        mantissa /= 10
        exponent += 1
    return f"{mantissa:.2f}e{exponent:+d}"


def count_characters(password: str) -> CharacterCounts:
    return CharacterCounts(
        upper=len(UPPER_RE.findall(password)),
        lower=len(LOWER_RE.findall(password)),
        numbers=len(DIGIT_RE.findall(password)),
        special=len(SPECIAL_RE.findall(password)),
    )


def has_sequence(password: str) -> bool:
    """
    True if any three consecutive characters have strictly consecutive
    ascending code points (c, c+1, c+2). Case-sensitive; punctuation counts too.
    """
    for i in range(len(password) - 2):
        a, b, c = ord(password[i]), ord(password[i + 1]), ord(password[i + 2])
        if b == a + 1 and c == b + 1:
            return True
    return False


def is_common(password: str) -> bool:
    return password.lower() in COMMON_PASSWORDS


def calculate_score(
    length: int,
    has_upper: bool,
    has_lower: bool,
    has_numbers: bool,
    has_special: bool,
    has_sequence: bool = False,
    is_common: bool = False,
) -> int:
    score = min(length * 2, 30)

    classes = [has_upper, has_lower, has_numbers, has_special]
    score += 10 * sum(classes)
    if sum(classes) >= 3:
        score += 10

    if has_sequence:
        score -= 15
    if is_common:
        score -= 20

    return max(0, min(100, score))


def strength_level(score: int) -> Strength:
    if score >= 90:
        return Strength.VERY_STRONG
    if score >= 75:
        return Strength.STRONG
    if score >= 50:
        return Strength.GOOD
    if score >= 25:
        return Strength.FAIR
    return Strength.WEAK


def calculate_entropy(password: str) -> int:
    """
    Entropy bits = length * log2(pool), where pool is the sum of the sizes of
    the classes that actually appear. Anything outside [A-Za-z0-9] counts as
    the 32-character symbol pool.
    """
    if not password:
        return 0

    pool = 0
    if LOWER_RE.search(password):
        pool += LOWER_POOL
    if UPPER_RE.search(password):
        pool += UPPER_POOL
    if DIGIT_RE.search(password):
        pool += DIGIT_POOL
    if NON_ALNUM_RE.search(password):
        pool += SPECIAL_POOL

    if pool == 0:
        return 0
    return _round_half_up(len(password) * math.log2(pool))


def calculate_combinations(
    length: int,
    has_upper: bool,
    has_lower: bool,
    has_numbers: bool,
    has_special: bool,
) -> str:
    """
    Keyspace size pool ** length in exponential notation ('9.50e+1').
    Characters outside the four classes do not widen the pool here.
    """
    pool = 0
    if has_lower:
        pool += LOWER_POOL
    if has_upper:
        pool += UPPER_POOL
    if has_numbers:
        pool += DIGIT_POOL
    if has_special:
        pool += SPECIAL_POOL

    if pool == 0 or length == 0:
        return "0"

    log_total = length * math.log10(pool)
    if log_total > _MAX_EXACT_DIGITS:
        return _exponential(log_total)
    with localcontext() as ctx:
        ctx.rounding = ROUND_HALF_UP
        return format(Decimal(pool ** length), ".2e")


def _format_count(value: float) -> str:
    if value < 1e21:
        return str(_round_half_up(value))
    return _exponential(math.log10(value))


def estimate_crack_time(
    length: int,
    charset_size: int = CRACK_CHARSET_SIZE,
    guesses_per_second: float = GUESSES_PER_SECOND,
) -> str:
    """
    Brute-force time for a keyspace of charset_size ** length at
    guesses_per_second. The pool is fixed, not taken from the password.
    """
    if length <= 0:
        return "Instantly"

    log_total = length * math.log10(charset_size)
    if log_total > _MAX_EXACT_DIGITS:
        log_centuries = log_total - math.log10(guesses_per_second) - math.log10(CENTURY)
        return f"{_exponential(log_centuries)} centuries"

    seconds = float(charset_size) ** length / guesses_per_second
    if seconds < 1:
        return "Instantly"
    for limit, unit, label in _CRACK_TIME_UNITS:
        if seconds < limit:
            return f"{_round_half_up(seconds / unit)} {label}"
    return f"{_format_count(seconds / CENTURY)} centuries"


def analyze(password: str) -> AnalysisResult:
    counts = count_characters(password)
    length = len(password)
    has_upper = counts.upper > 0
    has_lower = counts.lower > 0
    has_numbers = counts.numbers > 0
    has_special = counts.special > 0
    sequence = has_sequence(password)
    common = is_common(password)

    score = calculate_score(
        length, has_upper, has_lower, has_numbers, has_special,
        has_sequence=sequence, is_common=common,
    )
    result = AnalysisResult(
        length=length,
        has_upper=has_upper,
        has_lower=has_lower,
        has_numbers=has_numbers,
        has_special=has_special,
        character_counts=counts,
        has_sequence=sequence,
        is_common=common,
        score=score,
        strength=strength_level(score),
        entropy=calculate_entropy(password),
        combinations=calculate_combinations(length, has_upper, has_lower, has_numbers, has_special),
        crack_time=estimate_crack_time(length),
    )
    # never log the password itself
    logger.debug("Analyzed %d-character password: score=%d strength=%s", length, score, result.strength.value)
    return result
