# passlens/config.py
"""
Fixed analysis constants and simple settings persistence for PassLens.
Settings saved as JSON in %APPDATA%/PassLens/config.json (Windows) or ~/.passlens/config.json (fallback)
"""

import json
import logging
import os
import string
from typing import Dict, Any

from .storage import atomic_read_bytes, atomic_write_bytes, dump_json_bytes, read_json_bytes

logger = logging.getLogger(__name__)

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits

# characters counted as "special" by the analyzer
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"

# alphabet the generator draws specials from; subset of SPECIAL_CHARACTERS
GENERATOR_SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

COMMON_PASSWORDS = frozenset({
    "password", "123456", "12345678", "1234", "qwerty", "12345",
    "dragon", "football", "baseball", "letmein", "monkey",
    "shadow", "master", "hello", "password1", "admin",
})

# pool sizes used by entropy and keyspace estimates
LOWER_POOL = 26
UPPER_POOL = 26
DIGIT_POOL = 10
SPECIAL_POOL = 32

# brute-force model behind the crack time estimate
CRACK_CHARSET_SIZE = 95
GUESSES_PER_SECOND = 1e9

MIN_LENGTH = 8
GENERATED_LENGTH = 16

DEFAULTS: Dict[str, Any] = {
    "reveal_generated": True,
    "log_level": "WARNING",
}


def _appdata_dir() -> str:
    override = os.getenv("PASSLENS_CONFIG_DIR")
    appdata = os.getenv("APPDATA")
    if override:
        d = override
    elif appdata:
        d = os.path.join(appdata, "PassLens")
    else:
        d = os.path.join(os.path.expanduser("~"), ".passlens")
    return d


def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")


def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        data = read_json_bytes(atomic_read_bytes(p))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out


def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    atomic_write_bytes(p, dump_json_bytes(cfg))
    logger.debug("Saved settings to %s", p)
