"""
Settings and configuration for katsuyou.

Values are read from the environment once, at import time.
"""

import os


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Debug mode: lowers the package logger to DEBUG
DEBUG = _env_flag("KATSUYOU_DEBUG", False)

# Reject kanji spellings whose final character differs from the reading's.
# When disabled the kanji spelling is dropped instead.
STRICT_KANJI = _env_flag("KATSUYOU_STRICT_KANJI", True)
