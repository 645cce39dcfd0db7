from __future__ import annotations

# source defaults
DEFAULT_AUTO_TRIM = True
DEFAULT_ENCODING = "utf-8"
DEFAULT_REFRESH_INTERVAL: float | None = None

# scalar tokens
TRUE_TEXT_VALUES = frozenset({"1", "true", "yes", "on"})
FALSE_TEXT_VALUES = frozenset({"0", "false", "no", "off"})
NULL_TEXT_VALUES = frozenset({"null", "none"})
NEVER_REFRESH_TOKENS = frozenset({"off", "never"})

# option keys
REFRESH_INTERVAL_KEY = "refresh_interval"
AUTO_TRIM_KEY = "auto_trim"
ENCODING_KEY = "encoding"

__all__ = [
    "AUTO_TRIM_KEY",
    "DEFAULT_AUTO_TRIM",
    "DEFAULT_ENCODING",
    "DEFAULT_REFRESH_INTERVAL",
    "ENCODING_KEY",
    "FALSE_TEXT_VALUES",
    "NEVER_REFRESH_TOKENS",
    "NULL_TEXT_VALUES",
    "REFRESH_INTERVAL_KEY",
    "TRUE_TEXT_VALUES",
]
