from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from .constants import (
    AUTO_TRIM_KEY,
    DEFAULT_AUTO_TRIM,
    DEFAULT_ENCODING,
    DEFAULT_REFRESH_INTERVAL,
    ENCODING_KEY,
    FALSE_TEXT_VALUES,
    NEVER_REFRESH_TOKENS,
    NULL_TEXT_VALUES,
    REFRESH_INTERVAL_KEY,
    TRUE_TEXT_VALUES,
)
from .types import Interval

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class SourceOptions:
    refresh_interval: float | None = DEFAULT_REFRESH_INTERVAL
    auto_trim: bool = DEFAULT_AUTO_TRIM
    encoding: str = DEFAULT_ENCODING

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> SourceOptions:
        """Build options from a settings section, matching keys case-insensitively."""
        interval_raw = _read_key(mapping, REFRESH_INTERVAL_KEY)
        trim_raw = _read_key(mapping, AUTO_TRIM_KEY)
        encoding_raw = _read_key(mapping, ENCODING_KEY)

        encoding = DEFAULT_ENCODING
        if isinstance(encoding_raw, str) and encoding_raw.strip():
            encoding = encoding_raw.strip()
        elif encoding_raw is not _MISSING and encoding_raw is not None:
            logger.warning("invalid encoding %r; falling back to %r", encoding_raw, DEFAULT_ENCODING)

        return cls(
            refresh_interval=parse_refresh_interval(
                None if interval_raw is _MISSING else interval_raw,
                default=DEFAULT_REFRESH_INTERVAL,
            ),
            auto_trim=parse_auto_trim(None if trim_raw is _MISSING else trim_raw, default=DEFAULT_AUTO_TRIM),
            encoding=encoding,
        )


def normalize_refresh_interval(interval: Interval | None) -> float | None:
    """Convert a configured interval to seconds; ``None`` disables refreshing."""
    if interval is None:
        return None
    if isinstance(interval, timedelta):
        seconds = interval.total_seconds()
    elif isinstance(interval, bool) or not isinstance(interval, (int, float)):
        raise TypeError(f"refresh interval must be a timedelta or number of seconds, got {interval!r}")
    else:
        seconds = float(interval)
    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(f"refresh interval must be finite and not negative: {interval!r}")
    return seconds


def parse_refresh_interval(raw: object | None, *, default: float | None = None) -> float | None:
    if raw is None:
        return default
    if isinstance(raw, (timedelta, int, float)) and not isinstance(raw, bool):
        try:
            return normalize_refresh_interval(raw)
        except ValueError:
            logger.warning("invalid refresh interval %r; falling back to %r", raw, default)
            return default

    text = str(raw).strip().lower()
    if not text:
        return default
    if text in NULL_TEXT_VALUES or text in NEVER_REFRESH_TOKENS:
        return None

    try:
        return normalize_refresh_interval(float(text.removesuffix("s")))
    except ValueError:
        logger.warning("invalid refresh interval %r; falling back to %r", raw, default)
        return default


def parse_auto_trim(raw: object | None, *, default: bool = DEFAULT_AUTO_TRIM) -> bool:
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, (int, float)):
        return bool(raw)

    value = str(raw).strip().lower()
    if value in TRUE_TEXT_VALUES:
        return True
    if value in FALSE_TEXT_VALUES:
        return False

    logger.warning("invalid auto_trim flag %r; falling back to %r", raw, default)
    return default


def _read_key(mapping: Mapping[Any, Any], expected: str) -> Any:
    lowered = expected.lower()
    for key, value in mapping.items():
        if isinstance(key, str) and key.lower() == lowered:
            return value
    return _MISSING


__all__ = [
    "SourceOptions",
    "normalize_refresh_interval",
    "parse_auto_trim",
    "parse_refresh_interval",
]
