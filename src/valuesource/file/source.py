from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar, Generic, TypeVar

from .constants import DEFAULT_AUTO_TRIM, DEFAULT_ENCODING
from .exceptions import (
    NoValueError,
    RefreshFileSourceError,
    RefreshIOError,
    RefreshNoValueError,
    RefreshParseError,
    ValueRefreshError,
)
from .options import SourceOptions, normalize_refresh_interval
from .parsers import resolve_parser
from .types import Clock, Interval, Parser

logger = logging.getLogger(__name__)

T = TypeVar("T")
_SourceT = TypeVar("_SourceT", bound="FileSource[Any]")


@dataclass(frozen=True)
class _CacheState(Generic[T]):
    value: T | None = None
    has_value: bool = False
    refreshed_at: float | None = None


class FileSource(ABC, Generic[T]):
    """Single config value parsed from a file and cached until it goes stale.

    The cache is refreshed lazily on access: the first access always reads the
    file, later ones only once ``refresh_interval`` seconds have passed since
    the last successful refresh. Without an interval the first value sticks.
    """

    required: ClassVar[bool]

    def __init__(
        self,
        path: str | Path,
        parser: type[T] | Callable[[str], T] = str,  # type: ignore[assignment]
        *,
        refresh_interval: Interval | None = None,
        auto_trim: bool = DEFAULT_AUTO_TRIM,
        encoding: str = DEFAULT_ENCODING,
        clock: Clock = time.monotonic,
    ) -> None:
        self._path = Path(path).expanduser()
        self._parse: Parser[T] = resolve_parser(parser)
        self._refresh_interval = normalize_refresh_interval(refresh_interval)
        self._auto_trim = auto_trim
        self._encoding = encoding
        self._clock = clock
        self._state: _CacheState[T] = _CacheState()
        self._lock = threading.RLock()

    @classmethod
    def from_path(
        cls: type[_SourceT],
        path: str | Path,
        parser: type[Any] | Callable[[str], Any] = str,
        *,
        clock: Clock = time.monotonic,
    ) -> _SourceT:
        return cls(path, parser, clock=clock)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def refresh_interval(self) -> float | None:
        return self._refresh_interval

    @property
    def auto_trim(self) -> bool:
        return self._auto_trim

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def options(self) -> SourceOptions:
        return SourceOptions(
            refresh_interval=self._refresh_interval,
            auto_trim=self._auto_trim,
            encoding=self._encoding,
        )

    @property
    def cached_value(self) -> T | None:
        return self._state.value

    @property
    def last_refresh(self) -> float | None:
        return self._state.refreshed_at

    def set_refresh_interval(self: _SourceT, interval: Interval | None) -> _SourceT:
        self._refresh_interval = normalize_refresh_interval(interval)
        return self

    def set_auto_trim(self: _SourceT, auto_trim: bool) -> _SourceT:
        self._auto_trim = auto_trim
        return self

    def set_encoding(self: _SourceT, encoding: str) -> _SourceT:
        self._encoding = encoding
        return self

    def configure(self: _SourceT, options: SourceOptions) -> _SourceT:
        self._refresh_interval = normalize_refresh_interval(options.refresh_interval)
        self._auto_trim = options.auto_trim
        self._encoding = options.encoding
        return self

    def invalidate(self) -> None:
        """Drop the cached value so the next access reads the file again."""
        with self._lock:
            self._state = _CacheState()

    def refresh_on_timeout(self) -> bool:
        """Refresh if the cache was never filled or has gone stale.

        Returns whether a refresh ran. Refresh errors propagate unchanged.
        """
        with self._lock:
            if not self._is_stale_locked():
                return False
            self._refresh_locked()
            return True

    def refresh_value(self) -> T | None:
        """Re-read and re-parse the file, replacing the cache on success."""
        with self._lock:
            return self._refresh_locked().value

    @abstractmethod
    def value(self) -> Any: ...

    def _fresh_state(self) -> _CacheState[T]:
        with self._lock:
            try:
                self.refresh_on_timeout()
            except RefreshFileSourceError as exc:
                raise ValueRefreshError(exc) from exc
            return self._state

    def _is_stale_locked(self) -> bool:
        last_refresh = self._state.refreshed_at
        if last_refresh is None:
            return True
        if self._refresh_interval is None:
            return False
        return last_refresh + self._refresh_interval < self._clock()

    def _refresh_locked(self) -> _CacheState[T]:
        path = self._path
        try:
            exists = path.exists()
        except OSError as exc:
            raise RefreshIOError(exc) from exc

        if not exists:
            if self.required:
                logger.debug("required file source is missing path=%s", path)
                raise RefreshNoValueError()
            logger.debug("optional file source is missing path=%s; caching empty value", path)
            return self._store_locked(_CacheState(refreshed_at=self._clock()))

        try:
            with path.open(encoding=self._encoding, newline="") as handle:
                raw = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise RefreshIOError(exc) from exc

        text = raw.strip() if self._auto_trim else raw
        try:
            parsed = self._parse(text)
        except Exception as exc:
            raise RefreshParseError(exc) from exc

        logger.debug("file source refreshed path=%s", path)
        return self._store_locked(_CacheState(value=parsed, has_value=True, refreshed_at=self._clock()))

    def _store_locked(self, state: _CacheState[T]) -> _CacheState[T]:
        self._state = state
        return state

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={str(self._path)!r}, "
            f"refresh_interval={self._refresh_interval!r}, auto_trim={self._auto_trim!r})"
        )


class RequiredFileSource(FileSource[T]):
    """File source whose backing file must exist."""

    required = True

    def value(self) -> T:
        state = self._fresh_state()
        if not state.has_value:
            raise NoValueError()
        return state.value  # type: ignore[return-value]


class OptionalFileSource(FileSource[T]):
    """File source that yields ``None`` while its backing file is absent."""

    required = False

    def value(self) -> T | None:
        return self._fresh_state().value


__all__ = [
    "FileSource",
    "OptionalFileSource",
    "RequiredFileSource",
]
