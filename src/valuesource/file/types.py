from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
from typing import Protocol, TypeAlias, TypeVar

T_co = TypeVar("T_co", covariant=True)

Clock: TypeAlias = Callable[[], float]
Interval: TypeAlias = timedelta | float | int
Parser: TypeAlias = Callable[[str], T_co]


class ValueSource(Protocol[T_co]):
    """Anything that can hand out its current value."""

    def value(self) -> T_co: ...


__all__ = [
    "Clock",
    "Interval",
    "Parser",
    "ValueSource",
]
