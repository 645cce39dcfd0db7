"""Resolve a target type to the ``str -> T`` parser a file source uses."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, TypeAdapter
from pydantic.errors import PydanticSchemaGenerationError

from .constants import FALSE_TEXT_VALUES, TRUE_TEXT_VALUES

T = TypeVar("T")


def parse_bool(raw: str) -> bool:
    lowered = raw.lower()
    if lowered in TRUE_TEXT_VALUES:
        return True
    if lowered in FALSE_TEXT_VALUES:
        return False
    raise ValueError(f"invalid boolean literal: {raw!r}")


def parse_text(raw: str) -> str:
    return raw


def resolve_parser(target: type[T] | Callable[[str], T]) -> Callable[[str], T]:
    """Return a total parser for ``target``.

    Plain callables are used as-is. ``str`` maps to the identity, ``bool`` to a
    token parser, pydantic models to JSON validation and any other type to
    pydantic's lax string validation. Types pydantic has no schema for are
    called with the text, like any other constructor.
    """
    if not isinstance(target, type):
        if not callable(target):
            raise TypeError(f"parser target must be a type or callable, got {target!r}")
        return target

    if target is str:
        return cast(Callable[[str], T], parse_text)
    if target is bool:
        return cast(Callable[[str], T], parse_bool)
    if issubclass(target, BaseModel):
        return cast(Callable[[str], T], target.model_validate_json)

    try:
        adapter: TypeAdapter[T] = TypeAdapter(target)
    except PydanticSchemaGenerationError:
        return cast(Callable[[str], T], target)
    return adapter.validate_strings


def yaml_parser(target: Any) -> Callable[[str], Any]:
    """Build a parser that loads YAML text and validates it into ``target``."""
    adapter: TypeAdapter[Any] = TypeAdapter(target)

    def _parse(raw: str) -> Any:
        try:
            loaded = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid yaml document: {exc}") from exc
        return adapter.validate_python(loaded)

    return _parse


__all__ = [
    "parse_bool",
    "parse_text",
    "resolve_parser",
    "yaml_parser",
]
