from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import BaseModel, ValidationError

from valuesource.file import RequiredFileSource
from valuesource.file.parsers import parse_bool, parse_text, resolve_parser, yaml_parser


def test_resolve_parser_maps_builtin_scalars() -> None:
    assert resolve_parser(str) is parse_text
    assert resolve_parser(bool) is parse_bool
    assert resolve_parser(int)("1024") == 1024
    assert resolve_parser(float)("6.02e3") == 6020.0
    assert resolve_parser(Path)("/tmp/settings.yaml") == Path("/tmp/settings.yaml")


def test_resolve_parser_rejects_garbage_instead_of_defaulting() -> None:
    with pytest.raises(ValidationError):
        resolve_parser(int)("12abc")


def test_resolve_parser_passes_callables_through() -> None:
    def upper(raw: str) -> str:
        return raw.upper()

    assert resolve_parser(upper) is upper


def test_resolve_parser_rejects_non_callables() -> None:
    with pytest.raises(TypeError):
        resolve_parser("int")  # type: ignore[arg-type]


def test_resolve_parser_validates_models_from_json() -> None:
    class Credentials(BaseModel):
        user: str
        token: str

    parsed = resolve_parser(Credentials)('{"user": "svc", "token": "abc"}')

    assert parsed == Credentials(user="svc", token="abc")
    with pytest.raises(ValidationError):
        resolve_parser(Credentials)('{"user": "svc"}')


def test_parse_bool_accepts_tokens_case_insensitively() -> None:
    assert parse_bool("Yes") is True
    assert parse_bool("on") is True
    assert parse_bool("OFF") is False
    assert parse_bool("0") is False


def test_parse_bool_is_whitespace_sensitive() -> None:
    with pytest.raises(ValueError):
        parse_bool(" true")
    with pytest.raises(ValueError):
        parse_bool("maybe")


def test_yaml_parser_reports_syntax_errors_as_value_errors() -> None:
    parse = yaml_parser(dict[str, int])

    with pytest.raises(ValueError, match="invalid yaml document"):
        parse("a: [1, 2\n")


def test_yaml_parser_reports_shape_errors_as_validation_errors() -> None:
    parse = yaml_parser(list[int])

    assert parse("- 1\n- 2\n") == [1, 2]
    with pytest.raises(ValidationError):
        parse("a: 1\n")


class Port:
    def __init__(self, raw: str) -> None:
        number = int(raw)
        if not 0 < number < 65536:
            raise ValueError(f"port out of range: {raw!r}")
        self.number = number


def test_resolve_parser_falls_back_to_string_constructor() -> None:
    parse = resolve_parser(Port)

    assert parse is Port
    assert parse("8080").number == 8080
    with pytest.raises(ValueError):
        parse("70000")


def test_string_constructor_types_build_sources_without_io(tmp_path: Path) -> None:
    path = tmp_path / "port"
    source = RequiredFileSource.from_path(path, Port)
    assert source.last_refresh is None

    path.write_text(" 443\n", encoding="utf-8")
    assert source.value().number == 443
