from . import exceptions
from .options import SourceOptions
from .parsers import resolve_parser, yaml_parser
from .source import FileSource, OptionalFileSource, RequiredFileSource
from .types import ValueSource

__all__ = [
    "FileSource",
    "OptionalFileSource",
    "RequiredFileSource",
    "SourceOptions",
    "ValueSource",
    "exceptions",
    "resolve_parser",
    "yaml_parser",
]
