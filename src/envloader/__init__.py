"""Load ``.env`` files into plain mappings, with optional schema validation."""

from envloader.errors import (
    EnvFileNotFoundError,
    EnvLoadError,
    InvalidBooleanError,
    InvalidNumberError,
    MalformedLineError,
    MissingRequiredVariableError,
    UnprefixedVariableError,
)
from envloader.loader import load_env, load_env_with_schema, parse_value
from envloader.parser import ParseMode, parse_lines
from envloader.schema import LoadOptions, VariableSpec, VariableType

__all__ = [
    "EnvFileNotFoundError",
    "EnvLoadError",
    "InvalidBooleanError",
    "InvalidNumberError",
    "LoadOptions",
    "MalformedLineError",
    "MissingRequiredVariableError",
    "ParseMode",
    "UnprefixedVariableError",
    "VariableSpec",
    "VariableType",
    "load_env",
    "load_env_with_schema",
    "parse_lines",
    "parse_value",
]
