"""Environment file loaders.

Two entry points share one parser:

- ``load_env`` parses the whole file strictly and returns string values.
- ``load_env_with_schema`` validates the file against ``LoadOptions``:
  declared variables are defaulted, checked and coerced, undeclared
  prefixed keys are passed through as strings, and any key without the
  prefix fails the load.

Neither loader modifies ``os.environ``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from envloader.errors import (
    EnvFileNotFoundError,
    InvalidBooleanError,
    InvalidNumberError,
    MissingRequiredVariableError,
    UnprefixedVariableError,
)
from envloader.parser import ParseMode, parse_lines
from envloader.schema import (
    ConfigValue,
    EnvConfig,
    LoadOptions,
    TypedEnvConfig,
    VariableType,
)

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"


def resolve_env_path(file_path: str | Path = DEFAULT_ENV_FILE) -> Path:
    """Resolve ``file_path`` against the current working directory."""
    return (Path.cwd() / file_path).resolve()


def read_env_file(file_path: str | Path = DEFAULT_ENV_FILE) -> str:
    """Return the text of an environment file.

    Raises:
        EnvFileNotFoundError: If the resolved path does not exist
    """
    env_path = resolve_env_path(file_path)
    if not env_path.exists():
        raise EnvFileNotFoundError(str(file_path))
    # utf-8-sig drops a leading byte-order mark
    return env_path.read_text(encoding="utf-8-sig")


def _parse_number(value: str) -> int | float:
    text = value.strip()
    if "_" in text or not text.isascii():
        raise InvalidNumberError(value)

    try:
        return int(text)
    except ValueError:
        pass

    try:
        number = float(text)
    except ValueError as exc:
        raise InvalidNumberError(value) from exc

    if not math.isfinite(number):
        raise InvalidNumberError(value)
    return number


def parse_value(value: str, type_: VariableType | str = VariableType.STRING) -> ConfigValue:
    """Coerce a raw string to the declared variable type.

    Args:
        value: Raw value from the file or the schema default
        type_: ``string``, ``number`` or ``boolean``

    Returns:
        The value unchanged for strings, an int or float for numbers,
        a bool for booleans

    Raises:
        InvalidNumberError: If a number value is not a finite numeric literal
        InvalidBooleanError: If a boolean value is not true or false
    """
    variable_type = VariableType(type_)

    if variable_type == VariableType.NUMBER:
        return _parse_number(value)

    if variable_type == VariableType.BOOLEAN:
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        raise InvalidBooleanError(value)

    return value


def load_env(file_path: str | Path = DEFAULT_ENV_FILE) -> EnvConfig:
    """Load every ``KEY=VALUE`` pair from an environment file.

    Args:
        file_path: Path to the file, relative to the working directory

    Returns:
        Mapping of key to string value

    Raises:
        EnvFileNotFoundError: If the file does not exist
        MalformedLineError: If any line is not ``KEY=VALUE``
    """
    try:
        text = read_env_file(file_path)
        return parse_lines(text, ParseMode.STRICT)
    except Exception as exc:
        logger.error("Failed to load environment file: %s", exc)
        raise


def load_env_with_schema(
    file_path: str | Path = DEFAULT_ENV_FILE,
    *,
    options: LoadOptions | Mapping[str, Any],
) -> TypedEnvConfig:
    """Load an environment file and validate it against a schema.

    Args:
        file_path: Path to the file, relative to the working directory
        options: Prefix and variable declarations, as a model or a plain mapping

    Returns:
        Mapping of full key to coerced value

    Raises:
        EnvFileNotFoundError: If the file does not exist
        MissingRequiredVariableError: If a required variable has no value
        UnprefixedVariableError: If any key lacks the prefix
        InvalidNumberError: If a number variable does not parse
        InvalidBooleanError: If a boolean variable does not parse
        pydantic.ValidationError: If ``options`` is not a valid schema
    """
    try:
        if not isinstance(options, LoadOptions):
            options = LoadOptions.model_validate(options)

        raw_pairs = parse_lines(read_env_file(file_path), ParseMode.LENIENT)
        config: TypedEnvConfig = {}

        for name, spec in options.variables.items():
            env_key = options.full_key(name)
            value = raw_pairs.get(env_key, spec.default)
            if spec.required and value is None:
                raise MissingRequiredVariableError(env_key)
            if value is not None:
                config[env_key] = parse_value(value, spec.type)

        for key, value in raw_pairs.items():
            if not key.startswith(options.prefix):
                raise UnprefixedVariableError(key, options.prefix)
            config.setdefault(key, value)

        logger.debug("Loaded %d variables from %s", len(config), file_path)
        return config
    except Exception as exc:
        logger.error("Failed to load environment file: %s", exc)
        raise
