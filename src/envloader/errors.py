"""Exceptions raised while loading environment files."""

from __future__ import annotations


class EnvLoadError(Exception):
    """Base class for every environment file loading failure."""


class EnvFileNotFoundError(EnvLoadError, FileNotFoundError):
    """Raised when the environment file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Environment file {path} not found")
        self.path = path


class MalformedLineError(EnvLoadError, ValueError):
    """Raised by the strict parser for a line that is not ``KEY=VALUE``."""

    def __init__(self, line: str) -> None:
        super().__init__(f"Invalid format in .env file: {line}")
        self.line = line


class MissingRequiredVariableError(EnvLoadError, ValueError):
    """Raised when a required variable has neither a value nor a default."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Missing required environment variable: {key}")
        self.key = key


class UnprefixedVariableError(EnvLoadError, ValueError):
    """Raised when a key in the file does not carry the configured prefix."""

    def __init__(self, key: str, prefix: str) -> None:
        super().__init__(
            f"Environment variable {key} does not start with the required prefix: {prefix}"
        )
        self.key = key
        self.prefix = prefix


class InvalidNumberError(EnvLoadError, ValueError):
    """Raised when a ``number`` variable cannot be parsed."""

    def __init__(self, value: str) -> None:
        super().__init__(f'Value "{value}" is not a valid number')
        self.value = value


class InvalidBooleanError(EnvLoadError, ValueError):
    """Raised when a ``boolean`` variable is neither true nor false."""

    def __init__(self, value: str) -> None:
        super().__init__(f'Value "{value}" is not a valid boolean')
        self.value = value
