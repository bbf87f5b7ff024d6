"""Pydantic schema models describing the variables an environment file declares."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

ConfigValue = str | int | float | bool
EnvConfig = dict[str, str]
TypedEnvConfig = dict[str, ConfigValue]


class VariableType(str, Enum):
    """Primitive types a declared variable is coerced to."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class VariableSpec(BaseModel):
    """Schema entry for one unprefixed variable name."""

    default: str | None = None
    required: bool = False
    type: VariableType = VariableType.STRING


class LoadOptions(BaseModel):
    """Options for the schema-driven loader.

    ``variables`` is keyed by the bare name; the full key in the file is
    ``prefix + name``. Keys are processed in insertion order.
    """

    prefix: str = ""
    variables: dict[str, VariableSpec]

    def full_key(self, name: str) -> str:
        return f"{self.prefix}{name}"
