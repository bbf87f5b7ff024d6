"""Line parser for ``.env`` files.

A line is ignored when, after trimming, it is blank or starts with ``#``.
Every other line is split on its first ``=``: the key is what precedes it and
the value is the remainder, so values may contain ``=`` but keys cannot.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from envloader.errors import MalformedLineError


class ParseMode(str, Enum):
    """How the parser treats lines that are not ``KEY=VALUE``.

    - STRICT: a missing ``=``, an empty key or an empty value is an error
    - LENIENT: a line without ``=`` becomes a key with an empty value
    """

    STRICT = "strict"
    LENIENT = "lenient"


@dataclass(frozen=True)
class RawLine:
    """A single trimmed input line."""

    content: str

    @classmethod
    def from_text(cls, line: str) -> RawLine:
        return cls(content=line.strip())

    @property
    def is_ignorable(self) -> bool:
        return not self.content or self.content.startswith("#")


@dataclass(frozen=True)
class RawPair:
    """Key and value taken from one line, both trimmed."""

    key: str
    value: str


def parse_line(line: str, mode: ParseMode = ParseMode.LENIENT) -> RawPair | None:
    """Parse one line of an environment file.

    Args:
        line: Raw line text, without the trailing newline
        mode: Strictness applied to lines that are not ``KEY=VALUE``

    Returns:
        The parsed pair, or None for blank and comment lines

    Raises:
        MalformedLineError: In strict mode, if the line has no ``=`` or the
            key or value is empty
    """
    raw = RawLine.from_text(line)
    if raw.is_ignorable:
        return None

    key, separator, value = raw.content.partition("=")
    key = key.strip()
    value = value.strip()

    if mode == ParseMode.STRICT and (not separator or not key or not value):
        raise MalformedLineError(line)

    return RawPair(key=key, value=value)


def parse_lines(text: str, mode: ParseMode = ParseMode.LENIENT) -> dict[str, str]:
    """Parse file content into a key/value mapping.

    Later occurrences of a key overwrite earlier ones.
    """
    pairs: dict[str, str] = {}
    for line in text.split("\n"):
        pair = parse_line(line, mode)
        if pair is not None:
            pairs[pair.key] = pair.value
    return pairs
