"""Text -> number/boolean conversion used by the typed accessors."""

from __future__ import annotations

import re

from .errors import FormatError

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(
    r"^[+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)[fFdD]?$"
)

INT_BITS = 32
LONG_BITS = 64
SHORT_BITS = 16


def parse_integer(text: str, bits: int = INT_BITS) -> int:
    """Parse a signed decimal integer that must fit in *bits* bits.

    No surrounding whitespace, underscores or radix prefixes are accepted.
    """
    if not _INTEGER_RE.match(text):
        raise FormatError(f"not an integer: {text!r}")
    value = int(text)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise FormatError(f"{text!r} is out of range for a {bits}-bit integer")
    return value


def parse_floating(text: str) -> float:
    """Parse decimal or scientific notation, ``NaN`` and ``Infinity``.

    Surrounding whitespace and a trailing ``f``/``d`` type suffix are ignored.
    """
    stripped = text.strip()
    if not _FLOAT_RE.match(stripped):
        raise FormatError(f"not a number: {text!r}")
    if stripped[-1] in "fFdD":
        stripped = stripped[:-1]
    return float(stripped.replace("Infinity", "inf"))


def parse_boolean(text: str) -> bool:
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise FormatError(f"not a boolean: {text!r}")
