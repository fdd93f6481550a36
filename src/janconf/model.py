"""Entry model: the tagged union stored under each document key."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .document import Document


# ---------------------------------------------------------------------------
# EntryType
# ---------------------------------------------------------------------------

class EntryType(Enum):
    SCALAR = auto()
    GROUP = auto()


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Scalar:
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(slots=True)
class Group:
    document: Document


EntryValue = Union[Scalar, Group]


# ---------------------------------------------------------------------------
# Entry
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Entry:
    """A value plus the comment written above it (``None`` = no comment)."""

    value: EntryValue
    comment: str | None = None

    @property
    def type(self) -> EntryType:
        if isinstance(self.value, Group):
            return EntryType.GROUP
        return EntryType.SCALAR


def escape_newlines(text: str) -> str:
    """Fold literal newlines into the two-character ``\\n`` escape."""
    return text.replace("\n", "\\n")


def to_text(value: object) -> str:
    """Convert a put() value to scalar text; booleans use the format's spelling."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return escape_newlines(str(value))
