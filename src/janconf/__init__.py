"""janconf: indentation-based configuration documents with comments."""

from .document import Document
from .errors import (
    ConfigurationError,
    FormatError,
    InvalidArgumentError,
    JanConfError,
    MalformedLineError,
    ParseError,
    TypeMismatchError,
)
from .model import Entry, EntryType, Group, Scalar
from .options import WriteOptions
from .reader import parse_lines, parse_text
from .writer import write_lines, write_text

__version__ = "1.4.4"
VERSION_BUILD = 102


def loads(text: str) -> Document:
    """Parse janconf source text."""
    return parse_text(text)


def dumps(document: Document, indent: int = 2, value_space: bool = True) -> str:
    """Render a Document as janconf source text."""
    return write_text(document, indent=indent, value_space=value_space)


__all__ = [
    "loads",
    "dumps",
    "parse_lines",
    "parse_text",
    "write_lines",
    "write_text",
    "Document",
    "Entry",
    "EntryType",
    "Group",
    "Scalar",
    "WriteOptions",
    "JanConfError",
    "InvalidArgumentError",
    "TypeMismatchError",
    "FormatError",
    "MalformedLineError",
    "ConfigurationError",
    "ParseError",
    "VERSION_BUILD",
    "__version__",
]
