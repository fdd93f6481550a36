"""Document: an ordered, commentable key -> entry mapping."""

from __future__ import annotations

import copy
from typing import Iterator

from .convert import INT_BITS, LONG_BITS, SHORT_BITS, parse_boolean, parse_floating, parse_integer
from .errors import InvalidArgumentError, TypeMismatchError
from .model import Entry, EntryType, Group, Scalar, escape_newlines, to_text
from .options import DEFAULT_INDENT


class Document:
    """Ordered mapping of keys to scalar text or nested documents.

    Usage::

        doc = Document()
        doc.put("name", "server", "display name")
        doc.put("limits", Document().put("max", 10))
        doc.get("name")                         # → "server"
        doc.get_group("limits").get_int("max")  # → 10
        print(doc.to_text(indent=4))
    """

    def __init__(self) -> None:
        self._entries: dict[str, Entry] = {}

    # -- Construction / rendering ---------------------------------------

    @classmethod
    def parse(cls, text: str) -> Document:
        """Parse a complete source text (see :mod:`janconf.reader`)."""
        from .reader import parse_text
        return parse_text(text)

    def to_text(self, indent: int = DEFAULT_INDENT, value_space: bool = True) -> str:
        from .writer import write_text
        return write_text(self, indent=indent, value_space=value_space)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Document({list(self._entries)!r})"

    # -- Mutation -------------------------------------------------------

    def put(self, key: str, value: object, comment: str | None = None) -> Document:
        """Store *value* under *key*, replacing any previous entry and comment.

        A ``Document`` value becomes a group; anything else is stored as text.
        Keys must not contain a colon or newline and must not start with a
        space or a ``#`` marker, since such keys cannot be written back.
        Returns ``self`` so calls can be chained.
        """
        if key is None or value is None:
            raise InvalidArgumentError("key or value is None")
        _check_key(key)
        if isinstance(value, Document):
            if value is self or value._reaches(self):
                raise InvalidArgumentError(f"putting {key!r} would make the document contain itself")
            entry = Entry(Group(value), comment)
        else:
            entry = Entry(Scalar(to_text(value)), comment)
        self._entries[key] = entry
        return self

    def merge(self, other: Document) -> Document:
        """Put every entry of *other* into this document, in *other*'s order.

        Existing keys are overwritten (value and comment); nested documents
        are deep-copied so each tree keeps sole ownership of its groups.
        """
        for key, entry in other.entries():
            if isinstance(entry.value, Group):
                self.put(key, copy.deepcopy(entry.value.document), entry.comment)
            else:
                self.put(key, entry.value.text, entry.comment)
        return self

    def remove(self, key: str) -> Document:
        self._entries.pop(key, None)
        return self

    # -- Scalar access --------------------------------------------------

    def get(self, key: str, default: object = None) -> str | None:
        """Return the scalar text for *key*, or *default* as text when absent."""
        entry = self._entries.get(key)
        if entry is None:
            return None if default is None else to_text(default)
        if isinstance(entry.value, Group):
            raise TypeMismatchError(f"{key!r} holds a group, not a scalar")
        return escape_newlines(entry.value.text)

    def get_int(self, key: str, default: int = 0) -> int:
        text = self.get(key)
        return default if text is None else parse_integer(text, INT_BITS)

    def get_long(self, key: str, default: int = 0) -> int:
        text = self.get(key)
        return default if text is None else parse_integer(text, LONG_BITS)

    def get_short(self, key: str, default: int = 0) -> int:
        text = self.get(key)
        return default if text is None else parse_integer(text, SHORT_BITS)

    def get_float(self, key: str, default: float = 0.0) -> float:
        text = self.get(key)
        return default if text is None else parse_floating(text)

    def get_double(self, key: str, default: float = 0.0) -> float:
        text = self.get(key)
        return default if text is None else parse_floating(text)

    def get_bool(self, key: str, default: bool = False) -> bool:
        text = self.get(key)
        return default if text is None else parse_boolean(text)

    # -- Group access ---------------------------------------------------

    def get_group(self, key: str, default: Document | None = None) -> Document | None:
        entry = self._entries.get(key)
        if entry is None:
            return default
        if isinstance(entry.value, Scalar):
            raise TypeMismatchError(f"{key!r} holds a scalar, not a group")
        return entry.value.document

    def get_group_safe(self, key: str) -> Document:
        """Like get_group(), but an absent key yields a new empty Document."""
        group = self.get_group(key)
        return Document() if group is None else group

    # -- Introspection --------------------------------------------------

    def has(self, key: str) -> bool:
        return key in self._entries

    def keys(self) -> list[str]:
        return list(self._entries)

    def entries(self) -> list[tuple[str, Entry]]:
        return list(self._entries.items())

    def type_of(self, key: str) -> EntryType | None:
        entry = self._entries.get(key)
        return None if entry is None else entry.type

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    __hash__ = None  # mutable

    # -- Comments -------------------------------------------------------

    def put_comment(self, key: str, comment: str | None) -> Document:
        """Set the comment of an existing key; absent keys are ignored."""
        entry = self._entries.get(key)
        if entry is not None:
            entry.comment = comment
        return self

    def get_comment(self, key: str) -> str | None:
        entry = self._entries.get(key)
        return None if entry is None else entry.comment

    def is_commented(self, key: str) -> bool:
        return self.get_comment(key) is not None

    def _reaches(self, target: Document) -> bool:
        """True if *target* is one of the groups nested anywhere below this document."""
        stack = [self]
        while stack:
            current = stack.pop()
            for entry in current._entries.values():
                if isinstance(entry.value, Group):
                    if entry.value.document is target:
                        return True
                    stack.append(entry.value.document)
        return False


def _check_key(key: str) -> None:
    if ":" in key or "\n" in key:
        raise InvalidArgumentError(f"key {key!r} must not contain ':' or a newline")
    if key.startswith(" ") or key.lstrip().startswith("#"):
        raise InvalidArgumentError(f"key {key!r} must not start with a space or '#'")
