"""Writer layer: renders a Document back to janconf source text."""

from __future__ import annotations

from .document import Document
from .model import Group
from .options import DEFAULT_INDENT, WriteOptions


def write_lines(document: Document, options: WriteOptions | None = None) -> list[str]:
    """Render *document* as a list of lines (no trailing newlines)."""
    options = options or WriteOptions()
    lines: list[str] = []
    for key, entry in document.entries():
        if entry.comment is not None:
            lines.extend(f"# {segment}" for segment in entry.comment.split("\n"))
        if isinstance(entry.value, Group):
            lines.append(f"{key}:")
            prefix = options.indent_prefix
            lines.extend(prefix + child for child in write_lines(entry.value.document, options))
        else:
            lines.append(f"{key}{options.separator}{entry.value.text}")
    return _trim_blank(lines)


def write_text(document: Document, indent: int = DEFAULT_INDENT, value_space: bool = True) -> str:
    """Render *document* as one string.

    Raises ConfigurationError when *indent* is below 1.
    """
    options = WriteOptions.create(indent=indent, value_space=value_space)
    return "\n".join(write_lines(document, options)).rstrip()


def _trim_blank(lines: list[str]) -> list[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]
