"""Reader layer: converts janconf source lines into a Document."""

from __future__ import annotations

import logging
from typing import Iterable

from .document import Document
from .errors import MalformedLineError, ParseError

logger = logging.getLogger(__name__)

# (1-based source line number, raw text)
NumberedLine = tuple[int, str]


# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------

def count_leading_spaces(line: str) -> int:
    """Indentation level: number of leading space characters (tabs do not count)."""
    return len(line) - len(line.lstrip(" "))


def is_blank(line: str) -> bool:
    return not line.strip()


def is_comment(line: str) -> bool:
    return line.lstrip().startswith("#")


def comment_text(line: str) -> str:
    """Text after the ``#`` marker, trimmed."""
    return line.lstrip()[1:].strip()


def fold_comment(pending: str | None, line: str) -> str:
    """Append a comment line to the pending comment (multi-line comments join with newlines)."""
    text = comment_text(line)
    return text if pending is None else pending + "\n" + text


def split_entry(line: str, lineno: int | None = None) -> tuple[str, str]:
    """Split ``key: value`` on the first colon.

    The key keeps everything before the colon; the value is trimmed.
    """
    pos = line.find(":")
    if pos < 0:
        raise MalformedLineError("expected 'key: value', no ':' found", lineno, line)
    return line[:pos], line[pos + 1:].strip()


# ---------------------------------------------------------------------------
# Lookahead
# ---------------------------------------------------------------------------

def heads_group(lines: list[NumberedLine], start: int) -> bool:
    """Return True if the first substantive line from *start* is indented.

    Blank and comment lines are skipped.  Reaching the end means no group.
    """
    for index in range(start, len(lines)):
        line = lines[index][1]
        if is_blank(line) or is_comment(line):
            continue
        return count_leading_spaces(line) > 0
    return False


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_text(text: str) -> Document:
    """Parse a complete source text into a Document."""
    return parse_lines(line.removesuffix("\r") for line in text.split("\n"))


def parse_lines(lines: Iterable[str]) -> Document:
    """Parse source lines into a Document.

    Any structural problem aborts the whole parse and is reported as a
    single ParseError whose ``cause`` is the underlying error.
    """
    numbered = list(enumerate(lines, start=1))
    try:
        return _read(numbered)
    except MalformedLineError as exc:
        logger.debug("parse aborted: %s", exc)
        raise ParseError("failed to parse janconf source", exc) from exc


def _read(lines: list[NumberedLine]) -> Document:
    doc = Document()
    key: str | None = None
    pending: str | None = None
    group_comment: str | None = None
    in_group = False  # lookahead decided that `key` opens a group
    body: list[NumberedLine] = []

    for index, (lineno, line) in enumerate(lines):
        if is_blank(line):
            continue

        indent = count_leading_spaces(line)

        # Indented comments under a group head belong to the group body.
        if is_comment(line) and not (in_group and indent > 0):
            pending = fold_comment(pending, line)
            continue

        if indent > 0:
            if not in_group:
                raise MalformedLineError("indented line has no parent key", lineno, line)
            if not body:
                group_comment, pending = pending, None
                logger.debug("group %r opens at line %d", key, lineno)
            body.append((lineno, line))
            continue

        if body:
            _close_group(doc, key, body, group_comment)
            body = []
            group_comment = None

        key, value = split_entry(line, lineno)
        in_group = heads_group(lines, index + 1)
        if not in_group:
            doc.put(key, value, pending)
            pending = None

    if body:
        _close_group(doc, key, body, group_comment)

    return doc


def _close_group(
    doc: Document,
    key: str,
    body: list[NumberedLine],
    comment: str | None,
) -> None:
    """Parse the buffered sub-lines of *key* and store them as a group."""
    base = next(
        count_leading_spaces(line) for _, line in body if not is_comment(line)
    )
    sub_lines = [
        (lineno, line[min(base, count_leading_spaces(line)):])
        for lineno, line in body
    ]
    logger.debug("group %r closes with %d line(s), base indent %d", key, len(body), base)
    doc.put(key, _read(sub_lines), comment)
