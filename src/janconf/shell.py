"""JanConfShell: interactive inspection and reformatting of janconf files.

Also provides the ``janconf`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import IO

from .document import Document
from .errors import JanConfError
from .model import EntryType
from .reader import parse_text, split_entry

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# JanConfShell class (programmatic use)
# ---------------------------------------------------------------------------

class JanConfShell:
    """Stateful shell that accumulates entries across calls.

    Usage::

        shell = JanConfShell()
        shell.load("server:\\n  port: 8080")
        shell.lookup("server.port")   # → "8080"
        shell.doc.keys()              # → ["server"]
        shell.reset()                 # clear state
    """

    def __init__(self, doc: Document | None = None) -> None:
        self.doc = doc if doc is not None else Document()

    def load(self, text: str) -> Document:
        """Parse *text* and merge its entries into the accumulated Document."""
        return self.doc.merge(parse_text(text))

    def lookup(self, path: str) -> str | Document | None:
        """Resolve a dotted path (``group.sub.key``) to scalar text or a group."""
        *parents, leaf = path.split(".")
        current: Document | None = self.doc
        for name in parents:
            current = current.get_group(name)
            if current is None:
                return None
        if current.type_of(leaf) is EntryType.GROUP:
            return current.get_group(leaf)
        return current.get(leaf)

    def type_of(self, path: str) -> EntryType | None:
        *parents, leaf = path.split(".")
        current: Document | None = self.doc
        for name in parents:
            if current.type_of(name) is not EntryType.GROUP:
                return None
            current = current.get_group(name)
        return current.type_of(leaf)

    def reset(self) -> None:
        self.doc = Document()


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_value(value: str | Document | None) -> str:
    if value is None:
        return "(not set)"
    if isinstance(value, Document):
        return value.to_text()
    return value


def _show_keys(shell: JanConfShell, dest: IO[str]) -> None:
    """Print top-level keys with their entry type."""
    if not len(shell.doc):
        print("  (no keys defined)", file=dest)
        return
    width = max(len(k) for k in shell.doc)
    for key in shell.doc:
        kind = shell.doc.type_of(key).name.lower()
        print(f"  {key:<{width}} : {kind}", file=dest)


def _load_file(shell: JanConfShell, filepath: str) -> None:
    try:
        shell.load(Path(filepath).read_text(encoding="utf-8"))
    except OSError as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
    except JanConfError as exc:
        print(f"Error parsing '{filepath}': {exc}", file=sys.stderr)


def _process_line(shell: JanConfShell, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":keys":
        _show_keys(shell, dest)
        return True

    if line == ":show":
        print(shell.doc.to_text(), file=dest)
        return True

    if line == ":reset":
        shell.reset()
        return True

    if line.startswith(":type "):
        kind = shell.type_of(line[6:].strip())
        print("(not set)" if kind is None else kind.name.lower(), file=dest)
        return True

    if line.startswith(":rm "):
        shell.doc.remove(line[4:].strip())
        return True

    # ── Batch file ────────────────────────────────────────────────────────
    if line.startswith("?<< "):
        _load_file(shell, line[4:].strip())
        return True

    # ── ? path ────────────────────────────────────────────────────────────
    if line.startswith("? "):
        try:
            value = shell.lookup(line[2:].strip())
        except JanConfError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return True
        print(_fmt_value(value), file=dest)
        return True

    # ── key: value ────────────────────────────────────────────────────────
    try:
        key, value = split_entry(line)
        shell.doc.put(key, value)
    except JanConfError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="janconf", description="janconf config reader / formatter")
    parser.add_argument("file", nargs="?", help="janconf file to load")
    parser.add_argument("--format", action="store_true", help="print the re-rendered file and exit")
    parser.add_argument("--indent", type=int, default=2, help="spaces per nesting level")
    parser.add_argument("--compact", action="store_true", help="no space after ':'")
    parser.add_argument("--type", dest="type_key", metavar="KEY", help="print the entry type of KEY")
    parser.add_argument("-o", "--output", help="write the rendered document to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def _format(shell: JanConfShell, args: argparse.Namespace) -> int:
    try:
        text = shell.doc.to_text(indent=args.indent, value_space=not args.compact)
    except JanConfError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        logger.info("wrote %s", args.output)
    else:
        print(text)
    if args.type_key:
        kind = shell.type_of(args.type_key)
        print("(not set)" if kind is None else kind.name.lower())
    return 0


def main(argv: list[str] | None = None) -> int:
    """``janconf`` command: reformat a file, or explore it interactively."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    shell = JanConfShell()

    if args.file:
        try:
            shell.load(Path(args.file).read_text(encoding="utf-8"))
        except OSError as exc:
            print(f"Error reading '{args.file}': {exc}", file=sys.stderr)
            return 1
        except JanConfError as exc:
            print(f"Error parsing '{args.file}': {exc}", file=sys.stderr)
            return 1

    if args.format:
        return _format(shell, args)

    print("janconf shell  (:q to quit  |  :keys  :show  :reset  :type <path>  :rm <key>  |  ? <path>  ?<< <file>)")

    while True:
        try:
            line = input("janconf> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not _process_line(shell, line, sys.stdout):
            break

    return 0


if __name__ == "__main__":
    sys.exit(main())
