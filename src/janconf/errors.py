"""Error hierarchy for janconf."""

from __future__ import annotations


class JanConfError(Exception):
    """Base class for every error raised by janconf."""


class InvalidArgumentError(JanConfError, ValueError):
    """A mutator received a missing key or value."""


class TypeMismatchError(JanConfError, TypeError):
    """An accessor was used on an entry of the other variant."""


class FormatError(JanConfError, ValueError):
    """Stored text cannot be read as the requested type."""


class ConfigurationError(JanConfError, ValueError):
    """Invalid writer options."""


class MalformedLineError(JanConfError, ValueError):
    """A structural line does not follow the grammar."""

    def __init__(self, message: str, lineno: int | None = None, line: str | None = None) -> None:
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)


class ParseError(JanConfError):
    """Raised when a source cannot be parsed; ``cause`` holds the reason."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message if cause is None else f"{message}: {cause}")
        self.cause = cause
