"""Writer configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError

DEFAULT_INDENT = 2


class WriteOptions(BaseModel):
    """Formatting options for the writer.

    Parameters:
        indent: spaces added per nesting level (minimum 1).
        value_space: whether a single space follows the colon of a scalar.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    indent: int = Field(default=DEFAULT_INDENT, ge=1)
    value_space: bool = True

    @classmethod
    def create(cls, indent: int = DEFAULT_INDENT, value_space: bool = True) -> WriteOptions:
        """Build validated options, reporting problems as ConfigurationError."""
        try:
            return cls(indent=indent, value_space=value_space)
        except ValidationError as exc:
            raise ConfigurationError(f"invalid writer options: {exc}") from exc

    @property
    def indent_prefix(self) -> str:
        return " " * self.indent

    @property
    def separator(self) -> str:
        return ":" + (" " if self.value_space else "")
