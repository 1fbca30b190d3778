"""Define the errors raised when a type expression cannot be parsed.

The set of errors is closed: every malformed type expression produces exactly one of the four
subclasses of `TypeParseError`, each of which records the full input and the offending index.
"""

from __future__ import annotations


class TypeParseError(ValueError):
    """An error raised when a string is not a well-formed type expression."""

    reason = "Malformed type expression"

    def __init__(self, type_str: str, index: int) -> None:
        """Initialize the error for the given input and the index where parsing failed.

        :param type_str: Complete type expression that failed to parse
        :param index: Index (0-based) of the offending position within `type_str`
        """
        self.type_str = type_str
        self.index = index
        super().__init__(f"{self.reason} at index {index} of '{type_str}'.")

    @property
    def pointer(self) -> str:
        """Render the input with a caret under the offending position."""
        return f"{self.type_str}\n{' ' * self.index}^"

    def __repr__(self) -> str:
        """Return a concise representation naming the error type and position."""
        return f"{type(self).__name__}({self.type_str!r}, {self.index})"


class MissingTypeNameError(TypeParseError):
    """A type name was required (e.g., after `[` or `,`) but none was present."""

    reason = "Expected a type name"


class LeftBracketError(TypeParseError):
    """A left bracket was never closed before the end of the input.

    The recorded index is that of the unmatched left bracket.
    """

    reason = "Unmatched left bracket"


class RightBracketError(TypeParseError):
    """A right bracket appeared without a matching left bracket."""

    reason = "Unmatched right bracket"


class ExtraCharactersError(TypeParseError):
    """Characters remained after a syntactically complete type expression."""

    reason = "Unexpected extra characters"

    @property
    def extra(self) -> str:
        """Retrieve the unconsumed remainder of the input."""
        return self.type_str[self.index :]
