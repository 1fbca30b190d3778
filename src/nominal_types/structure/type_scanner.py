"""Implement a scanner for type expressions such as `typeB[typeC, typeD[typeE]]`."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Generator


class TypeTokenType(StrEnum):
    """Enumeration of token types when scanning type expressions."""

    NAME = r"[^\[\],\s]+"
    """Name of a type or of a generic type parameter."""

    LEFT_BRACKET = r"\["
    """Opens the parameter list of a type."""

    RIGHT_BRACKET = r"\]"
    """Closes the parameter list of a type."""

    COMMA = r","
    """Separates the parameters in a parameter list."""

    SKIP = r"\s+"
    """Whitespace is insignificant between tokens."""

    END = r"\Z"
    """Marks the end of the input; always the final token produced by the scanner."""

    @property
    def named_group_regex(self) -> str:
        """Retrieve the named group regular expression for the token type."""
        return f"(?P<{self.name}>{self.value})"


@dataclass(frozen=True)
class TypeToken:
    """A token scanned from a type expression.

    Reference: https://docs.python.org/3/library/re.html#writing-a-tokenizer
    """

    type_: TypeTokenType
    value: str
    index: int
    """Index of the token's first character in the scanned string."""


class TypeScanner:
    """A scanner splitting type expressions into names, brackets, and commas."""

    def __init__(self) -> None:
        """Compile the regular expression matching any single type-expression token."""
        self.token_regex = re.compile("|".join(tt.named_group_regex for tt in TypeTokenType))

    def tokenize(self, type_str: str) -> Generator[TypeToken]:
        """Tokenize a type expression into an iterator over tokens.

        Every character belongs to some token, so scanning never fails. The final token
        yielded is always of type `TypeTokenType.END`.

        :param type_str: String containing the type expression to be tokenized
        :yield: Iterator over the tokens in the string, excluding whitespace
        """
        for mo in self.token_regex.finditer(type_str):
            if mo.lastgroup is None:
                raise RuntimeError(f"Failed to tokenize type expression: '{type_str}'")

            token_type: TypeTokenType = getattr(TypeTokenType, mo.lastgroup)
            if token_type == TypeTokenType.SKIP:
                continue

            yield TypeToken(token_type, mo.group(), mo.start())
