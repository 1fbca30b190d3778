"""Implement a parser for type expressions.

Grammar:

    expr       := name ( '[' param_list ']' )?
    param_list := expr ( ',' expr )*
    name       := one or more characters other than '[', ']', ',', and whitespace

Nested parameter lists are tracked on an explicit stack rather than through recursion, so the
nesting depth of an expression is limited only by the length of its text.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from nominal_types.structure.parse_errors import (
    ExtraCharactersError,
    LeftBracketError,
    MissingTypeNameError,
    RightBracketError,
)
from nominal_types.structure.type_scanner import TypeScanner, TypeToken, TypeTokenType
from nominal_types.structure.type_structure import TypeStructure


@dataclass
class OpenParamList:
    """A parameter list whose left bracket has been consumed but which is not yet closed."""

    name: str
    """Name of the type that the parameters belong to."""

    bracket: TypeToken
    """Left bracket token that opened the list."""

    params: list[TypeStructure] = field(default_factory=list)
    """Parameters parsed so far, in order."""


class TypeParser:
    """A parser converting a single type expression string into a `TypeStructure`."""

    def __init__(self, type_str: str) -> None:
        """Initialize the type parser for the given string."""
        self.type_str = type_str
        self.scanner = TypeScanner()
        self.remaining_tokens = self.scanner.tokenize(type_str)
        self.input_token: TypeToken = next(self.remaining_tokens)
        """Once the input token type is `TypeTokenType.END`, all tokens have been consumed."""

    def match(self, token_type: TypeTokenType) -> TypeToken:
        """Consume a token of the given type from the scanner.

        :param token_type: Expected type of the next token
        :return: Token consumed from the scanner
        """
        if self.input_token.type_ != token_type:
            raise RuntimeError(
                f"Expected token type {token_type.name} but found {self.input_token.type_.name}.",
            )

        matched_token = self.input_token
        if matched_token.type_ != TypeTokenType.END:
            self.input_token = next(self.remaining_tokens)
        return matched_token

    def parse(self) -> TypeStructure:
        """Parse the entire input as a single type expression.

        :return: Structure of the parsed type expression
        :raises TypeParseError: One of its four subclasses, if the input is malformed
        """
        structure = self.type_structure()

        match self.input_token.type_:
            case TypeTokenType.END:
                return structure
            case TypeTokenType.RIGHT_BRACKET:
                raise RightBracketError(self.type_str, self.input_token.index)
            case _:
                raise ExtraCharactersError(self.type_str, self.input_token.index)

    def type_structure(self) -> TypeStructure:
        """Parse one type expression (a name and its optional, arbitrarily nested parameters)."""
        open_lists: list[OpenParamList] = []

        while True:
            if self.input_token.type_ != TypeTokenType.NAME:
                if open_lists and self.input_token.type_ == TypeTokenType.END:
                    raise LeftBracketError(self.type_str, open_lists[-1].bracket.index)
                raise MissingTypeNameError(self.type_str, self.input_token.index)

            name = self.match(TypeTokenType.NAME).value
            if self.input_token.type_ == TypeTokenType.LEFT_BRACKET:
                open_lists.append(OpenParamList(name, self.match(TypeTokenType.LEFT_BRACKET)))
                continue

            structure = self._close_lists(TypeStructure(name), open_lists)
            if structure is not None:
                return structure

    def _close_lists(
        self,
        structure: TypeStructure,
        open_lists: list[OpenParamList],
    ) -> TypeStructure | None:
        """Add a completed parameter to the innermost open list and close every finished list.

        :param structure: Type expression that was just completed
        :param open_lists: Stack of open parameter lists, innermost last (modified in place)
        :return: The complete outermost expression, or None if another parameter must follow
        """
        while open_lists:
            current = open_lists[-1]
            current.params.append(structure)

            match self.input_token.type_:
                case TypeTokenType.COMMA:
                    self.match(TypeTokenType.COMMA)
                    return None
                case TypeTokenType.RIGHT_BRACKET:
                    self.match(TypeTokenType.RIGHT_BRACKET)
                    open_lists.pop()
                    structure = TypeStructure(current.name, tuple(current.params))
                case TypeTokenType.END:
                    raise LeftBracketError(self.type_str, current.bracket.index)
                case _:  # A second name follows a parameter without a separating comma
                    raise ExtraCharactersError(self.type_str, self.input_token.index)

        return structure


def parse_type(type_str: str, caseless: bool = False) -> TypeStructure:
    """Parse the given string into a type structure.

    :param type_str: Type expression such as `typeB[typeC, typeD[typeE]]`
    :param caseless: Whether to convert every name in the result to lowercase (default: False)
    :return: Parsed structure of the type expression
    :raises TypeParseError: If the string is not a well-formed type expression
    """
    structure = TypeParser(type_str).parse()
    return structure.lowered() if caseless else structure
