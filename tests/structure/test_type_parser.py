"""Unit tests for parsing type expressions into type structures."""

from __future__ import annotations

import pytest
from hypothesis import given

from nominal_types.structure import (
    ExtraCharactersError,
    LeftBracketError,
    MissingTypeNameError,
    RightBracketError,
    TypeParseError,
    TypeStructure,
    parse_type,
)

from ..strategies.type_strategies import type_expression_texts, type_structures


def test_parse_simple_name() -> None:
    """Verify that a bare type name parses into a structure without parameters."""
    assert parse_type("typeA") == TypeStructure("typeA")


def test_parse_nested_parameters() -> None:
    """Verify that nested parameter lists are parsed recursively and in order."""
    # Arrange/Act - Parse a type with two parameters, one of which has its own parameter
    result = parse_type("typeB[typeC, typeD[typeE]]")

    # Assert - Expect the full nested structure
    assert result == TypeStructure(
        "typeB",
        (
            TypeStructure("typeC"),
            TypeStructure("typeD", (TypeStructure("typeE"),)),
        ),
    )


def test_parse_ignores_whitespace_around_delimiters() -> None:
    """Verify that whitespace around names, brackets, and commas is insignificant."""
    assert parse_type("  typeB [ typeC ,typeD ]  ") == parse_type("typeB[typeC,typeD]")


def test_parse_preserves_case_by_default() -> None:
    """Verify that names keep their original case unless a caseless parse is requested."""
    assert parse_type("TypeB[TypeC]").name == "TypeB"
    assert parse_type("TypeB[TypeC]", caseless=True) == TypeStructure(
        "typeb",
        (TypeStructure("typec"),),
    )


DEEP_DEPTH = 5000
"""Nesting depth well beyond the interpreter's default recursion limit."""


def test_parse_deeply_nested_expression() -> None:
    """Verify that parameters can be nested to a depth limited only by the input's length."""
    # Arrange - Nest a single parameter thousands of levels deep
    type_str = "t[" * DEEP_DEPTH + "leaf" + "]" * DEEP_DEPTH

    # Act - Parse the expression (caselessly, to also lowercase every level)
    result = parse_type(type_str.upper(), caseless=True)

    # Assert - Expect one level per bracket pair, ending at the innermost name
    assert str(result) == type_str
    for _ in range(DEEP_DEPTH):
        assert result.name == "t"
        assert len(result.params) == 1
        result = result.params[0]
    assert result.name == "leaf"
    assert result.params == ()


@pytest.mark.parametrize(
    ("type_str", "error_type", "index"),
    [
        ("t[" * DEEP_DEPTH + "leaf", LeftBracketError, 2 * DEEP_DEPTH - 1),
        (
            "t[" * DEEP_DEPTH + "leaf" + "]" * (DEEP_DEPTH + 1),
            RightBracketError,
            3 * DEEP_DEPTH + 4,
        ),
        ("t[" * DEEP_DEPTH + "]" * DEEP_DEPTH, MissingTypeNameError, 2 * DEEP_DEPTH),
    ],
    ids=["unclosed", "extra_right_bracket", "empty_innermost_list"],
)
def test_parse_deeply_nested_errors(
    type_str: str,
    error_type: type[TypeParseError],
    index: int,
) -> None:
    """Verify that errors in deeply nested expressions keep their kind and position."""
    with pytest.raises(error_type) as exc_info:
        parse_type(type_str)

    assert exc_info.value.index == index


@pytest.mark.parametrize(
    ("type_str", "error_type", "index"),
    [
        ("[typeB]", MissingTypeNameError, 0),
        ("", MissingTypeNameError, 0),
        ("typeB[]", MissingTypeNameError, 6),
        ("typeB[A,]", MissingTypeNameError, 8),
        ("typeB[[A]]", MissingTypeNameError, 6),
        ("typeB[", LeftBracketError, 5),
        ("typeB[A,", LeftBracketError, 5),
        ("typeB[A[B]", LeftBracketError, 5),
        ("typeB]", RightBracketError, 5),
        ("typeB[A]]", RightBracketError, 8),
        ("typeB[typeB]test", ExtraCharactersError, 12),
        ("typeA, typeB", ExtraCharactersError, 5),
        ("typeB[type C]", ExtraCharactersError, 11),
    ],
)
def test_parse_malformed_expressions(
    type_str: str,
    error_type: type[TypeParseError],
    index: int,
) -> None:
    """Verify that each malformed expression raises the expected error at the expected index."""
    with pytest.raises(error_type) as exc_info:
        parse_type(type_str)

    assert type(exc_info.value) is error_type
    assert exc_info.value.type_str == type_str
    assert exc_info.value.index == index


def test_extra_characters_error_reports_remainder() -> None:
    """Verify that an ExtraCharactersError exposes the unconsumed part of the input."""
    with pytest.raises(ExtraCharactersError) as exc_info:
        parse_type("typeB[typeB]test")

    assert exc_info.value.extra == "test"
    assert exc_info.value.pointer == "typeB[typeB]test\n            ^"


def test_parse_errors_are_value_errors() -> None:
    """Verify that parse errors can be caught as ValueErrors and describe their position."""
    with pytest.raises(ValueError, match="Unmatched left bracket at index 5 of 'typeB\\['"):
        parse_type("typeB[")


def test_render_type_structure() -> None:
    """Verify that a type structure renders in its canonical textual form."""
    assert str(parse_type("pair[ key,list[value] ]")) == "pair[key, list[value]]"


def test_generic_type_structures() -> None:
    """Verify that single-character type names are recognized as generics."""
    assert parse_type("T").is_generic
    assert parse_type("*").is_generic
    assert not parse_type("list[T]").is_generic


@given(type_structures())
def test_parse_rendered_structure(structure: TypeStructure) -> None:
    """Verify that parsing the rendered form of any type structure recovers that structure."""
    assert parse_type(str(structure)) == structure


@given(type_expression_texts())
def test_parse_is_total_and_deterministic(type_str: str) -> None:
    """Verify that parsing any string yields a structure or a single TypeParseError, repeatably."""
    # Arrange/Act - Parse the same string twice, capturing either outcome
    outcomes = []
    for _ in range(2):
        try:
            outcomes.append(parse_type(type_str))
        except TypeParseError as error:
            outcomes.append((type(error), error.index))

    # Assert - Expect both attempts to agree
    assert outcomes[0] == outcomes[1]
