"""Unit tests for the TypeScanner class."""

from nominal_types.structure import TypeScanner, TypeTokenType


def test_scan_nested_type_expression() -> None:
    """Verify that the TypeScanner splits a nested type expression into the expected tokens."""
    # Arrange - Create a scanner for type expressions
    scanner = TypeScanner()

    # Act - Scan an expression containing every kind of token
    tokens = list(scanner.tokenize("typeB[typeC, typeD[typeE]]"))

    # Assert - Expect names, brackets, and commas in order, ending with END
    assert [t.type_ for t in tokens] == [
        TypeTokenType.NAME,
        TypeTokenType.LEFT_BRACKET,
        TypeTokenType.NAME,
        TypeTokenType.COMMA,
        TypeTokenType.NAME,
        TypeTokenType.LEFT_BRACKET,
        TypeTokenType.NAME,
        TypeTokenType.RIGHT_BRACKET,
        TypeTokenType.RIGHT_BRACKET,
        TypeTokenType.END,
    ]
    assert [t.value for t in tokens if t.type_ == TypeTokenType.NAME] == [
        "typeB",
        "typeC",
        "typeD",
        "typeE",
    ]


def test_scan_records_token_indices() -> None:
    """Verify that scanned tokens record the index where they begin, skipping whitespace."""
    # Arrange/Act - Scan an expression padded with whitespace
    tokens = list(TypeScanner().tokenize(" list [ T ] "))

    # Assert - Whitespace produces no tokens, and indices refer to the original string
    assert [(t.value, t.index) for t in tokens] == [
        ("list", 1),
        ("[", 6),
        ("T", 8),
        ("]", 10),
        ("", 12),
    ]


def test_scan_empty_string() -> None:
    """Verify that scanning an empty string produces only the END token."""
    tokens = list(TypeScanner().tokenize(""))

    assert len(tokens) == 1
    assert tokens[0].type_ == TypeTokenType.END
    assert tokens[0].index == 0


def test_scan_symbols_as_names() -> None:
    """Verify that any characters other than delimiters and whitespace form names."""
    tokens = list(TypeScanner().tokenize("*[1,-x.y]"))

    names = [t.value for t in tokens if t.type_ == TypeTokenType.NAME]
    assert names == ["*", "1", "-x.y"]
