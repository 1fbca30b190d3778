"""Validate a type hierarchy definition file from the command line."""

from nominal_types.io.lint_cli import build_cli


def main() -> None:
    """Lint the type hierarchy file given as the first argument."""
    cli = build_cli()
    cli()


if __name__ == "__main__":
    main()
