"""Define a command-line interface for linting type hierarchy definition files."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table

from nominal_types.config import CycleReporting, ValidationConfig, load_validation_config
from nominal_types.diagnostics import Diagnostic, DiagnosticCollector, Severity
from nominal_types.hierarchy import validate_hierarchy
from nominal_types.io.logging import configure_logging, console, log_info
from nominal_types.io.yaml_utils import load_hierarchy_file

LOAD_FAILURE_EXIT_CODE = 2
"""Exit status used when the hierarchy or the configuration cannot be loaded."""


def diagnostic_cell(diagnostic: Diagnostic) -> str:
    """Render the markup shown for a diagnostic, pointing at the position of any parse error."""
    cell = escape(diagnostic.message)
    if diagnostic.error is not None:
        cell += f"\n[dim]{escape(diagnostic.error.pointer)}[/]"
    return cell


def _render_diagnostics_table(diagnostics: list[Diagnostic], source: Path) -> Table:
    """Render a numbered table listing the given diagnostics."""
    table = Table(title=f"Type Hierarchy: {source.name}", show_lines=False)
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Severity", no_wrap=True)
    table.add_column("Kind", style="magenta", no_wrap=True)
    table.add_column("Message")

    for idx, diagnostic in enumerate(diagnostics, start=1):
        color = "red" if diagnostic.severity == Severity.ERROR else "yellow"
        severity = f"[{color}]{diagnostic.severity}[/]"
        table.add_row(str(idx), severity, str(diagnostic.kind), diagnostic_cell(diagnostic))
    return table


def _resolve_config(
    config_path: Path | None,
    cycles: str | None,
    strict: bool,
) -> ValidationConfig:
    """Load the validation config (if a path was given) and apply command-line overrides."""
    config = ValidationConfig() if config_path is None else load_validation_config(config_path)

    overrides: dict[str, object] = {}
    if cycles is not None:
        overrides["cycle_reporting"] = CycleReporting(cycles)
    if strict:
        overrides["warnings_as_errors"] = True

    return config.model_copy(update=overrides) if overrides else config


def build_cli() -> click.Command:
    """Create a Click command that validates a type hierarchy file and reports its problems.

    :return: A Click command that can be used as an entry point or subcommand
    """

    @click.command()
    @click.argument(
        "hierarchy_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
    )
    @click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="YAML file of validation options.",
    )
    @click.option("--key", default=None, help="Top-level key under which the hierarchy is nested.")
    @click.option(
        "--cycles",
        type=click.Choice([m.value for m in CycleReporting]),
        default=None,
        help="How circular dependencies are reported.",
    )
    @click.option("--strict", is_flag=True, help="Treat warnings as errors.")
    @click.option("--quiet", is_flag=True, help="Only print the summary line.")
    @click.option("--verbose", is_flag=True, help="Log progress messages.")
    @click.pass_context
    def cli(
        ctx: click.Context,
        hierarchy_file: Path,
        config_path: Path | None,
        key: str | None,
        cycles: str | None,
        strict: bool,
        quiet: bool,
        verbose: bool,
    ) -> None:
        """Validate the type hierarchy defined in HIERARCHY_FILE (YAML or JSON)."""
        if verbose:
            configure_logging(logging.DEBUG)

        try:
            config = _resolve_config(config_path, cycles, strict)
            hierarchy_def = load_hierarchy_file(hierarchy_file, key=key)
        except (FileNotFoundError, KeyError, RuntimeError) as err:
            console.print(f"[red]{escape(str(err))}[/]")
            ctx.exit(LOAD_FAILURE_EXIT_CODE)

        log_info(f"Validating the type hierarchy in {hierarchy_file}...")
        collector = DiagnosticCollector()
        validate_hierarchy(hierarchy_def, sink=collector, config=config)

        if not collector.diagnostics:
            console.print("[green]No problems found.[/]")
            ctx.exit(0)

        if not quiet:
            console.print(_render_diagnostics_table(collector.diagnostics, hierarchy_file))

        num_errors = len(collector.errors)
        num_warnings = len(collector.warnings)
        console.print(f"Found {num_errors} error(s) and {num_warnings} warning(s).")
        ctx.exit(1 if num_errors else 0)

    return cli


def main() -> None:
    """Run the type hierarchy linter as a console script."""
    build_cli()()
