"""`organizers validate`: check a design file before it is cut.

Load errors and layout errors fail the run. Build advisories are reported
as warnings.
"""

from pathlib import Path
from typing import Annotated

import typer

from organizers.application.config import (
    ConfigError,
    ValidationResult,
    load_design,
    validate_design,
)


def display_load_error(error: ConfigError) -> None:
    """Display a design loading error on stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Design is valid.")


def validate_command(
    design_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON design file to validate"),
    ],
) -> None:
    """Validate a drawer organizer design file.

    Checks the design file for:
    - JSON syntax errors
    - Schema errors (missing fields, dimensions off the 1/4" increment, etc.)
    - Layout errors (gaps, overlaps, undersized or off-grid compartments)
    - Build advisories (tiny compartments, tall short dividers)

    Exit codes:
        0 - Design is valid with no warnings
        1 - Design has errors (cannot be built)
        2 - Design is valid but has warnings

    Example:
        organizers validate kitchen-drawer.json
    """
    typer.echo(f"Validating {design_file}...")
    typer.echo()

    try:
        config = load_design(design_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    result = validate_design(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)
