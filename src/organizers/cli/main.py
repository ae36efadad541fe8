"""Typer CLI for drawer organizer designs."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from organizers.application import LayoutDocument, LayoutEditor, load_script, run_script
from organizers.application.config import ConfigError, load_design, load_settings
from organizers.cli.commands import display_load_error, validate_command
from organizers.domain.services.pricing import PricingCalculator
from organizers.domain.value_objects import DEFAULT_WOOD, DrawerDimensions, WoodType
from organizers.infrastructure import (
    CompartmentTableFormatter,
    LayoutDiagramFormatter,
    QuoteFormatter,
)
from organizers.infrastructure.exporters import ExporterRegistry, ExportManager

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="organizers",
    help="Design drawer organizers: split a drawer into compartments, price and export it.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log editing and export steps"),
    ] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_document(design_file: Path) -> LayoutDocument:
    """Load a design file or exit with code 1."""
    try:
        config = load_design(design_file)
        return LayoutDocument.from_config(config)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _emit(content: str, output_file: Path | None) -> None:
    if output_file is None:
        typer.echo(content)
        return
    output_file.write_text(content)
    typer.echo(f"Saved to {output_file}", err=True)


@app.command()
def new(
    width: Annotated[float, typer.Option("--width", "-w", help="Drawer width in inches")],
    depth: Annotated[float, typer.Option("--depth", "-d", help="Drawer depth in inches")],
    height: Annotated[float, typer.Option("--height", "-h", help="Drawer height in inches")],
    material: Annotated[
        WoodType, typer.Option("--material", "-m", help="Wood species")
    ] = DEFAULT_WOOD,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the design to this file"),
    ] = None,
) -> None:
    """Create a new design with a single compartment."""
    try:
        dimensions = DrawerDimensions(width=width, depth=depth, height=height)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    editor = LayoutEditor(dimensions, material=material)
    exporter = ExporterRegistry.get("json")()
    _emit(exporter.export_string(editor.export()), output_file)


@app.command()
def show(
    design_file: Annotated[Path, typer.Argument(help="Path to the JSON design file")],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: all, diagram, table"),
    ] = "all",
) -> None:
    """Show a design as an ASCII diagram and compartment table."""
    if output_format not in ("all", "diagram", "table"):
        typer.echo(f"Unknown format: {output_format}", err=True)
        raise typer.Exit(code=1)

    document = _load_document(design_file)
    if output_format in ("all", "diagram"):
        typer.echo(LayoutDiagramFormatter().format(document))
    if output_format == "all":
        typer.echo()
    if output_format in ("all", "table"):
        typer.echo(CompartmentTableFormatter().format(document))


@app.command()
def edit(
    design_file: Annotated[Path, typer.Argument(help="Path to the JSON design file")],
    script_file: Annotated[
        Path,
        typer.Option("--script", "-s", help="JSON list of editor operations"),
    ],
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the edited design to this file"),
    ] = None,
) -> None:
    """Apply a script of editor operations to a design.

    Operations that have no effect (selecting a missing block, undo at the
    start of history, an illegal drag) are reported and skipped.

    Example:
        organizers edit drawer.json --script ops.json -o drawer.json
    """
    document = _load_document(design_file)
    try:
        operations = load_script(script_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    settings = load_settings()
    editor = LayoutEditor(document.dimensions, max_history=settings.max_history)
    try:
        editor.load(document)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for step in run_script(editor, operations):
        status = "applied" if step.applied else "no effect"
        typer.echo(f"  [{step.index + 1}] {step.operation.op}: {status}", err=True)

    exporter = ExporterRegistry.get("json")()
    _emit(exporter.export_string(editor.export()), output_file)


@app.command()
def price(
    design_file: Annotated[Path, typer.Argument(help="Path to the JSON design file")],
    rate: Annotated[
        float | None,
        typer.Option("--rate", help="Price per square inch"),
    ] = None,
    multiplier: Annotated[
        float | None,
        typer.Option("--multiplier", help="Material price multiplier"),
    ] = None,
    settings_file: Annotated[
        Path | None,
        typer.Option("--settings", help="Editor settings JSON with pricing rates"),
    ] = None,
) -> None:
    """Quote a design by its wood area."""
    try:
        settings = load_settings(settings_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    document = _load_document(design_file)
    pricing = settings.pricing
    try:
        calculator = PricingCalculator(
            price_per_square_inch=rate if rate is not None else pricing.price_per_square_inch,
            material_multiplier=(
                multiplier if multiplier is not None else pricing.material_multiplier
            ),
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    quote = calculator.quote(document.dimensions, document.split_lines)
    typer.echo(QuoteFormatter().format(quote, currency=pricing.currency))


@app.command()
def export(
    design_file: Annotated[Path, typer.Argument(help="Path to the JSON design file")],
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Export format: dxf, json, sheet, svg"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for multi-format export"),
    ] = None,
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = "organizer",
) -> None:
    """Export a design to one or more formats."""
    available = ExporterRegistry.available_formats()

    if output_formats is not None:
        if output_formats.lower() == "all":
            formats = available
        else:
            formats = [f.strip().lower() for f in output_formats.split(",") if f.strip()]
        invalid = [f for f in formats if f not in available]
        if invalid:
            typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
            typer.echo(f"Available formats: {', '.join(available)}", err=True)
            raise typer.Exit(code=1)

        document = _load_document(design_file)
        manager = ExportManager(output_dir or Path.cwd())
        results = manager.export_all(formats, document, project_name)
        for format_name, path in results.items():
            typer.echo(f"  {format_name}: {path}")
        return

    format_name = (output_format or "json").lower()
    if format_name not in available:
        typer.echo(f"Unknown format: {format_name}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    document = _load_document(design_file)
    exporter = ExporterRegistry.get(format_name)()
    if output_file is None:
        typer.echo(exporter.export_string(document))
        return
    exporter.export(document, output_file)
    typer.echo(f"Exported {format_name} to {output_file}")


if __name__ == "__main__":
    app()
