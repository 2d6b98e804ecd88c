"""CLI entry point for robot part generation."""

import logging
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError

from .errors import BotPartsError

app = typer.Typer(
    name="botparts",
    help="Parametric robot parts - converts YAML part lists to 3D-printable files",
)

PART_KINDS = [
    ("wheel", "O-ring tyred wheel for d-shaft, TT or round motor shafts"),
    ("board_carrier", "Base plate with 2 or 4 mount towers for a circuit board"),
]


def _load_parts_file(spec_file: Path):
    from .models.spec import PartsFile

    if not spec_file.exists():
        typer.echo(f"Error: Part file not found: {spec_file}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Loading parts from {spec_file}...")
    with open(spec_file) as f:
        data = yaml.safe_load(f)

    try:
        return PartsFile.model_validate(data)
    except ValidationError as e:
        typer.echo(f"Validation error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def build(
    spec_file: Path = typer.Argument(..., help="Path to YAML part file"),
    output_dir: Path = typer.Option(
        Path("output"), "-o", "--output", help="Output directory for generated files"
    ),
    formats: str = typer.Option(
        "stl,step", "--formats", help="Comma-separated export formats (stl,step,scad)"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log derived dimensions"),
) -> None:
    """Generate every part in a YAML part file."""
    from .generators import PartsConfig, generator_for
    from .export.exporter import Exporter

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    parts_file = _load_parts_file(spec_file)
    config = PartsConfig().with_inserts(parts_file.use_threaded_inserts)

    export_formats = [fmt.strip().lower() for fmt in formats.split(",")]
    try:
        exporter = Exporter(output_dir, export_formats)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    parts = {}
    metadata = {}
    for spec in parts_file.parts:
        typer.echo(f"Generating {spec.kind}: {spec.name}")
        generator = generator_for(spec, config)
        try:
            parts[spec.name] = generator.generate()
        except BotPartsError as e:
            typer.echo(f"Error in part {spec.name}: {e}", err=True)
            raise typer.Exit(1)
        metadata[spec.name] = generator.get_metadata()

    try:
        outputs = exporter.export(parts, metadata)
    except BotPartsError as e:
        typer.echo(f"Export failed: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Wrote {len(outputs)} files to {output_dir}")


@app.command()
def validate(
    spec_file: Path = typer.Argument(..., help="Path to YAML part file"),
) -> None:
    """Validate a part file and its derived dimensions without exporting."""
    from .generators import PartsConfig, generator_for

    parts_file = _load_parts_file(spec_file)
    config = PartsConfig().with_inserts(parts_file.use_threaded_inserts)

    failed = False
    for spec in parts_file.parts:
        generator = generator_for(spec, config)
        try:
            generator.generate()
        except BotPartsError as e:
            typer.echo(f"  {spec.name}: {type(e).__name__}: {e}", err=True)
            failed = True
            continue
        metadata = generator.get_metadata()
        typer.echo(f"  {spec.name}: {metadata.name}")
        for key, value in metadata.dimensions.items():
            typer.echo(f"    {key}: {value:.2f}")

    if failed:
        raise typer.Exit(1)
    typer.echo("Part file valid")


@app.command()
def list_parts() -> None:
    """List all available part kinds."""
    typer.echo("Available part kinds:\n")
    for name, description in PART_KINDS:
        typer.echo(f"  {name:<20} {description}")

    typer.echo("\nUsage: botparts build <part-file.yaml> [OPTIONS]")


if __name__ == "__main__":
    app()
