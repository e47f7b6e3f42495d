"""CLI application entry point for curveclip.

This module provides the command-line interface using Typer.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from curveclip import __version__
from curveclip.cli.output import (
    console,
    print_control_points,
    print_document_info,
    print_error,
    print_header,
    print_outline_summary,
    print_step,
    print_success,
)
from curveclip.config import CurveClipSettings, LoggingConfig, OutlineConfig, RenderConfig
from curveclip.core import CubicFitter, QuadraticFitter, create_builder, flatten_outline
from curveclip.domain import CurveOutline, EdgePlacement, Size, format_number
from curveclip.exceptions import CurveClipError, DocumentLoadError, DocumentSaveError
from curveclip.io import DocumentReader, SvgWriter
from curveclip.utils import BuildLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="curveclip",
    help="Build clip outlines with a Bézier-curved edge from segment documents.",
    add_completion=False,
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """What `build` prints when no output file is given."""

    PATH = "path"
    JSON = "json"
    SVG = "svg"
    POLYGON = "polygon"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Curveclip[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Build clip outlines with a Bézier-curved edge from segment documents."""


def _load_document(document: Path) -> DocumentReader:
    """Load a segment document, mapping failures to DocumentLoadError."""
    if not document.is_file():
        raise DocumentLoadError(str(document), "file not found")
    reader = DocumentReader(document)
    try:
        reader.load()
    except ValidationError as e:
        raise DocumentLoadError(str(document), f"{e.error_count()} validation error(s)") from e
    except (OSError, ValueError) as e:
        raise DocumentLoadError(str(document), str(e)) from e
    return reader


def _resolve_size(
    document: Path, reader: DocumentReader, width: float | None, height: float | None
) -> Size:
    declared = reader.size
    if declared is None and (width is None or height is None):
        raise DocumentLoadError(
            str(document), "no size given; pass --width and --height"
        )
    return Size(
        width if width is not None else declared.width,  # type: ignore[union-attr]
        height if height is not None else declared.height,  # type: ignore[union-attr]
    )


def _polygon_text(outline: CurveOutline, tolerance: float, precision: int) -> str:
    """Flattened outline as space separated "x,y" pairs."""
    return " ".join(
        f"{format_number(p.x, precision)},{format_number(p.y, precision)}"
        for p in flatten_outline(outline, tolerance)
    )


@app.command()
def build(
    document: Annotated[
        Path,
        typer.Argument(help="Path to a JSON segment document", show_default=False),
    ],
    placement: Annotated[
        EdgePlacement | None,
        typer.Option("--placement", "-p", help="Override the document's edge placement"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", help="Region width (overrides the document)", min=0.0),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", help="Region height (overrides the document)", min=0.0),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output printed to stdout"),
    ] = OutputFormat.PATH,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write an SVG file instead of printing"),
    ] = None,
    precision: Annotated[
        int,
        typer.Option("--precision", help="Decimals kept in coordinates", min=0, max=10),
    ] = 3,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            help="Maximum curve deviation for --format polygon",
            min=0.001,
            max=10.0,
        ),
    ] = 0.5,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail on degenerate segments instead of emitting NaN"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Build the clip outline described by a segment document.

    Example:
        curveclip build wave.json --placement top --width 400 --height 200
    """
    logging_config = LoggingConfig(log_file=log_file, log_level=log_level)
    logger = configure_logging(
        log_file=logging_config.log_file,
        console_level=logging_config.log_level,
        file_level=logging_config.file_log_level,
        quiet=quiet,
    )
    build_logger = BuildLogger(logger)
    show_progress = output is not None and not quiet

    try:
        if show_progress:
            print_header(__version__)
            print_step("Loading segments")

        reader = _load_document(document)
        size = _resolve_size(document, reader, width, height)

        # Command line options override the document
        settings = CurveClipSettings(
            outline=OutlineConfig(
                placement=placement or reader.placement,
                reclip=reader.document.reclip,
                strict=strict,
            ),
            render=RenderConfig(precision=precision, flatten_tolerance=tolerance),
            logging=logging_config,
        )
        chosen = settings.outline.placement

        if show_progress:
            print_document_info(str(document), reader.kind, len(reader.segments), chosen.value)
            print_step("Building outline")

        builder = create_builder(
            reader.segments,
            placement=chosen,
            reclip=settings.outline.reclip,
            strict=settings.outline.strict,
        )
        try:
            outline = builder.build(size)
        except CurveClipError as e:
            build_logger.log_outline_error(document.stem, e)
            raise

        build_logger.log_outline_built(
            document.stem, chosen.value, outline.curve_count, outline.is_finite()
        )

        writer = SvgWriter(precision=settings.render.precision, fill=settings.render.fill)
        if output is not None:
            if show_progress:
                print_outline_summary(
                    len(outline), outline.curve_count, outline.is_closed, outline.is_finite()
                )
            try:
                writer.write(outline, size, output)
            except OSError as e:
                raise DocumentSaveError(str(output), str(e)) from e
            if show_progress:
                print_success(str(output))
            return

        if output_format is OutputFormat.JSON:
            data = {**outline.to_dict(), "reclip": builder.should_rebuild()}
            typer.echo(json.dumps(data, indent=2))
        elif output_format is OutputFormat.SVG:
            typer.echo(writer.render(outline, size), nl=False)
        elif output_format is OutputFormat.POLYGON:
            typer.echo(
                _polygon_text(
                    outline, settings.render.flatten_tolerance, settings.render.precision
                )
            )
        else:
            typer.echo(outline.to_svg_path(settings.render.precision))

    except DocumentLoadError as e:
        print_error(f"Could not load segments: {e.reason}")
        raise typer.Exit(code=1)
    except DocumentSaveError as e:
        print_error(f"Could not save outline: {e.reason}")
        raise typer.Exit(code=1)
    except CurveClipError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def fit(
    document: Annotated[
        Path,
        typer.Argument(help="Path to a JSON segment document", show_default=False),
    ],
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail on degenerate segments instead of emitting NaN"),
    ] = False,
) -> None:
    """Show the Bézier control points fitted for each segment."""
    try:
        reader = _load_document(document)
        print_document_info(
            str(document), reader.kind, len(reader.segments), reader.placement.value
        )
        fitter = (
            CubicFitter(strict=strict) if reader.kind == "cubic" else QuadraticFitter(strict=strict)
        )
        fitted = [fitter.fit(s, i) for i, s in enumerate(reader.segments)]  # type: ignore[arg-type]
        print_control_points(fitted)
    except DocumentLoadError as e:
        print_error(f"Could not load segments: {e.reason}")
        raise typer.Exit(code=1)
    except CurveClipError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
