"""CLI application entry point for msdf-atlasgen.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from msdf_atlasgen import __version__
from msdf_atlasgen.cli.output import (
    console,
    print_error,
    print_font_info,
    print_header,
    print_metrics,
    print_sample_glyphs,
    print_step,
    print_success,
)
from msdf_atlasgen.config import (
    AtlasConfig,
    AtlasType,
    GeneratorSettings,
    LocatorConfig,
    LoggingConfig,
    LogLevel,
)
from msdf_atlasgen.core import AtlasGenerator
from msdf_atlasgen.exceptions import AtlasGenError, ToolExecutionError
from msdf_atlasgen.io import FontReader
from msdf_atlasgen.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="msdf-atlasgen",
    help="Generate a multi-channel signed distance field font atlas with msdf-atlas-gen.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]msdf-atlasgen[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def generate_atlas(
    font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF font file",
            show_default=False,
        ),
    ],
    atlas_type: Annotated[
        AtlasType,
        typer.Option(
            "--type",
            "-t",
            help="Distance field type",
            case_sensitive=False,
        ),
    ] = AtlasType.MSDF,
    width: Annotated[
        int,
        typer.Option("--width", "-W", help="Atlas width in pixels", min=1),
    ] = 512,
    height: Annotated[
        int,
        typer.Option("--height", "-H", help="Atlas height in pixels", min=1),
    ] = 512,
    size: Annotated[
        int,
        typer.Option("--size", "-s", help="Glyph em size in pixels"),
    ] = 64,
    pxrange: Annotated[
        int,
        typer.Option("--pxrange", "-r", help="Distance field range in pixels"),
    ] = 4,
    charset: Annotated[
        Path | None,
        typer.Option("--charset", "-c", help="msdf-atlas-gen charset file"),
    ] = None,
    image_out: Annotated[
        Path | None,
        typer.Option("--image-out", "-o", help="Atlas image path (default: temp file)"),
    ] = None,
    json_out: Annotated[
        Path | None,
        typer.Option("--json-out", "-j", help="Atlas JSON path (default: temp file)"),
    ] = None,
    binary: Annotated[
        Path | None,
        typer.Option("--binary", help="Use this msdf-atlas-gen executable"),
    ] = None,
    samples: Annotated[
        int,
        typer.Option("--samples", help="Number of sample glyphs to list", min=0),
    ] = 10,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            help="Logging level",
            case_sensitive=False,
        ),
    ] = LogLevel.WARNING,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
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
    """Generate a font atlas and print its metrics.

    Example:
        msdf-atlasgen Roboto-Regular.ttf -o atlas.png -j atlas.json

    This packs the font's glyphs into atlas.png and writes glyph placement,
    kerning and font metrics to atlas.json.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not font.is_file():
        print_error(
            f"Input file not found: {font}",
            details=f"The file '{font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    settings = GeneratorSettings(
        locator=LocatorConfig(binary_path=binary),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=LogLevel.DEBUG if verbose else log_level,
        ),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level.value,
        file_level=settings.logging.file_log_level.value,
        quiet=quiet,
    )

    config = AtlasConfig(
        font_path=font,
        atlas_type=atlas_type,
        width=width,
        height=height,
        glyph_size=size,
        pixel_range=pxrange,
        charset_file=charset,
        output_image_path=image_out,
        output_json_path=json_out,
    )

    if not quiet:
        print_header(__version__)
        print_step("Loading font")
        _print_font_summary(font)
        print_step("Generating atlas")

    start_time = time.time()
    try:
        result = AtlasGenerator(settings).generate(config)
    except ToolExecutionError as e:
        print_error(
            f"msdf-atlas-gen exited with code {e.exit_code}",
            details=e.stderr.strip() or None,
        )
        raise typer.Exit(code=1)
    except AtlasGenError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if quiet:
        console.print(str(result.image_path))
        return

    print_success(result, total_time_s=time.time() - start_time)
    print_metrics(result)
    if samples:
        print_sample_glyphs(result, limit=samples)


def _print_font_summary(font: Path) -> None:
    """Print the fonttools summary; unreadable fonts are left to msdf-atlas-gen."""
    try:
        with FontReader(font) as reader:
            summary = reader.summary()
    except Exception as e:
        print_error(f"Could not read font summary: {e}")
        return

    print_font_info(font_path=str(font), summary=summary)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
