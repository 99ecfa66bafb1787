"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from msdf_atlasgen.domain import AtlasResult, GlyphInfo
from msdf_atlasgen.io import FontSummary

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]msdf-atlasgen[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, summary: FontSummary) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        summary: Font summary read with fonttools
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({summary.format})")
    console.print(line1)

    name_line = Text("  ")
    name_line.append(f"{summary.family_name} {summary.style_name}".strip())
    console.print(name_line)
    console.print(
        f"  {summary.glyph_count:,} glyphs {SYM_DOT} {summary.code_point_count:,} code points "
        f"{SYM_DOT} {summary.units_per_em:,} UPM"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def format_glyph_label(glyph: GlyphInfo) -> str:
    """Format a glyph as 'c' (U+XXXX) for display."""
    char = glyph.character
    if char is None or not char.isprintable():
        shown = "?"
    else:
        shown = char
    return f"'{shown}' (U+{glyph.unicode:04X})"


def print_success(result: AtlasResult, total_time_s: float) -> None:
    """Print success message with atlas summary.

    Args:
        result: Generated atlas
        total_time_s: Total generation time in seconds
    """
    console.print(f"\n[bold green]{SYM_OK} Atlas generated[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(str(result.image_path), style="bold")
    console.print(line)

    console.print(
        f"  {result.width}x{result.height} {SYM_DOT} {len(result.glyphs)} glyphs "
        f"{SYM_DOT} {len(result.kerning)} kerning pairs {SYM_DOT} range {result.distance_range:g}px"
    )


def print_metrics(result: AtlasResult) -> None:
    """Print font-wide metrics."""
    metrics = result.metrics
    console.print("\n[bold]Font metrics[/bold]\n")
    console.print(f"  Line height           {metrics.line_height:.2f}")
    console.print(f"  Ascender              {metrics.ascender:.2f}")
    console.print(f"  Descender             {metrics.descender:.2f}")
    console.print(f"  Underline             {metrics.underline_y:.2f} ({metrics.underline_thickness:.2f})")


def print_sample_glyphs(result: AtlasResult, limit: int = 10) -> None:
    """Print a table of the first glyphs in the atlas.

    Args:
        result: Generated atlas
        limit: Maximum number of glyphs to show
    """
    table = Table(title=f"Sample glyphs ({min(limit, len(result.glyphs))} of {len(result.glyphs)})")
    table.add_column("Glyph")
    table.add_column("Advance", justify="right")
    table.add_column("Atlas bounds", justify="right")

    for glyph in result.glyphs[:limit]:
        bounds = glyph.atlas_bounds
        bounds_str = "-" if glyph.is_whitespace() else (
            f"{bounds.left:g},{bounds.bottom:g} {SYM_DOT} {bounds.right:g},{bounds.top:g}"
        )
        table.add_row(format_glyph_label(glyph), f"{glyph.advance:.2f}", bounds_str)

    console.print()
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # Tool stderr may contain square brackets, so avoid markup parsing
    line = Text()
    line.append(f"{SYM_ERR} Error:", style="bold red")
    line.append(f" {message}")
    console.print()
    console.print(line)
    if details:
        console.print(Text(f"  {details}"))
