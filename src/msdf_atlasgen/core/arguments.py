"""Command-line construction for msdf-atlas-gen."""

import subprocess
from collections.abc import Sequence
from pathlib import Path

from msdf_atlasgen.config import AtlasConfig

IMAGE_FORMAT = "png"


def build_arguments(config: AtlasConfig, image_path: Path, json_path: Path) -> list[str]:
    """Build the msdf-atlas-gen argument list.

    Flags are emitted in a fixed order; ``-charset`` is appended only when
    a charset file is configured. Values are not validated here.

    Args:
        config: Atlas configuration
        image_path: Resolved atlas image output path
        json_path: Resolved atlas JSON output path

    Returns:
        Arguments, excluding the executable itself
    """
    args = [
        "-font", str(config.font_path),
        "-type", config.atlas_type.value,
        "-dimensions", str(config.width), str(config.height),
        "-size", str(config.glyph_size),
        "-pxrange", str(config.pixel_range),
        "-format", IMAGE_FORMAT,
        "-imageout", str(image_path),
        "-json", str(json_path),
    ]

    if config.charset_file is not None:
        args.extend(["-charset", str(config.charset_file)])

    return args


def format_command_line(args: Sequence[str]) -> str:
    """Render arguments as a single string, quoting those containing spaces."""
    return subprocess.list2cmdline([str(arg) for arg in args])
