"""Core generation pipeline for msdf-atlasgen.

This module contains the pieces that turn an AtlasConfig into an
AtlasResult:

- BinaryLocator: Find the msdf-atlas-gen executable for the platform
- build_arguments: Serialize a configuration into command-line arguments
- ProcessRunner: Run the tool and surface failures
- parse_atlas_file: Translate the JSON output into domain models
- AtlasGenerator: Orchestrate the above
"""

from msdf_atlasgen.core.arguments import build_arguments, format_command_line
from msdf_atlasgen.core.generator import AtlasGenerator, generate
from msdf_atlasgen.core.locator import BinaryLocator, PlatformInfo
from msdf_atlasgen.core.parser import parse_atlas_data, parse_atlas_file
from msdf_atlasgen.core.runner import ProcessOutput, ProcessRunner

__all__ = [
    "AtlasGenerator",
    "BinaryLocator",
    "PlatformInfo",
    "ProcessOutput",
    "ProcessRunner",
    "build_arguments",
    "format_command_line",
    "generate",
    "parse_atlas_data",
    "parse_atlas_file",
]
