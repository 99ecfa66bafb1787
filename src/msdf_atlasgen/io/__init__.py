"""I/O layer for msdf-atlasgen.

This module holds the boundaries with files msdf-atlasgen reads but does
not produce itself.

Key responsibilities:
- Describe the atlas JSON layout written by msdf-atlas-gen
- Summarize input fonts with fonttools for display

Key classes:
- AtlasJsonData: Validated atlas JSON document
- FontReader: Read-only font summary
"""

from msdf_atlasgen.io.reader import FontReader, FontSummary
from msdf_atlasgen.io.schema import AtlasJsonData, lower_keys

__all__ = [
    "AtlasJsonData",
    "FontReader",
    "FontSummary",
    "lower_keys",
]
