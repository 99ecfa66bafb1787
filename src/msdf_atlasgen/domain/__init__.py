"""Domain models for msdf-atlasgen.

This module contains the models describing a generated atlas. All models
are frozen dataclasses and collections are stored as tuples, so a result
cannot change after it has been returned to the caller.

Key classes:
- Bounds: A left/bottom/right/top rectangle
- GlyphInfo: Metrics and placement of a single glyph
- KerningPair: Advance adjustment for an ordered pair of code points
- FontMetrics: Font-wide vertical metrics
- AtlasResult: Everything produced by one generation run
"""

from msdf_atlasgen.domain.atlas import AtlasResult, FontMetrics
from msdf_atlasgen.domain.glyph import (
    MAX_CODE_POINT,
    Bounds,
    GlyphInfo,
    KerningPair,
    code_point_to_char,
)

__all__: list[str] = [
    "MAX_CODE_POINT",
    # Core types
    "Bounds",
    "GlyphInfo",
    "KerningPair",
    "FontMetrics",
    "AtlasResult",
    # Helpers
    "code_point_to_char",
]
