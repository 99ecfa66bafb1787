"""msdf-atlasgen - Generate MSDF font atlases for GPU text rendering.

msdf-atlasgen drives the external ``msdf-atlas-gen`` tool: it turns a typed
configuration into a command line, runs the tool, and parses the JSON it
writes into an immutable result with glyph metrics, atlas bounds, kerning
pairs and font-wide metrics.

Example:
    >>> from msdf_atlasgen import AtlasConfig, generate
    >>> result = generate(AtlasConfig(font_path="Roboto-Regular.ttf"))
    >>> result.width, len(result.glyphs)
"""

__version__ = "0.1.0"

from msdf_atlasgen.config import AtlasConfig, AtlasType, GeneratorSettings
from msdf_atlasgen.core import AtlasGenerator, generate
from msdf_atlasgen.domain import AtlasResult, Bounds, FontMetrics, GlyphInfo, KerningPair

__all__ = [
    "AtlasConfig",
    "AtlasGenerator",
    "AtlasResult",
    "AtlasType",
    "Bounds",
    "FontMetrics",
    "GeneratorSettings",
    "GlyphInfo",
    "KerningPair",
    "__version__",
    "generate",
]
