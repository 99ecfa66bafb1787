"""Atlas result and font metrics."""

from dataclasses import dataclass, field
from pathlib import Path

from msdf_atlasgen.domain.glyph import GlyphInfo, KerningPair


@dataclass(frozen=True)
class FontMetrics:
    """Font-wide metrics, passed through unmodified from msdf-atlas-gen.

    Attributes:
        em_size: Em size the other metrics are expressed in
        line_height: Distance between consecutive baselines
        ascender: Ascender height
        descender: Descender depth (usually negative)
        underline_y: Underline position
        underline_thickness: Underline stroke thickness
    """

    em_size: float = 0.0
    line_height: float = 0.0
    ascender: float = 0.0
    descender: float = 0.0
    underline_y: float = 0.0
    underline_thickness: float = 0.0


@dataclass(frozen=True)
class AtlasResult:
    """Output of one atlas generation run.

    Width and height are the dimensions reported by msdf-atlas-gen, which
    may differ from the requested ones.

    Attributes:
        image_path: Path of the generated atlas image
        json_path: Path of the JSON metadata the result was parsed from
        width: Atlas width in pixels
        height: Atlas height in pixels
        distance_range: Distance range in pixels
        metrics: Font-wide metrics
        glyphs: Glyphs in the order reported by the tool
        kerning: Kerning pairs in the order reported by the tool
        atlas_type: Atlas type string reported by the tool
        size: Glyph em size in pixels reported by the tool
        y_origin: Vertical origin of atlas bounds ("bottom" or "top")
    """

    image_path: Path
    json_path: Path
    width: int
    height: int
    distance_range: float
    metrics: FontMetrics
    glyphs: tuple[GlyphInfo, ...] = ()
    kerning: tuple[KerningPair, ...] = ()
    atlas_type: str = ""
    size: float = 0.0
    y_origin: str = "bottom"
    _glyph_index: dict[int, GlyphInfo] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        index: dict[int, GlyphInfo] = {}
        for glyph in self.glyphs:
            index.setdefault(glyph.unicode, glyph)
        object.__setattr__(self, "_glyph_index", index)

    def glyph_for(self, code_point: int) -> GlyphInfo | None:
        """Get the first glyph for a code point.

        Args:
            code_point: Unicode code point

        Returns:
            GlyphInfo, or None if the code point is not in the atlas
        """
        return self._glyph_index.get(code_point)

    def kerning_advance(self, first: int, second: int) -> float:
        """Get the kerning adjustment for an ordered code point pair.

        Args:
            first: Left code point
            second: Right code point

        Returns:
            Advance adjustment of the first matching pair, 0.0 if none
        """
        for pair in self.kerning:
            if pair.first == first and pair.second == second:
                return pair.advance
        return 0.0
