"""Glyph and kerning representation.

This module defines the per-glyph models read from msdf-atlas-gen output.
Code points are kept as integers; the ``character`` projections exist for
convenience and are ``None`` for values that are not Unicode scalar values.
"""

from dataclasses import dataclass, field

MAX_CODE_POINT = 0x10FFFF
SURROGATE_RANGE = range(0xD800, 0xE000)


def code_point_to_char(code_point: int) -> str | None:
    """Convert a code point to a one-character string.

    Args:
        code_point: Integer code point as reported by msdf-atlas-gen

    Returns:
        The character, or None if the value lies outside 0..U+10FFFF or is
        a surrogate (U+D800..U+DFFF)
    """
    if 0 <= code_point <= MAX_CODE_POINT and code_point not in SURROGATE_RANGE:
        return chr(code_point)
    return None


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle.

    Used both for plane bounds (em-relative glyph extents) and atlas bounds
    (pixel rectangle inside the atlas image).

    Attributes:
        left: Minimum x
        bottom: Minimum y
        right: Maximum x
        top: Maximum y
    """

    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0
    top: float = 0.0

    @classmethod
    def zero(cls) -> "Bounds":
        """Return the all-zero rectangle used for glyphs without a shape."""
        return cls()

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    @property
    def is_empty(self) -> bool:
        """True if the rectangle has no area."""
        return self.width == 0 or self.height == 0

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Return (left, bottom, right, top)."""
        return (self.left, self.bottom, self.right, self.top)


@dataclass(frozen=True)
class GlyphInfo:
    """A single glyph packed into the atlas.

    Attributes:
        unicode: Unicode code point, exactly as reported by the tool
        advance: Horizontal advance in em units
        plane_bounds: Glyph shape extents in em units (zero if no shape)
        atlas_bounds: Pixel rectangle in the atlas image (zero if no shape)
    """

    unicode: int
    advance: float
    plane_bounds: Bounds = field(default_factory=Bounds.zero)
    atlas_bounds: Bounds = field(default_factory=Bounds.zero)

    @property
    def character(self) -> str | None:
        """Character for this code point, or None if out of range."""
        return code_point_to_char(self.unicode)

    def is_whitespace(self) -> bool:
        """Check if glyph has no visible shape.

        Spaces and other non-printing characters are packed without an
        atlas rectangle.

        Returns:
            True if the atlas bounds are empty, False otherwise
        """
        return self.atlas_bounds.is_empty


@dataclass(frozen=True)
class KerningPair:
    """Advance adjustment for two adjacent code points.

    Attributes:
        first: Code point of the left character
        second: Code point of the right character
        advance: Adjustment added to the first character's advance
    """

    first: int
    second: int
    advance: float

    @property
    def first_char(self) -> str | None:
        return code_point_to_char(self.first)

    @property
    def second_char(self) -> str | None:
        return code_point_to_char(self.second)
