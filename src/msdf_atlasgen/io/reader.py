"""Font reader for summarizing TTF/OTF fonts.

This module provides the FontReader class, which reads the few font
properties shown before an atlas is generated. Outlines are never
touched; rasterization is left to msdf-atlas-gen.
"""

from dataclasses import dataclass
from pathlib import Path

from fontTools.ttLib import TTFont

NAME_ID_FAMILY = 1
NAME_ID_SUBFAMILY = 2


@dataclass(frozen=True)
class FontSummary:
    """Display information about a font file."""

    family_name: str
    style_name: str
    format: str
    units_per_em: int
    glyph_count: int
    code_point_count: int


class FontReader:
    """Loads a TTF/OTF font and reports summary information.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            print(reader.summary().family_name)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        self._font = TTFont(str(self._font_path), lazy=True)

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'OpenType' for CFF-flavoured fonts, 'TrueType' otherwise

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        The units per em (UPM) defines the resolution of the font's
        coordinate system. Common values are 1000 or 2048.

        Returns:
            Units per em value

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        return font["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font.

        Returns:
            Number of glyphs

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        return font["maxp"].numGlyphs

    def code_points(self) -> list[int]:
        """Return the sorted code points mapped by the font's cmap.

        Returns:
            Code points in ascending order (empty if the font has no cmap)

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        cmap = font.getBestCmap() or {}
        return sorted(cmap)

    def _name(self, name_id: int) -> str:
        font = self._require_font()
        if "name" not in font:
            return ""
        return font["name"].getDebugName(name_id) or ""

    def summary(self) -> FontSummary:
        """Collect display information for the loaded font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return FontSummary(
            family_name=self._name(NAME_ID_FAMILY) or self._font_path.stem,
            style_name=self._name(NAME_ID_SUBFAMILY),
            format=self.format,
            units_per_em=self.units_per_em,
            glyph_count=self.glyph_count,
            code_point_count=len(self.code_points()),
        )

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
