"""Translation of msdf-atlas-gen JSON output into domain models."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from msdf_atlasgen.domain import AtlasResult, Bounds, FontMetrics, GlyphInfo, KerningPair
from msdf_atlasgen.exceptions import AtlasParseError
from msdf_atlasgen.io.schema import AtlasJsonData, BoundsData, lower_keys


def _to_bounds(data: BoundsData | None) -> Bounds:
    if data is None:
        return Bounds.zero()
    return Bounds(left=data.left, bottom=data.bottom, right=data.right, top=data.top)


def parse_atlas_data(data: Any, image_path: Path, json_path: Path) -> AtlasResult:
    """Convert decoded atlas JSON into an AtlasResult.

    Keys are matched case-insensitively. Glyphs and kerning pairs keep the
    order and count of the source document; missing bounds become zero
    rectangles.

    Args:
        data: Decoded JSON document
        image_path: Atlas image the document describes
        json_path: Source file, used for the result and error messages

    Returns:
        Parsed AtlasResult

    Raises:
        AtlasParseError: If the document is empty or does not match the layout
    """
    if data is None:
        raise AtlasParseError(str(json_path), "document is empty")
    if not isinstance(data, dict):
        raise AtlasParseError(
            str(json_path), f"expected a JSON object, got {type(data).__name__}"
        )

    try:
        document = AtlasJsonData.model_validate(lower_keys(data))
    except ValidationError as e:
        raise AtlasParseError(str(json_path), str(e)) from e

    atlas = document.atlas
    metrics = document.metrics

    return AtlasResult(
        image_path=image_path,
        json_path=json_path,
        width=atlas.width,
        height=atlas.height,
        distance_range=atlas.distance_range,
        atlas_type=atlas.type,
        size=atlas.size,
        y_origin=atlas.y_origin,
        metrics=FontMetrics(
            em_size=metrics.em_size,
            line_height=metrics.line_height,
            ascender=metrics.ascender,
            descender=metrics.descender,
            underline_y=metrics.underline_y,
            underline_thickness=metrics.underline_thickness,
        ),
        glyphs=tuple(
            GlyphInfo(
                unicode=glyph.unicode,
                advance=glyph.advance,
                plane_bounds=_to_bounds(glyph.plane_bounds),
                atlas_bounds=_to_bounds(glyph.atlas_bounds),
            )
            for glyph in document.glyphs
        ),
        kerning=tuple(
            KerningPair(first=pair.unicode1, second=pair.unicode2, advance=pair.advance)
            for pair in document.kerning
        ),
    )


def parse_atlas_file(json_path: Path, image_path: Path) -> AtlasResult:
    """Read and parse an atlas JSON file.

    Raises:
        AtlasParseError: If the file cannot be read or decoded
    """
    try:
        text = json_path.read_text(encoding="utf-8")
        data = json.loads(text)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise AtlasParseError(str(json_path), str(e)) from e

    return parse_atlas_data(data, image_path=image_path, json_path=json_path)
