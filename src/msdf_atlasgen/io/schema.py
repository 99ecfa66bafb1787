"""Pydantic models for the JSON layout written by msdf-atlas-gen.

Field aliases are lower-case: keys are folded to lower case before
validation so that matching is case-insensitive.
"""

from typing import Any

from pydantic import BaseModel, Field


def lower_keys(value: Any) -> Any:
    """Recursively lower-case every object key in decoded JSON."""
    if isinstance(value, dict):
        return {str(key).lower(): lower_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [lower_keys(item) for item in value]
    return value


class AtlasInfoData(BaseModel):
    type: str = ""
    distance_range: float = Field(default=0.0, alias="distancerange")
    size: float = 0.0
    width: int = 0
    height: int = 0
    y_origin: str = Field(default="bottom", alias="yorigin")


class MetricsData(BaseModel):
    em_size: float = Field(default=0.0, alias="emsize")
    line_height: float = Field(default=0.0, alias="lineheight")
    ascender: float = 0.0
    descender: float = 0.0
    underline_y: float = Field(default=0.0, alias="underliney")
    underline_thickness: float = Field(default=0.0, alias="underlinethickness")


class BoundsData(BaseModel):
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0
    top: float = 0.0


class GlyphData(BaseModel):
    unicode: int = 0
    advance: float = 0.0
    plane_bounds: BoundsData | None = Field(default=None, alias="planebounds")
    atlas_bounds: BoundsData | None = Field(default=None, alias="atlasbounds")


class KerningData(BaseModel):
    unicode1: int = 0
    unicode2: int = 0
    advance: float = 0.0


class AtlasJsonData(BaseModel):
    """Top-level document; all four sections must be present."""

    atlas: AtlasInfoData
    metrics: MetricsData
    glyphs: list[GlyphData]
    kerning: list[KerningData]
