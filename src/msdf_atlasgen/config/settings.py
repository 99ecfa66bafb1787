"""Configuration settings for msdf-atlasgen."""

from enum import Enum
from pathlib import Path, PurePath
from typing import Any

from pydantic import BaseModel, Field, field_validator


class AtlasType(str, Enum):
    """Distance-field variant generated by msdf-atlas-gen."""

    SDF = "sdf"
    PSDF = "psdf"
    MSDF = "msdf"
    MTSDF = "mtsdf"


class LogLevel(str, Enum):
    """Accepted logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class AtlasConfig(BaseModel):
    """Settings for a single atlas generation run.

    Output paths left unset are replaced with unique files in the system
    temporary directory when the atlas is generated.
    """

    font_path: Path | None = Field(
        default=None,
        description="Path to the input TTF/OTF font file",
    )
    atlas_type: AtlasType = Field(
        default=AtlasType.MSDF,
        description="Distance-field variant",
    )
    width: int = Field(
        default=1024,
        gt=0,
        description="Atlas image width in pixels",
    )
    height: int = Field(
        default=1024,
        gt=0,
        description="Atlas image height in pixels",
    )
    glyph_size: int = Field(
        default=48,
        description="Glyph em size in pixels",
    )
    pixel_range: int = Field(
        default=4,
        description="Distance field range in pixels",
    )
    charset_file: Path | None = Field(
        default=None,
        description="Optional msdf-atlas-gen charset file",
    )
    output_image_path: Path | None = Field(
        default=None,
        description="Atlas image output path (temp file if unset)",
    )
    output_json_path: Path | None = Field(
        default=None,
        description="Atlas JSON output path (temp file if unset)",
    )

    @field_validator(
        "font_path",
        "charset_file",
        "output_image_path",
        "output_json_path",
        mode="before",
    )
    @classmethod
    def _empty_path_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        # Path("") collapses to Path(".")
        if isinstance(value, PurePath) and str(value) == ".":
            return None
        return value

    @property
    def dimensions(self) -> tuple[int, int]:
        """Requested atlas dimensions as (width, height)."""
        return (self.width, self.height)


class LocatorConfig(BaseModel):
    """Configuration for locating the msdf-atlas-gen executable."""

    binary_path: Path | None = Field(
        default=None,
        description="Explicit executable path (skips platform discovery)",
    )
    base_dir: Path | None = Field(
        default=None,
        description="Directory holding runtimes/<rid>/native (None = package directory)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class GeneratorSettings(BaseModel):
    """Main application settings."""

    locator: LocatorConfig = Field(default_factory=LocatorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GeneratorSettings:
    """Get default application settings."""
    return GeneratorSettings()
