"""Configuration management for msdf-atlasgen.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- AtlasType: Distance-field variant passed to msdf-atlas-gen
- AtlasConfig: Per-call atlas generation settings
- LocatorConfig: Native binary discovery settings
- LogLevel: Accepted logging levels
- LoggingConfig: Logging settings
- GeneratorSettings: Main application settings
"""

from msdf_atlasgen.config.settings import (
    AtlasConfig,
    AtlasType,
    GeneratorSettings,
    LocatorConfig,
    LoggingConfig,
    LogLevel,
    get_default_settings,
)

__all__ = [
    "AtlasConfig",
    "AtlasType",
    "GeneratorSettings",
    "LocatorConfig",
    "LoggingConfig",
    "LogLevel",
    "get_default_settings",
]
