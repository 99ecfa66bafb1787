"""Utility functions for msdf-atlasgen.

This module provides utility functions including:

- Logging setup and configuration
"""

from msdf_atlasgen.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
