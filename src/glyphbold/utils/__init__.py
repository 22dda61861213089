"""Utility functions for glyphbold.

This module provides utility functions including:

- Logging setup and configuration
- Render pass statistics
"""

from glyphbold.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
