"""Utility functions for polyshape.

This module provides utility functions including:

- Logging setup and configuration
- Render statistics tracking
"""

from polyshape.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
