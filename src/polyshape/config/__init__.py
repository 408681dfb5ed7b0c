"""Configuration management for polyshape.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ShapeDefaults: Default shape property values
- RenderConfig: Rendering and output settings
- LoggingConfig: Logging settings
- PolyShapeSettings: Main application settings
"""

from polyshape.config.settings import (
    FillRule,
    LoggingConfig,
    PolyShapeSettings,
    RenderConfig,
    ShapeDefaults,
    get_default_settings,
)

__all__ = [
    "FillRule",
    "LoggingConfig",
    "PolyShapeSettings",
    "RenderConfig",
    "ShapeDefaults",
    "get_default_settings",
]
