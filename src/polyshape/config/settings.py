"""Configuration settings for Polyshape."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class FillRule(str, Enum):
    """Fill rule used to decide which regions of a path are inside."""

    NONZERO = "nonzero"
    EVEN_ODD = "evenodd"


class ShapeDefaults(BaseModel):
    """Default property values for new shapes."""

    tension: float = Field(
        default=0.0,
        description="Curve smoothing; 0 disables spline interpolation",
    )
    closed: bool = Field(
        default=False,
        description="Whether the outline wraps from the last point to the first",
    )
    bezier: bool = Field(
        default=False,
        description="Interpret points as a cubic bezier chain when tension is 0",
    )


class RenderConfig(BaseModel):
    """Configuration for rendering shapes to a surface."""

    fill_rule: FillRule = Field(
        default=FillRule.EVEN_ODD,
        description="Fill rule applied to closed shapes",
    )
    flatten_tolerance: float = Field(
        default=0.25,
        ge=0.001,
        le=10.0,
        description="Maximum deviation when flattening curves for fill evaluation",
    )
    precision: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Decimal places used for coordinates in SVG output",
    )
    fill: str = Field(
        default="#000000",
        description="Fill color of closed shapes",
    )
    stroke: str = Field(
        default="#000000",
        description="Stroke color",
    )
    stroke_width: float = Field(
        default=1.0,
        ge=0.0,
        description="Stroke width in user units",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PolyShapeSettings(BaseModel):
    """Main application settings."""

    shape: ShapeDefaults = Field(default_factory=ShapeDefaults)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolyShapeSettings:
    """Get default application settings."""
    return PolyShapeSettings()
