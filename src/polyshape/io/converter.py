"""Conversion between document models and PolyLine shapes.

Shape documents are JSON. Pydantic models validate them before any shape is
built, so malformed files fail with a readable message instead of deep
inside rendering.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from polyshape.config import ShapeDefaults
from polyshape.core.shape import PolyLine


def _check_even(points: list[float]) -> list[float]:
    if len(points) % 2 != 0:
        raise ValueError(f"odd number of coordinates ({len(points)})")
    return points


class ShapeModel(BaseModel):
    """One shape as stored in a document."""

    name: str | None = None
    exterior: list[float] = Field(default_factory=list)
    interiors: list[list[float]] = Field(default_factory=list)
    tension: float | None = None
    closed: bool | None = None
    bezier: bool | None = None

    @field_validator("exterior")
    @classmethod
    def _exterior_even(cls, value: list[float]) -> list[float]:
        return _check_even(value)

    @field_validator("interiors")
    @classmethod
    def _interiors_even(cls, value: list[list[float]]) -> list[list[float]]:
        for ring in value:
            _check_even(ring)
        return value


class ShapeDocument(BaseModel):
    """A document holding any number of shapes."""

    shapes: list[ShapeModel] = Field(default_factory=list)

    @classmethod
    def from_data(cls, data: Any) -> "ShapeDocument":
        """Build a document from parsed JSON.

        Accepts either ``{"shapes": [...]}`` or a single shape object.

        Args:
            data: Parsed JSON value

        Returns:
            Validated document
        """
        if isinstance(data, dict) and "shapes" in data:
            return cls.model_validate(data)
        return cls(shapes=[ShapeModel.model_validate(data)])


def model_to_shape(model: ShapeModel, defaults: ShapeDefaults | None = None) -> PolyLine:
    """Convert a validated shape model to a PolyLine.

    Args:
        model: Shape model
        defaults: Values for properties the model leaves unset

    Returns:
        PolyLine instance
    """
    defaults = defaults or ShapeDefaults()
    return PolyLine(
        exterior=model.exterior,
        interiors=model.interiors,
        tension=model.tension if model.tension is not None else defaults.tension,
        closed=model.closed if model.closed is not None else defaults.closed,
        bezier=model.bezier if model.bezier is not None else defaults.bezier,
        name=model.name,
    )


def shape_to_model(shape: PolyLine) -> ShapeModel:
    """Convert a PolyLine back to its document model."""
    return ShapeModel.model_validate(shape.to_dict())
