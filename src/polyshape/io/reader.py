"""Shape document reader.

This module provides the ShapeReader class for loading JSON shape
documents into PolyLine shapes.
"""

import json
from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from polyshape.config import ShapeDefaults
from polyshape.core.shape import PolyLine
from polyshape.exceptions import DocumentLoadError
from polyshape.io.converter import ShapeDocument, model_to_shape


class ShapeReader:
    """Loads shape documents and yields PolyLine shapes.

    Example:
        reader = ShapeReader(Path("shapes.json"))
        reader.load()
        for shape in reader.iter_shapes():
            print(shape.name)
    """

    def __init__(self, document_path: Path, defaults: ShapeDefaults | None = None) -> None:
        """Initialize the shape reader.

        Args:
            document_path: Path to the JSON document
            defaults: Property values for shapes that leave them unset
        """
        self._document_path = document_path
        self._defaults = defaults or ShapeDefaults()
        self._document: ShapeDocument | None = None

    def load(self) -> None:
        """Load and validate the document.

        Raises:
            FileNotFoundError: If the document does not exist
            DocumentLoadError: If the document is not valid JSON or fails validation
        """
        if not self._document_path.exists():
            raise FileNotFoundError(f"Shape document not found: {self._document_path}")

        try:
            data = json.loads(self._document_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise DocumentLoadError(str(self._document_path), f"invalid JSON: {e}") from e

        try:
            self._document = ShapeDocument.from_data(data)
        except ValidationError as e:
            raise DocumentLoadError(
                str(self._document_path), f"{e.error_count()} validation error(s)"
            ) from e

    @property
    def shape_count(self) -> int:
        """Return the number of shapes in the document.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Document not loaded. Call load() first.")

        return len(self._document.shapes)

    def iter_shapes(self) -> Iterator[PolyLine]:
        """Iterate over all shapes in document order.

        Shapes without a name are named ``shape-<index>``.

        Yields:
            PolyLine shapes

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Document not loaded. Call load() first.")

        for index, model in enumerate(self._document.shapes):
            shape = model_to_shape(model, self._defaults)
            if shape.name is None:
                shape.name = f"shape-{index}"
            yield shape

    def close(self) -> None:
        """Drop the loaded document."""
        self._document = None

    def __enter__(self) -> "ShapeReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
