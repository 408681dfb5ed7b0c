"""Exception hierarchy for Polyshape."""


class PolyShapeError(Exception):
    """Base exception for all Polyshape errors."""

    pass


class UsageError(PolyShapeError):
    """An operation was called with an invalid argument shape."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Invalid use of '{operation}': {reason}")


class PointSequenceError(PolyShapeError):
    """A flat point sequence is malformed."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid point sequence '{name}': {reason}")


class SurfaceError(PolyShapeError):
    """A drawing surface was used in an invalid state."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class DocumentError(PolyShapeError):
    """Errors related to shape document loading or saving."""

    pass


class DocumentLoadError(DocumentError):
    """Error loading a shape document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load document '{path}': {reason}")


class DocumentSaveError(DocumentError):
    """Error saving a rendered document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save document '{path}': {reason}")
