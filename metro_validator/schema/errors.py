"""Snapshot-related exceptions."""


class SnapshotLoadError(Exception):
    """Raised when a network snapshot cannot be read from its store."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class SnapshotValidationError(Exception):
    """Raised when stored records fail schema validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class CoordinateParseError(ValueError):
    """Raised when a stored map center cannot be decoded."""
