"""Custom exceptions for shot-card."""


class ShotCardError(Exception):
    """Base exception for shot-card."""

    pass


class ConfigurationError(ShotCardError):
    """Raised when Airtable credentials are missing."""

    pass


class RecordSourceError(ShotCardError):
    """Raised when the record store cannot be read."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class RenderError(ShotCardError):
    """Raised when the card image cannot be drawn."""

    pass
