"""Custom exceptions for trip option selection."""

class TripOptionsError(Exception):
    """Base error for option selection failures."""


class ValidationError(TripOptionsError):
    """Raised when costs or booking inputs are invalid or incomplete."""


class PayloadError(TripOptionsError):
    """Raised when a recommendation payload cannot be parsed."""


class StepFailedError(TripOptionsError):
    """Raised when a view pipeline step fails."""
