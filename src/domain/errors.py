"""Domain errors for billing computations."""


class ValidationError(ValueError):
    """Raised when billing input has an invalid shape or value."""


__all__ = ["ValidationError"]
