class InvariantViolation(Exception):
    """Raised when stored content would break a structural rule."""
