"""Errors raised while building query expressions."""


class ValidationError(ValueError):
    """Raised when a constructor receives too little (or inconsistent) input."""
