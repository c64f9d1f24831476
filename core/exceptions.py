"""Custom exceptions for the application."""


class PersonDemoError(Exception):
    """Base exception for the person demo."""
    pass


class ModelError(PersonDemoError):
    """Exception raised when a model cannot be built from external data."""
    pass
