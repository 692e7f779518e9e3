"""Custom exceptions for article presentation."""


class PresenterError(Exception):
    """Base exception for all presenter errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class MissingFieldError(PresenterError):
    """Raised when a derivation needs a field the article does not have."""

    def __init__(self, field_name: str, message: str | None = None):
        self.field_name = field_name
        super().__init__(message or f"Article has no value for '{field_name}'")


class UnknownAttributeError(PresenterError):
    """Raised when serialization names an unknown field or method."""

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(message or f"Unknown attribute: {name}")


class FrontMatterError(PresenterError):
    """Raised when the front-matter block cannot be parsed."""

    pass


class ConfigurationError(PresenterError):
    """Raised when presenter configuration is missing or invalid."""

    pass
