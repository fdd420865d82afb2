"""Binding-related exceptions for feedbind.

All exceptions avoid exposing sensitive data (e.g. account keys) in messages.
"""


class BindingError(Exception):
    """Base exception for bind-time failures."""

    pass


class ConfigurationError(BindingError):
    """Raised when a connection string setting is missing or cannot be parsed."""

    def __init__(self, setting: str, message: str | None = None) -> None:
        self.setting = setting
        super().__init__(message or f"{setting} connection string is missing or invalid")


class InvalidOperationError(BindingError):
    """Raised when a resolved binding would be unusable at runtime."""

    pass
