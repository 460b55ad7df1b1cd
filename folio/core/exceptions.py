"""Custom exceptions for the Folio application."""


class FolioException(Exception):
    """Base exception for Folio application."""

    pass


class ValidationError(FolioException):
    """Raised when validation fails."""

    pass


class NotFoundError(FolioException):
    """Raised when a resource is not found."""

    pass


class DatabaseError(FolioException):
    """Raised when a database operation fails."""

    pass


class DuplicateRecordError(DatabaseError):
    """Raised when an insert collides with a unique constraint."""

    pass


class ConfigurationError(FolioException):
    """Raised when configuration is invalid."""

    pass


class AuthenticationError(FolioException):
    """Raised when authentication fails."""

    pass


class PaymentProviderError(FolioException):
    """Raised when the hosted checkout provider fails."""

    pass
