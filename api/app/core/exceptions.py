"""
Custom exceptions for the application.
"""


class TranslationApiException(Exception):
    """Base exception for all translation API exceptions."""
    pass


class ValidationError(TranslationApiException):
    """Raised when validation fails."""
    pass


class NotFoundError(TranslationApiException):
    """Raised when a requested resource is not found."""
    pass


class AuthenticationError(TranslationApiException):
    """Raised when authentication fails."""
    pass
