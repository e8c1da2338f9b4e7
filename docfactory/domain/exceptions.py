"""
Domain exceptions for document management.
"""


class DocumentError(Exception):
    """Base exception for document errors."""
    pass


class ValidationError(DocumentError):
    """Exception raised when validation fails."""
    pass


class InvalidArgumentError(ValidationError, ValueError):
    """Exception raised when an operation receives an unusable argument."""
    pass


class UnsupportedDocumentTypeError(ValidationError):
    """Exception raised when a document type is not known."""
    pass


class DocumentOperationError(DocumentError):
    """Exception raised when a document operation fails."""
    pass
