"""
Error handler service for document management.
Centralizes error handling and provides consistent error results.
"""
import logging
from datetime import datetime
from typing import Dict, Any, Type

from ..entities import LifecycleResult
from ..exceptions import (
    DocumentError,
    ValidationError,
    UnsupportedDocumentTypeError,
    DocumentOperationError
)
from .document_lifecycle_service import DocumentLifecycleService

logger = logging.getLogger(__name__)


class ErrorContext:
    """Context information for error handling."""

    def __init__(self, operation: str, **kwargs):
        """
        Initialize error context.

        Args:
            operation: Operation being performed
            **kwargs: Additional context information
        """
        self.operation = operation
        self.context = kwargs

    def add_context(self, **kwargs):
        """Add additional context information."""
        self.context.update(kwargs)

    def get_context(self) -> Dict[str, Any]:
        """Get all context information."""
        return {
            "operation": self.operation,
            **self.context
        }


class ErrorHandler:
    """Centralized error handler for the application."""

    def __init__(self, lifecycle_service: DocumentLifecycleService):
        """
        Initialize error handler.

        Args:
            lifecycle_service: Service for creating error results
        """
        self._lifecycle_service = lifecycle_service
        self._error_mapping = self._create_error_mapping()

    def handle_lifecycle_error(self, error: Exception, context: ErrorContext) -> LifecycleResult:
        """
        Handle errors raised while processing a document.

        Args:
            error: The error that occurred
            context: Context information about the operation

        Returns:
            Error result with appropriate error information
        """
        error_info = self._analyze_error(error, context)
        document_type = context.context.get("document_type", "unknown")

        logger.error(
            "%s failed (%s, %s): %s",
            context.operation,
            error_info["category"],
            error_info["type"],
            error_info["message"]
        )

        if isinstance(error, UnsupportedDocumentTypeError):
            message = f"Unsupported document type: {error_info['message']}"
        elif isinstance(error, ValidationError):
            message = f"Validation error: {error_info['message']}"
        elif isinstance(error, DocumentOperationError):
            message = f"Document operation error: {error_info['message']}"
        elif isinstance(error, DocumentError):
            message = error_info["message"]
        else:
            message = f"Unexpected error during {context.operation}: {error_info['message']}"

        return self._lifecycle_service.create_error_result(error=message, document_type=document_type)

    def get_error_category(self, error: Exception) -> str:
        """
        Get the category an error belongs to.

        Args:
            error: The error to classify

        Returns:
            Category name, "unexpected" for errors outside the domain hierarchy
        """
        for error_type in type(error).__mro__:
            if error_type in self._error_mapping:
                return self._error_mapping[error_type]
        return "unexpected"

    def _analyze_error(self, error: Exception, context: ErrorContext) -> Dict[str, Any]:
        """
        Analyze an error and extract relevant information.

        Args:
            error: The error to analyze
            context: Context information

        Returns:
            Dictionary with error analysis
        """
        return {
            "type": type(error).__name__,
            "category": self.get_error_category(error),
            "message": str(error),
            "context": context.get_context(),
            "timestamp": datetime.now().isoformat()
        }

    def _create_error_mapping(self) -> Dict[Type[Exception], str]:
        """Create mapping of error types to error categories."""
        return {
            UnsupportedDocumentTypeError: "unsupported_type",
            ValidationError: "input_validation",
            DocumentOperationError: "document_operation",
            DocumentError: "business_logic"
        }
