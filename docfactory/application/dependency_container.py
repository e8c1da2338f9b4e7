"""
Dependency container for the document management application.
Centralizes the creation of all dependencies to maintain clean architecture.
"""
from typing import Optional

from ..ports.output_port import OutputPort
from ..domain.services.configuration_service import ConfigurationService
from ..domain.services.document_lifecycle_service import DocumentLifecycleService
from ..domain.services.error_handler import ErrorHandler
from .document_factory_registry import DocumentFactoryRegistry, create_default_registry


class DependencyContainer:
    """Container for managing application dependencies."""
    
    def __init__(self, output: Optional[OutputPort] = None):
        """
        Initialize the dependency container.
        
        Args:
            output: Output sink for documents (default: console)
        """
        self._configuration_service = ConfigurationService()
        self._injected_output: Optional[OutputPort] = output
        self._output: Optional[OutputPort] = output
        self._registry: Optional[DocumentFactoryRegistry] = None
        self._lifecycle_service: Optional[DocumentLifecycleService] = None
        self._error_handler: Optional[ErrorHandler] = None
    
    def get_output(self) -> OutputPort:
        """Get or create the output adapter."""
        if self._output is None:
            from ..adapters.console_output_adapter import ConsoleOutputAdapter
            self._output = ConsoleOutputAdapter()
        return self._output
    
    def get_factory_registry(self) -> DocumentFactoryRegistry:
        """Get or create the document factory registry."""
        if self._registry is None:
            self._registry = create_default_registry()
        return self._registry
    
    def get_lifecycle_service(self) -> DocumentLifecycleService:
        """Get or create document lifecycle service."""
        if self._lifecycle_service is None:
            self._lifecycle_service = DocumentLifecycleService()
        return self._lifecycle_service
    
    def get_error_handler(self) -> ErrorHandler:
        """Get or create error handler."""
        if self._error_handler is None:
            self._error_handler = ErrorHandler(self.get_lifecycle_service())
        return self._error_handler
    
    def get_configuration_service(self) -> ConfigurationService:
        """Get configuration service."""
        return self._configuration_service
    
    def reset(self):
        """Reset all dependencies (useful for testing). An injected output is kept."""
        self._output = self._injected_output
        self._registry = None
        self._lifecycle_service = None
        self._error_handler = None
