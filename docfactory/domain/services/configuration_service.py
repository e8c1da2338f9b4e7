"""
Configuration service for document management.
Centralizes all configuration parameters and default values.
"""
import os
from typing import List
from dataclasses import dataclass

from ..entities import DocumentType
from ..exceptions import UnsupportedDocumentTypeError


@dataclass(frozen=True)
class DocumentConfiguration:
    """Configuration for document creation."""
    default_document_type: str
    supported_document_types: List[str]
    timestamp_format: str


@dataclass(frozen=True)
class LoggingConfiguration:
    """Configuration for logging."""
    log_level: str


@dataclass(frozen=True)
class ServerConfiguration:
    """Configuration for the HTTP server."""
    host: str
    port: int


class ConfigurationService:
    """Service for managing application configuration."""
    
    def __init__(self):
        """Initialize with default configuration."""
        self._document_config = self._create_document_configuration()
        self._logging_config = self._create_logging_configuration()
        self._server_config = self._create_server_configuration()
    
    def get_supported_document_types(self) -> List[str]:
        """Get list of supported document types."""
        return self._document_config.supported_document_types.copy()
    
    def get_default_document_type(self) -> str:
        """Get default document type."""
        return self._document_config.default_document_type
    
    def get_timestamp_format(self) -> str:
        """Get strftime format for creation timestamps."""
        return self._document_config.timestamp_format
    
    def get_log_level(self) -> str:
        """Get logging level name."""
        return self._logging_config.log_level
    
    def get_server_host(self) -> str:
        return self._server_config.host
    
    def get_server_port(self) -> int:
        return self._server_config.port
    
    def validate_document_type(self, document_type: str) -> bool:
        """
        Validate if a document type is supported.
        
        Args:
            document_type: Document type name to validate
            
        Returns:
            True if the document type is supported
        """
        if not isinstance(document_type, str):
            return False
        return document_type.strip().lower() in self._document_config.supported_document_types
    
    def _create_document_configuration(self) -> DocumentConfiguration:
        """Create document configuration with defaults and environment overrides."""
        supported = [member.value for member in DocumentType]
        default_type = os.getenv("DOCFACTORY_DEFAULT_TYPE", DocumentType.WORD.value).strip().lower()
        if default_type not in supported:
            raise UnsupportedDocumentTypeError(
                f"DOCFACTORY_DEFAULT_TYPE '{default_type}' not supported. Available types: {', '.join(supported)}"
            )
        
        return DocumentConfiguration(
            default_document_type=default_type,
            supported_document_types=supported,
            timestamp_format=os.getenv("DOCFACTORY_TIMESTAMP_FORMAT", "%Y-%m-%d %H:%M:%S")
        )
    
    def _create_logging_configuration(self) -> LoggingConfiguration:
        """Create logging configuration with defaults and environment overrides."""
        return LoggingConfiguration(
            log_level=os.getenv("DOCFACTORY_LOG_LEVEL", "WARNING").upper()
        )
    
    def _create_server_configuration(self) -> ServerConfiguration:
        """Create server configuration with defaults and environment overrides."""
        return ServerConfiguration(
            host=os.getenv("DOCFACTORY_HOST", "127.0.0.1"),
            port=int(os.getenv("DOCFACTORY_PORT", "8000"))
        )
