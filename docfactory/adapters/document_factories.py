"""
Concrete document factories.
Each factory binds the factory method to exactly one document variant.
"""
import logging
from typing import Optional

from docfactory.ports.document_factory_port import DocumentFactoryPort
from docfactory.ports.output_port import OutputPort
from docfactory.domain.documents import (
    Document, WordDocument, PdfDocument, ExcelDocument, TIMESTAMP_FORMAT
)
from docfactory.domain.entities import DocumentType
from .console_output_adapter import ConsoleOutputAdapter

logger = logging.getLogger(__name__)


class _BaseDocumentFactory(DocumentFactoryPort):
    """Holds the output sink handed to every document a factory builds."""
    
    def __init__(self, output: Optional[OutputPort] = None, timestamp_format: str = TIMESTAMP_FORMAT):
        """
        Initialize the factory.
        
        Args:
            output: Output sink for created documents (default: console)
            timestamp_format: strftime format passed to created documents
        """
        self._output = output or ConsoleOutputAdapter()
        self._timestamp_format = timestamp_format
    
    def _log_creation(self, document: Document) -> Document:
        logger.debug("%s created %r", self.__class__.__name__, document)
        return document


class WordDocumentFactory(_BaseDocumentFactory):
    """Factory for Word documents."""
    
    document_type = DocumentType.WORD
    
    def create_document(self, name: str) -> WordDocument:
        return self._log_creation(WordDocument(name, self._output, self._timestamp_format))


class PdfDocumentFactory(_BaseDocumentFactory):
    """Factory for PDF documents."""
    
    document_type = DocumentType.PDF
    
    def create_document(self, name: str) -> PdfDocument:
        return self._log_creation(PdfDocument(name, self._output, self._timestamp_format))


class ExcelDocumentFactory(_BaseDocumentFactory):
    """Factory for Excel documents."""
    
    document_type = DocumentType.EXCEL
    
    def create_document(self, name: str) -> ExcelDocument:
        return self._log_creation(ExcelDocument(name, self._output, self._timestamp_format))
