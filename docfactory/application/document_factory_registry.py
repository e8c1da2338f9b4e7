"""
Registry of document factories.
Maps each document type to the factory class bound to it.
"""
import logging
from typing import Dict, Any, List, Optional, Type, Union

from ..ports.document_factory_port import DocumentFactoryPort
from ..ports.output_port import OutputPort
from ..domain.documents import TIMESTAMP_FORMAT
from ..domain.entities import DocumentType
from ..domain.exceptions import UnsupportedDocumentTypeError

logger = logging.getLogger(__name__)


class DocumentFactoryRegistry:
    """Registry for looking up document factories by type."""
    
    def __init__(self, factory_classes: Dict[DocumentType, Type[DocumentFactoryPort]]):
        """
        Initialize the registry with factory classes.
        
        Args:
            factory_classes: Dictionary mapping document types to factory classes
        """
        self._factory_classes = dict(factory_classes)
        self._type_info = {
            DocumentType.WORD: {
                "description": "Word processing document with styled text",
                "extra_operation": "add_formatting"
            },
            DocumentType.PDF: {
                "description": "Fixed layout portable document",
                "extra_operation": "add_security"
            },
            DocumentType.EXCEL: {
                "description": "Spreadsheet with worksheets and formulas",
                "extra_operation": "add_formula"
            }
        }
    
    def get_factory(
        self,
        document_type: Union[DocumentType, str],
        output: Optional[OutputPort] = None,
        timestamp_format: str = TIMESTAMP_FORMAT
    ) -> DocumentFactoryPort:
        """
        Create the factory bound to a document type.
        
        Args:
            document_type: Document type or its name (word, pdf, excel)
            output: Output sink for documents the factory creates
            timestamp_format: strftime format for created documents
            
        Returns:
            Configured document factory
            
        Raises:
            UnsupportedDocumentTypeError: If no factory is registered for the type
        """
        doc_type = DocumentType.from_value(document_type)
        
        if doc_type not in self._factory_classes:
            raise UnsupportedDocumentTypeError(f"No factory registered for document type '{doc_type.value}'")
        
        factory_class = self._factory_classes[doc_type]
        logger.debug("Using %s for %s documents", factory_class.__name__, doc_type.tag)
        return factory_class(output=output, timestamp_format=timestamp_format)
    
    def get_supported_types(self) -> List[str]:
        """Get list of supported document type names."""
        return [doc_type.value for doc_type in self._factory_classes]
    
    def get_type_info(self, document_type: Union[DocumentType, str]) -> Dict[str, Any]:
        """
        Get information about a document type.
        
        Args:
            document_type: Document type or its name
            
        Returns:
            Type information dictionary
            
        Raises:
            UnsupportedDocumentTypeError: If the type is not registered
        """
        doc_type = DocumentType.from_value(document_type)
        
        if doc_type not in self._factory_classes:
            raise UnsupportedDocumentTypeError(f"No factory registered for document type '{doc_type.value}'")
        
        return {
            "name": doc_type.value,
            "tag": doc_type.tag,
            "extension": doc_type.extension,
            "factory": self._factory_classes[doc_type].__name__,
            **self._type_info.get(doc_type, {"description": "", "extra_operation": ""})
        }


def create_default_registry() -> DocumentFactoryRegistry:
    """Build the registry with the built-in Word, PDF and Excel factories."""
    from ..adapters.document_factories import (
        WordDocumentFactory, PdfDocumentFactory, ExcelDocumentFactory
    )
    
    return DocumentFactoryRegistry({
        DocumentType.WORD: WordDocumentFactory,
        DocumentType.PDF: PdfDocumentFactory,
        DocumentType.EXCEL: ExcelDocumentFactory
    })
