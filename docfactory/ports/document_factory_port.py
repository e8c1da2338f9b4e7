"""
Port for document factories.
Defines the factory method every concrete factory binds to one document variant.
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..domain.entities import DocumentType

if TYPE_CHECKING:
    from ..domain.documents import Document


class DocumentFactoryPort(ABC):
    """Port for creating documents."""
    
    document_type: DocumentType
    
    @abstractmethod
    def create_document(self, name: str) -> "Document":
        """
        Create a new document of this factory's variant.
        
        Args:
            name: Name of the document, passed through unchanged
            
        Returns:
            A new document with empty content
            
        Raises:
            InvalidArgumentError: If the name is empty
        """
        pass
