"""
Application service for document management.
Coordinates factories, domain services and the output adapter.
"""
import logging
from typing import List, Optional, Dict, Any, Union

from docfactory.domain.documents import Document
from docfactory.domain.entities import DocumentType, DocumentInfo, LifecycleResult, TextFormatting
from docfactory.domain.services.error_handler import ErrorContext
from docfactory.ports.document_factory_port import DocumentFactoryPort
from docfactory.ports.output_port import OutputPort
from .dependency_container import DependencyContainer

logger = logging.getLogger(__name__)


class DocumentManagementApplication:
    """Main application service for document management."""

    def __init__(self, dependency_container: Optional[DependencyContainer] = None):
        """
        Initialize the application with its dependencies.

        Args:
            dependency_container: Container managing all dependencies (default: new instance)
        """
        self._dependency_container = dependency_container or DependencyContainer()

    def get_factory(
        self,
        document_type: Union[DocumentType, str],
        output: Optional[OutputPort] = None
    ) -> DocumentFactoryPort:
        """
        Get the factory for a document type.

        Args:
            document_type: Document type or its name
            output: Output sink overriding the container's one

        Returns:
            Document factory bound to the type
        """
        config_service = self._dependency_container.get_configuration_service()
        return self._dependency_container.get_factory_registry().get_factory(
            document_type,
            output=output or self._dependency_container.get_output(),
            timestamp_format=config_service.get_timestamp_format()
        )

    def create_document(
        self,
        document_type: Union[DocumentType, str],
        name: str,
        output: Optional[OutputPort] = None
    ) -> Document:
        """
        Create a document through the factory of its type.

        Args:
            document_type: Document type or its name
            name: Document name
            output: Output sink overriding the container's one

        Returns:
            New document with empty content

        Raises:
            UnsupportedDocumentTypeError: If the type is unknown
            InvalidArgumentError: If the name is empty
        """
        return self.get_factory(document_type, output).create_document(name)

    def process_document(
        self,
        document_type: Union[DocumentType, str],
        name: str,
        formatting: Optional[TextFormatting] = None,
        password: Optional[str] = None,
        formula: Optional[str] = None,
        output: Optional[OutputPort] = None
    ) -> LifecycleResult:
        """
        Create a document and run it through its whole lifecycle.

        Args:
            document_type: Document type or its name
            name: Document name
            formatting: Formatting applied to Word documents
            password: Password applied to PDF documents
            formula: Formula added to Excel documents
            output: Output sink overriding the container's one

        Returns:
            LifecycleResult: Lifecycle result, failed if any step raised
        """
        try:
            document = self.create_document(document_type, name, output)
            return self._dependency_container.get_lifecycle_service().run_lifecycle(
                document,
                formatting=formatting,
                password=password,
                formula=formula
            )
        except Exception as e:
            context = ErrorContext(
                operation="process_document",
                document_type=getattr(document_type, "value", document_type),
                name=name
            )
            return self._dependency_container.get_error_handler().handle_lifecycle_error(e, context)

    def get_supported_types(self) -> List[str]:
        """
        Returns the list of supported document types.

        Returns:
            List[str]: List of supported document types
        """
        return self._dependency_container.get_factory_registry().get_supported_types()

    def get_type_info(self, document_type: Union[DocumentType, str]) -> Dict[str, Any]:
        """Information about one document type."""
        return self._dependency_container.get_factory_registry().get_type_info(document_type)

    def run_demo(self, output: Optional[OutputPort] = None) -> List[DocumentInfo]:
        """
        Walk every document type through the factory method and its operations.

        For each type the factory creates a sample document, then content
        creation, save, open and the type's own operation run in that order,
        followed by the document summary.

        Args:
            output: Output sink overriding the container's one

        Returns:
            List[DocumentInfo]: Final state of each demo document
        """
        out = output or self._dependency_container.get_output()
        infos = []
        lifecycle_service = self._dependency_container.get_lifecycle_service()

        out.write("=== Document Factory Method Demo ===")

        for document_type, name in DEMO_DOCUMENTS:
            out.write("")
            out.write(f"--- {document_type.tag} document ---")

            factory = self.get_factory(document_type, out)
            document = factory.create_document(name)

            document.create_content()
            document.save()
            document.open()

            lifecycle_service.apply_extra_operation(
                document,
                formatting=DEMO_FORMATTING,
                password=DEMO_PASSWORD,
                formula=DEMO_FORMULA
            )

            out.write(document.display_info())
            infos.append(document.get_info())

        logger.info("Demo completed for %d documents", len(infos))
        return infos


DEMO_DOCUMENTS = [
    (DocumentType.WORD, "Sample Report"),
    (DocumentType.PDF, "User Manual"),
    (DocumentType.EXCEL, "Financial Data"),
]

DEMO_FORMATTING = TextFormatting(text="Important text", style="Bold")
DEMO_PASSWORD = "secret123"
DEMO_FORMULA = "=SUM(A1:A10)"
