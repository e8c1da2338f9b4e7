"""
Domain service running documents through their lifecycle.
Pure business logic, no knowledge of where messages end up.
"""
import logging
from typing import List, Optional

from ..documents import Document, WordDocument, PdfDocument, ExcelDocument
from ..entities import DocumentInfo, LifecycleResult, TextFormatting
from ..exceptions import DocumentOperationError

logger = logging.getLogger(__name__)


class DocumentLifecycleService:
    """
    Core domain service for the document lifecycle.
    Runs content creation, save, open and the variant's own operation in that order.
    """

    def run_lifecycle(
        self,
        document: Document,
        formatting: Optional[TextFormatting] = None,
        password: Optional[str] = None,
        formula: Optional[str] = None
    ) -> LifecycleResult:
        """
        Run the full lifecycle of a document.

        Args:
            document: Document to process
            formatting: Formatting for Word documents
            password: Password for PDF documents
            formula: Formula for Excel documents

        Returns:
            Successful lifecycle result with the messages in emission order

        Raises:
            DocumentOperationError: If a document operation fails
        """
        messages: List[str] = []
        try:
            document.create_content()
            messages.append(document.last_message)
            messages.append(document.save())
            messages.append(document.open())

            extra_message = self.apply_extra_operation(document, formatting, password, formula)
            if extra_message is not None:
                messages.append(extra_message)
        except Exception as e:
            raise DocumentOperationError(
                f"Error during lifecycle of {document.document_type.tag} document '{document.name}': {str(e)}"
            )

        logger.info("Lifecycle completed for %s document '%s'", document.document_type.tag, document.name)
        return self.create_success_result(document.get_info(), messages)

    def apply_extra_operation(
        self,
        document: Document,
        formatting: Optional[TextFormatting] = None,
        password: Optional[str] = None,
        formula: Optional[str] = None
    ) -> Optional[str]:
        """
        Invoke the operation only the document's own variant offers.

        Args:
            document: Document to narrow to its variant
            formatting: Used when the document is a WordDocument
            password: Used when the document is a PdfDocument
            formula: Used when the document is an ExcelDocument

        Returns:
            The operation's message, or None when no argument was given for the variant
        """
        if isinstance(document, WordDocument):
            if formatting is None:
                return None
            return document.add_formatting(formatting.text, formatting.style)
        if isinstance(document, PdfDocument):
            if password is None:
                return None
            return document.add_security(password)
        if isinstance(document, ExcelDocument):
            if formula is None:
                return None
            return document.add_formula(formula)

        logger.debug("No extra operation for %s", type(document).__name__)
        return None

    def create_success_result(self, document_info: DocumentInfo, messages: List[str]) -> LifecycleResult:
        """
        Create a successful lifecycle result.

        Args:
            document_info: Snapshot of the processed document
            messages: Messages emitted during the lifecycle

        Returns:
            Successful lifecycle result
        """
        return LifecycleResult(
            success=True,
            document_info=document_info,
            messages=messages,
            message=f"{document_info.document_type.tag} document '{document_info.name}' processed successfully",
            error=None
        )

    def create_error_result(self, error: str, document_type: str = "unknown") -> LifecycleResult:
        """
        Create a failed lifecycle result.

        Args:
            error: The error message
            document_type: The document type that was requested

        Returns:
            Failed lifecycle result
        """
        return LifecycleResult(
            success=False,
            document_info=None,
            messages=[],
            message=f"Document processing failed for type {document_type}",
            error=error
        )
