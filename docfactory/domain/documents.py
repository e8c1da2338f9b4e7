"""
Document hierarchy.
A document has a name, content and a creation timestamp; each variant describes
its own content, save and open behaviour and adds one operation of its own.
"""
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Dict, Any

from .entities import DocumentType, DocumentInfo, TextFormatting
from .exceptions import InvalidArgumentError
from ..ports.output_port import OutputPort

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Document(ABC):
    """
    Base class for all documents.

    Content stays empty until create_content() is called. The variant is
    fixed by the concrete class and never changes.
    """

    document_type: DocumentType

    def __init__(self, name: str, output: OutputPort, timestamp_format: str = TIMESTAMP_FORMAT):
        """
        Initialize the document.

        Args:
            name: Document name
            output: Where messages describing operations are written
            timestamp_format: strftime format used by display_info()

        Raises:
            InvalidArgumentError: If the name is empty or not a string
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError("Document name cannot be empty")

        self.name = name
        self.content = ""
        self.created_at: Optional[datetime] = None
        self.last_message: Optional[str] = None
        self._output = output
        self._timestamp_format = timestamp_format

    @abstractmethod
    def _build_content(self) -> str:
        """Variant-specific content text."""
        pass

    @abstractmethod
    def _save_message(self) -> str:
        pass

    @abstractmethod
    def _open_message(self) -> str:
        pass

    def create_content(self) -> str:
        """
        Populate the document content.

        Calling it again rewrites the same content and keeps the original
        creation timestamp.

        Returns:
            The document content
        """
        self.content = self._build_content()
        if self.created_at is None:
            self.created_at = datetime.now()

        logger.debug("Content created for %s document '%s'", self.document_type.tag, self.name)
        self._emit(f"Creating {self.document_type.tag} content for '{self.name}': {self.content}")
        return self.content

    def save(self) -> str:
        """
        Describe saving the document. Nothing is written to disk.

        Returns:
            The save message
        """
        return self._emit(self._save_message())

    def open(self) -> str:
        """
        Describe opening the document.

        Returns:
            The open message
        """
        return self._emit(self._open_message())

    def display_info(self) -> str:
        """
        Build a textual summary of the document.

        Returns:
            Multi-line summary with name, type, content and creation time
        """
        created = (
            self.created_at.strftime(self._timestamp_format)
            if self.created_at else "Not created yet"
        )
        lines = [
            f"Document: {self.name}",
            f"Type: {self.document_type.tag}",
            f"Content: {self.content or '(empty)'}",
            f"Created: {created}",
        ]
        for key, value in self.get_details().items():
            lines.append(f"{key.replace('_', ' ').capitalize()}: {value}")
        return "\n".join(lines)

    def get_details(self) -> Dict[str, Any]:
        """Variant-specific details shown by display_info()."""
        return {}

    def get_info(self) -> DocumentInfo:
        """Snapshot of the document's current state."""
        return DocumentInfo(
            name=self.name,
            document_type=self.document_type,
            content=self.content,
            created_at=self.created_at,
            details=self.get_details()
        )

    def _emit(self, message: str) -> str:
        self.last_message = message
        self._output.write(message)
        return message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class WordDocument(Document):
    """Word processing document."""

    document_type = DocumentType.WORD

    def __init__(self, name: str, output: OutputPort, timestamp_format: str = TIMESTAMP_FORMAT):
        super().__init__(name, output, timestamp_format)
        self.formatting: List[TextFormatting] = []

    def _build_content(self) -> str:
        return f"Word document '{self.name}' with paragraphs, headings and styled text"

    def _save_message(self) -> str:
        return f"Saving Word document '{self.name}' as {self.name}{self.document_type.extension} file"

    def _open_message(self) -> str:
        return f"Opening Word document '{self.name}' in word processor"

    def add_formatting(self, text: str, style: str) -> str:
        """
        Apply a style to a piece of text.

        Args:
            text: Text being formatted
            style: Style name, e.g. Bold

        Returns:
            The formatting message
        """
        self.formatting.append(TextFormatting(text=text, style=style))
        return self._emit(f"Applying {style} formatting to '{text}' in Word document '{self.name}'")

    def get_details(self) -> Dict[str, Any]:
        return {
            "formatting": ", ".join(f"{f.style}: {f.text}" for f in self.formatting) or "none"
        }


class PdfDocument(Document):
    """Portable document."""

    document_type = DocumentType.PDF

    def __init__(self, name: str, output: OutputPort, timestamp_format: str = TIMESTAMP_FORMAT):
        super().__init__(name, output, timestamp_format)
        self.is_secured = False

    def _build_content(self) -> str:
        return f"PDF document '{self.name}' with fixed layout pages"

    def _save_message(self) -> str:
        return f"Saving PDF document '{self.name}' as {self.name}{self.document_type.extension} file"

    def _open_message(self) -> str:
        return f"Opening PDF document '{self.name}' in PDF reader"

    def add_security(self, password: str) -> str:
        """
        Protect the document with a password.

        Args:
            password: Password to protect the document with

        Returns:
            The security message
        """
        self.is_secured = True
        return self._emit(f"Adding password protection to PDF document '{self.name}' with password: {password}")

    def get_details(self) -> Dict[str, Any]:
        return {"secured": "yes" if self.is_secured else "no"}


class ExcelDocument(Document):
    """Spreadsheet document."""

    document_type = DocumentType.EXCEL

    def __init__(self, name: str, output: OutputPort, timestamp_format: str = TIMESTAMP_FORMAT):
        super().__init__(name, output, timestamp_format)
        self.formulas: List[str] = []

    def _build_content(self) -> str:
        return f"Excel document '{self.name}' with worksheets and cells"

    def _save_message(self) -> str:
        return f"Saving Excel document '{self.name}' as {self.name}{self.document_type.extension} file"

    def _open_message(self) -> str:
        return f"Opening Excel document '{self.name}' in spreadsheet application"

    def add_formula(self, formula: str) -> str:
        """
        Add a formula to the spreadsheet.

        Args:
            formula: Formula text, kept verbatim

        Returns:
            The formula message
        """
        self.formulas.append(formula)
        return self._emit(f"Adding formula {formula} to Excel document '{self.name}'")

    def get_details(self) -> Dict[str, Any]:
        return {"formulas": ", ".join(self.formulas) or "none"}
