"""
Domain entities for document management.
Value objects describing documents and the results of their lifecycle.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Dict, Any
from enum import Enum
from pydantic import BaseModel

from .exceptions import UnsupportedDocumentTypeError


class DocumentType(Enum):
    """Variant of a document."""
    WORD = "word"
    PDF = "pdf"
    EXCEL = "excel"

    @property
    def tag(self) -> str:
        """Human readable variant tag."""
        return _TYPE_TAGS[self]

    @property
    def extension(self) -> str:
        """File extension used when describing save operations."""
        return _TYPE_EXTENSIONS[self]

    @classmethod
    def from_value(cls, value: str) -> "DocumentType":
        """
        Parse a document type from its textual value.

        Args:
            value: Type name, case-insensitive (word, pdf, excel)

        Returns:
            Matching document type

        Raises:
            UnsupportedDocumentTypeError: If the value names no known type
        """
        if isinstance(value, cls):
            return value
        normalized = value.strip().lower() if isinstance(value, str) else ""
        for member in cls:
            if member.value == normalized:
                return member
        supported = ", ".join(member.value for member in cls)
        raise UnsupportedDocumentTypeError(
            f"Document type '{value}' not supported. Available types: {supported}"
        )


_TYPE_TAGS = {
    DocumentType.WORD: "Word",
    DocumentType.PDF: "PDF",
    DocumentType.EXCEL: "Excel",
}

_TYPE_EXTENSIONS = {
    DocumentType.WORD: ".docx",
    DocumentType.PDF: ".pdf",
    DocumentType.EXCEL: ".xlsx",
}


@dataclass(frozen=True)
class TextFormatting:
    """Formatting applied to a piece of text in a Word document."""
    text: str
    style: str


@dataclass(frozen=True)
class DocumentInfo:
    """Snapshot of a document's state."""
    name: str
    document_type: DocumentType
    content: str
    created_at: Optional[datetime]
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_content(self) -> bool:
        """Whether content has been created."""
        return bool(self.content)


@dataclass(frozen=True)
class LifecycleResult:
    """Result of running a document through create/save/open and its extra operation."""
    success: bool
    document_info: Optional[DocumentInfo]
    messages: List[str]
    message: str
    error: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        """Whether any errors occurred during processing."""
        return not self.success or self.error is not None


# API Models for FastAPI
class FormattingRequest(BaseModel):
    """Formatting in request."""
    text: str
    style: str


class DocumentRequestAPI(BaseModel):
    """Document lifecycle request via JSON."""
    name: str
    document_type: str = "word"
    formatting: Optional[FormattingRequest] = None
    password: Optional[str] = None
    formula: Optional[str] = None


class DocumentInfoResponse(BaseModel):
    """Document info response."""
    name: str
    document_type: str
    content: str
    created_at: Optional[str] = None
    details: Dict[str, Any] = {}


class LifecycleResponse(BaseModel):
    """Document lifecycle response."""
    success: bool
    message: str
    document: Optional[DocumentInfoResponse] = None
    messages: List[str] = []
    error: Optional[str] = None


class DocumentTypeResponse(BaseModel):
    """Supported document type."""
    name: str
    tag: str
    extension: str
    factory: str
    extra_operation: str
    description: str
