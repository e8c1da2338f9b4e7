"""
Adapters module.
Concrete document factories, output sinks and the HTTP interface.
"""

from .document_factories import WordDocumentFactory, PdfDocumentFactory, ExcelDocumentFactory
from .console_output_adapter import ConsoleOutputAdapter
from .memory_output_adapter import MemoryOutputAdapter

__all__ = [
    "WordDocumentFactory",
    "PdfDocumentFactory",
    "ExcelDocumentFactory",
    "ConsoleOutputAdapter",
    "MemoryOutputAdapter"
]
