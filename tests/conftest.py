import pytest
from docfactory.adapters.memory_output_adapter import MemoryOutputAdapter
from docfactory.adapters.document_factories import (
    WordDocumentFactory, PdfDocumentFactory, ExcelDocumentFactory
)
from docfactory.application.dependency_container import DependencyContainer
from docfactory.application.document_app import DocumentManagementApplication


@pytest.fixture
def memory_output():
    """In-memory output sink for inspecting document messages."""
    return MemoryOutputAdapter()


@pytest.fixture
def word_factory(memory_output):
    """Word factory writing to memory."""
    return WordDocumentFactory(output=memory_output)


@pytest.fixture
def pdf_factory(memory_output):
    """PDF factory writing to memory."""
    return PdfDocumentFactory(output=memory_output)


@pytest.fixture
def excel_factory(memory_output):
    """Excel factory writing to memory."""
    return ExcelDocumentFactory(output=memory_output)


@pytest.fixture(params=["word", "pdf", "excel"])
def any_factory(request, memory_output):
    """Each concrete factory in turn."""
    factories = {
        "word": WordDocumentFactory,
        "pdf": PdfDocumentFactory,
        "excel": ExcelDocumentFactory
    }
    return factories[request.param](output=memory_output)


@pytest.fixture
def application(memory_output):
    """Application wired to the in-memory output sink."""
    return DocumentManagementApplication(DependencyContainer(output=memory_output))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration overrides from leaking into tests."""
    for variable in (
        "DOCFACTORY_DEFAULT_TYPE",
        "DOCFACTORY_TIMESTAMP_FORMAT",
        "DOCFACTORY_LOG_LEVEL",
        "DOCFACTORY_HOST",
        "DOCFACTORY_PORT",
    ):
        monkeypatch.delenv(variable, raising=False)
