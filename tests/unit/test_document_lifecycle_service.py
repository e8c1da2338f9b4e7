import pytest
from unittest.mock import Mock
from docfactory.domain.services.document_lifecycle_service import DocumentLifecycleService
from docfactory.domain.documents import Document
from docfactory.domain.entities import DocumentType, TextFormatting
from docfactory.domain.exceptions import DocumentOperationError


class TestDocumentLifecycleService:
    """Unit tests for DocumentLifecycleService."""
    
    @pytest.fixture
    def service(self):
        """Create DocumentLifecycleService instance."""
        return DocumentLifecycleService()
    
    def test_word_lifecycle(self, service, word_factory, memory_output):
        """Test the Word lifecycle emits all four messages in order."""
        document = word_factory.create_document("Sample Report")
        
        result = service.run_lifecycle(
            document, formatting=TextFormatting(text="Important text", style="Bold")
        )
        
        assert result.success is True
        assert result.error is None
        assert len(result.messages) == 4
        assert result.messages == memory_output.messages
        assert result.messages[0].startswith("Creating Word content")
        assert result.messages[1].startswith("Saving")
        assert result.messages[2].startswith("Opening")
        assert "Bold" in result.messages[3] and "Important text" in result.messages[3]
        assert result.document_info.name == "Sample Report"
        assert "Word document" in result.document_info.content
        assert "processed successfully" in result.message
    
    def test_pdf_lifecycle(self, service, pdf_factory):
        """Test the PDF lifecycle applies security."""
        document = pdf_factory.create_document("User Manual")
        
        result = service.run_lifecycle(document, password="secret123")
        
        assert "secret123" in result.messages[-1]
        assert document.is_secured is True
    
    def test_excel_lifecycle(self, service, excel_factory):
        """Test the Excel lifecycle adds the formula."""
        document = excel_factory.create_document("Financial Data")
        
        result = service.run_lifecycle(document, formula="=SUM(A1:A10)")
        
        assert "=SUM(A1:A10)" in result.messages[-1]
        assert result.document_info.details == {"formulas": "=SUM(A1:A10)"}
    
    def test_extra_operation_skipped_without_argument(self, service, any_factory):
        """Test no extra operation runs when its argument is missing."""
        document = any_factory.create_document("Draft")
        
        result = service.run_lifecycle(document)
        
        assert len(result.messages) == 3
    
    def test_extra_operation_ignores_other_variants_arguments(self, service, pdf_factory):
        """Test arguments for other variants are ignored."""
        document = pdf_factory.create_document("User Manual")
        
        message = service.apply_extra_operation(
            document,
            formatting=TextFormatting(text="Important text", style="Bold"),
            formula="=SUM(A1:A10)"
        )
        
        assert message is None
        assert document.is_secured is False
    
    def test_failure_wrapped(self, service):
        """Test failures inside a document operation are wrapped."""
        document = Mock(spec=Document)
        document.name = "Broken"
        document.document_type = DocumentType.WORD
        document.create_content.side_effect = RuntimeError("disk full")
        
        with pytest.raises(DocumentOperationError) as exc_info:
            service.run_lifecycle(document)
        
        assert "Broken" in str(exc_info.value)
        assert "disk full" in str(exc_info.value)
    
    def test_create_error_result(self, service):
        """Test error result creation."""
        result = service.create_error_result("boom", document_type="pdf")
        
        assert result.success is False
        assert result.has_errors is True
        assert result.document_info is None
        assert result.messages == []
        assert result.error == "boom"
        assert "pdf" in result.message
