import pytest
from datetime import datetime
from pydantic import ValidationError as PydanticValidationError
from docfactory.adapters.fastapi_adapter import _convert_result_to_response
from docfactory.domain.entities import (
    DocumentRequestAPI, FormattingRequest, LifecycleResponse,
    DocumentInfo, DocumentType, LifecycleResult
)


class TestFastAPIAdapterModels:
    """Unit tests for FastAPI adapter Pydantic models."""
    
    def test_document_request_minimal(self):
        """Test minimal DocumentRequestAPI creation."""
        request = DocumentRequestAPI(name="Sample Report")
        
        assert request.name == "Sample Report"
        assert request.document_type == "word"
        assert request.formatting is None
        assert request.password is None
        assert request.formula is None
    
    def test_document_request_full(self):
        """Test full DocumentRequestAPI creation."""
        request = DocumentRequestAPI(
            name="Sample Report",
            document_type="word",
            formatting=FormattingRequest(text="Important text", style="Bold")
        )
        
        assert request.formatting.text == "Important text"
        assert request.formatting.style == "Bold"
    
    def test_document_request_requires_name(self):
        """Test the name field is required."""
        with pytest.raises(PydanticValidationError):
            DocumentRequestAPI(document_type="pdf")
    
    def test_lifecycle_response_defaults(self):
        """Test LifecycleResponse defaults."""
        response = LifecycleResponse(success=False, message="failed", error="boom")
        
        assert response.document is None
        assert response.messages == []


class TestConvertResultToResponse:
    """Unit tests for result conversion."""
    
    def test_convert_success(self):
        """Test converting a successful result."""
        created_at = datetime(2024, 1, 2, 3, 4, 5)
        result = LifecycleResult(
            success=True,
            document_info=DocumentInfo(
                name="User Manual",
                document_type=DocumentType.PDF,
                content="PDF document 'User Manual'",
                created_at=created_at,
                details={"secured": "yes"}
            ),
            messages=["a", "b"],
            message="done"
        )
        
        response = _convert_result_to_response(result)
        
        assert response.success is True
        assert response.document.document_type == "pdf"
        assert response.document.created_at == "2024-01-02T03:04:05"
        assert response.document.details == {"secured": "yes"}
        assert response.messages == ["a", "b"]
        assert response.error is None
    
    def test_convert_failure(self):
        """Test converting a failed result."""
        result = LifecycleResult(
            success=False,
            document_info=None,
            messages=[],
            message="failed",
            error="boom"
        )
        
        response = _convert_result_to_response(result)
        
        assert response.success is False
        assert response.document is None
        assert response.error == "boom"
