"""
FastAPI adapter for the document factory service.
"""
from typing import List

from fastapi import FastAPI, HTTPException

from ..domain.entities import (
    DocumentRequestAPI, DocumentInfoResponse, LifecycleResponse,
    DocumentTypeResponse, LifecycleResult, TextFormatting
)
from ..application.dependency_container import DependencyContainer
from ..application.document_app import DocumentManagementApplication
from .memory_output_adapter import MemoryOutputAdapter


# FastAPI application configuration
app = FastAPI(
    title="Document Factory Service",
    description="Creates Word, PDF and Excel documents through their factories",
    version="1.0.0"
)

# Global dependency container
container = DependencyContainer()
document_app = DocumentManagementApplication(container)


@app.get("/health")
async def health_check():
    """Service health check."""
    return {"status": "healthy", "service": "document-factory"}


@app.get("/document-types", response_model=List[DocumentTypeResponse])
async def get_document_types():
    """Get available document types."""
    return [
        DocumentTypeResponse(**document_app.get_type_info(document_type))
        for document_type in document_app.get_supported_types()
    ]


@app.post("/documents", response_model=LifecycleResponse)
async def process_document(request: DocumentRequestAPI):
    """
    Create a document and run its lifecycle.

    Args:
        request: Document request
    """
    config_service = container.get_configuration_service()
    if not config_service.validate_document_type(request.document_type):
        supported = ", ".join(config_service.get_supported_document_types())
        raise HTTPException(
            status_code=400,
            detail=f"Document type {request.document_type} not supported. Available types: {supported}"
        )

    if not request.name.strip():
        raise HTTPException(status_code=400, detail="Document name cannot be empty")

    formatting = None
    if request.formatting is not None:
        formatting = TextFormatting(text=request.formatting.text, style=request.formatting.style)

    # Fresh sink per request so messages never leak between requests
    result = document_app.process_document(
        document_type=request.document_type,
        name=request.name,
        formatting=formatting,
        password=request.password,
        formula=request.formula,
        output=MemoryOutputAdapter()
    )

    if not result.success:
        raise HTTPException(status_code=500, detail=result.error)

    return _convert_result_to_response(result)


def _convert_result_to_response(result: LifecycleResult) -> LifecycleResponse:
    """Convert a LifecycleResult to LifecycleResponse."""
    document = None
    if result.document_info is not None:
        info = result.document_info
        document = DocumentInfoResponse(
            name=info.name,
            document_type=info.document_type.value,
            content=info.content,
            created_at=info.created_at.isoformat() if info.created_at else None,
            details=info.details
        )

    return LifecycleResponse(
        success=result.success,
        message=result.message,
        document=document,
        messages=result.messages,
        error=result.error
    )
