from datetime import datetime

from pydantic import BaseModel

from pageocr.processor.models import ResultSet
from pageocr.store.models import Document, DocumentStatus


class OcrRequest(BaseModel):
    base64Data: str


class PageOcrResponse(BaseModel):
    page: int
    natural_text: str


class OcrResponse(BaseModel):
    pages: list[PageOcrResponse]
    total_pages: int

    @classmethod
    def from_result(cls, result: ResultSet) -> "OcrResponse":
        return cls(
            pages=[PageOcrResponse(page=p.page, natural_text=p.natural_text) for p in result.pages],
            total_pages=result.total_pages,
        )


class OcrErrorResponse(BaseModel):
    error: str


class DocumentResponse(BaseModel):
    id: str
    filename: str
    status: DocumentStatus
    error: str | None = None
    processing_status: str | None = None
    created_at: datetime
    result: OcrResponse | None = None

    @classmethod
    def from_document(cls, document: Document) -> "DocumentResponse":
        return cls(
            id=document.id,
            filename=document.filename,
            status=document.status,
            error=document.error,
            processing_status=document.processing_status,
            created_at=document.created_at,
            result=OcrResponse.from_result(document.result) if document.result else None,
        )


class SelectionRequest(BaseModel):
    document_id: str | None = None


class SelectionResponse(BaseModel):
    document_id: str | None = None
