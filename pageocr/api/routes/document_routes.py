from fastapi import APIRouter, File, HTTPException, Request, UploadFile, status
from fastapi.responses import PlainTextResponse

from pageocr.api.schemas import DocumentResponse, SelectionRequest, SelectionResponse
from pageocr.ingestion.exceptions import UnsupportedMediaTypeError, UploadValidationError
from pageocr.ingestion.validator import validate_uploads
from pageocr.logging.logger import Log
from pageocr.presentation.markdown import render_markdown
from pageocr.store.document_store import DocumentQueueStore
from pageocr.store.models import DocumentStatus, UploadedFile

router = APIRouter(prefix="/documents", tags=["Documents"])


def _store(request: Request) -> DocumentQueueStore:
    return request.app.state.store


@router.post("", response_model=list[DocumentResponse], status_code=status.HTTP_201_CREATED)
async def upload_documents(
    request: Request,
    files: list[UploadFile] = File(...),
) -> list[DocumentResponse]:
    """Queue one or more PDFs for OCR. The whole batch is rejected if any file is invalid."""
    uploads = [
        UploadedFile(
            filename=f.filename or "document.pdf",
            content=await f.read(),
            content_type=f.content_type or "",
        )
        for f in files
    ]
    settings = request.app.state.settings
    try:
        validate_uploads(uploads, settings.max_file_size_mb)
    except UnsupportedMediaTypeError as exc:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=str(exc)
        ) from exc
    except UploadValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc

    documents = _store(request).enqueue(uploads)
    Log.info(f"Queued {len(documents)} document(s)")
    return [DocumentResponse.from_document(d) for d in documents]


@router.get("", response_model=list[DocumentResponse])
def list_documents(request: Request) -> list[DocumentResponse]:
    return [DocumentResponse.from_document(d) for d in _store(request).list_all()]


@router.get("/completed", response_model=list[DocumentResponse])
def list_completed_documents(request: Request) -> list[DocumentResponse]:
    return [DocumentResponse.from_document(d) for d in _store(request).list_completed()]


@router.get("/selection", response_model=SelectionResponse)
def get_selection(request: Request) -> SelectionResponse:
    return SelectionResponse(document_id=_store(request).selected_id)


@router.put("/selection", response_model=SelectionResponse)
def set_selection(body: SelectionRequest, request: Request) -> SelectionResponse:
    store = _store(request)
    if body.document_id is not None and store.get_by_id(body.document_id) is None:
        raise HTTPException(status_code=404, detail="Document not found")
    store.set_selected(body.document_id)
    return SelectionResponse(document_id=store.selected_id)


@router.get("/{document_id}", response_model=DocumentResponse)
def get_document(document_id: str, request: Request) -> DocumentResponse:
    document = _store(request).get_by_id(document_id)
    if document is None:
        raise HTTPException(status_code=404, detail="Document not found")
    return DocumentResponse.from_document(document)


@router.get("/{document_id}/markdown", response_class=PlainTextResponse)
def get_document_markdown(document_id: str, request: Request) -> str:
    document = _store(request).get_by_id(document_id)
    if document is None:
        raise HTTPException(status_code=404, detail="Document not found")
    if document.status is not DocumentStatus.COMPLETED or document.result is None:
        raise HTTPException(
            status_code=409,
            detail=f"Document is {document.status.value}, no result available",
        )
    return render_markdown(document.result, title=document.filename)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_document(document_id: str, request: Request) -> None:
    _store(request).remove(document_id)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def clear_documents(request: Request) -> None:
    _store(request).clear()
