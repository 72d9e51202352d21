import base64
import binascii

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from pageocr.api.schemas import OcrErrorResponse, OcrRequest, OcrResponse
from pageocr.logging.logger import Log
from pageocr.pdf.exceptions import SplitError
from pageocr.processor.processor import Processor

router = APIRouter(prefix="/ocr", tags=["OCR"])

_FAILURE = OcrErrorResponse(error="Failed to process document")


@router.post(
    "",
    response_model=OcrResponse,
    responses={500: {"model": OcrErrorResponse}},
)
def process_document(body: OcrRequest, request: Request) -> OcrResponse | JSONResponse:
    """Split a base64 PDF into pages and OCR each one, in page order."""
    processor: Processor = request.app.state.processor
    try:
        pdf_bytes = base64.b64decode("".join(body.base64Data.split()), validate=True)
        result = processor.process(pdf_bytes)
    except (binascii.Error, SplitError) as exc:
        Log.error(f"Error processing OCR request: {exc}")
        return JSONResponse(status_code=500, content=_FAILURE.model_dump())
    except Exception:
        Log.exception("Unexpected error processing OCR request")
        return JSONResponse(status_code=500, content=_FAILURE.model_dump())
    return OcrResponse.from_result(result)
