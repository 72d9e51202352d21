from collections.abc import Sequence
from pathlib import PurePath

from pageocr.ingestion.exceptions import UnsupportedMediaTypeError, UploadValidationError
from pageocr.store.models import UploadedFile

ACCEPTED_MEDIA_TYPE = "application/pdf"
ACCEPTED_EXTENSION = ".pdf"
PDF_ONLY_MESSAGE = "Please upload a PDF file only."

# Browsers and HTTP clients fall back to these when they cannot tell the type.
_GENERIC_MEDIA_TYPES = frozenset({"", "application/octet-stream"})


def is_pdf(file: UploadedFile) -> bool:
    media_type = file.content_type.split(";", 1)[0].strip().lower()
    if media_type == ACCEPTED_MEDIA_TYPE:
        return True
    if media_type in _GENERIC_MEDIA_TYPES:
        return PurePath(file.filename).suffix.lower() == ACCEPTED_EXTENSION
    return False


def validate_uploads(files: Sequence[UploadedFile], max_file_size_mb: int) -> None:
    """Check a batch of uploads before anything is queued.

    Raises:
        UnsupportedMediaTypeError: if any file is not a PDF.
        UploadValidationError: if the batch is empty, or a file is empty or too large.
    """
    if not files:
        raise UploadValidationError("No files uploaded")
    max_bytes = max_file_size_mb * 1024 * 1024
    for file in files:
        if not is_pdf(file):
            raise UnsupportedMediaTypeError(PDF_ONLY_MESSAGE)
        if not file.content:
            raise UploadValidationError(f"{file.filename}: empty file")
        if len(file.content) > max_bytes:
            raise UploadValidationError(
                f"{file.filename}: file exceeds max size of {max_file_size_mb} MB"
            )
