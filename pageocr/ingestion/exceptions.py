class IngestionError(Exception):
    """Base exception for upload handling errors."""


class UploadValidationError(IngestionError):
    """Raised when an uploaded file is not accepted for processing."""


class UnsupportedMediaTypeError(UploadValidationError):
    """Raised when an uploaded file is not a PDF."""
