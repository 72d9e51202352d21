from pageocr.ocr.models import ExtractionFailed, OcrAttemptOutcome, TransportFailed


class OcrError(Exception):
    """Base exception for all OCR-related errors."""


class OcrAttemptError(OcrError):
    """Raised when a single OCR attempt fails. Recovered by the retry policy."""

    @property
    def outcome(self) -> OcrAttemptOutcome:
        raise NotImplementedError


class OcrTransportError(OcrAttemptError):
    """Raised when the OCR endpoint is unreachable or answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    @property
    def outcome(self) -> TransportFailed:
        return TransportFailed(message=str(self), status_code=self.status_code)


class OcrExtractionError(OcrAttemptError):
    """Raised when the endpoint answered but no usable text could be extracted."""

    @property
    def outcome(self) -> ExtractionFailed:
        return ExtractionFailed(reason=str(self))


class OcrPageError(OcrError):
    """Raised when every attempt for a page has failed."""

    def __init__(self, page: int, attempts: int, reason: str) -> None:
        super().__init__(
            f"OCR API failed for page {page} after {attempts} attempt(s): {reason}"
        )
        self.page = page
        self.attempts = attempts
        self.reason = reason
