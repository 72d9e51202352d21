class PdfError(Exception):
    """Base exception for PDF handling errors."""


class SplitError(PdfError):
    """Raised when a document cannot be decomposed into single pages."""
