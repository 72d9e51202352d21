from abc import ABC, abstractmethod

from pageocr.pdf.models import PageDocument


class BasePdfSplitter(ABC):
    """Contract for all PDF page splitting adapters."""

    @abstractmethod
    def split(self, pdf_bytes: bytes) -> list[PageDocument]:
        """Split a PDF into independent single-page PDFs.

        Each page is copied structurally into its own document, so text,
        fonts and images are preserved rather than re-rendered.

        Args:
            pdf_bytes: Raw PDF file content. Not modified.

        Returns:
            Single-page documents in ascending page order.

        Raises:
            SplitError: if the input is not a readable PDF or has no pages.
        """
