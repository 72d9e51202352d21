import io

from pypdf import PdfReader, PdfWriter

from pageocr.pdf.base import BasePdfSplitter
from pageocr.pdf.exceptions import SplitError
from pageocr.pdf.models import PageDocument


class PyPdfSplitter(BasePdfSplitter):
    """Splits a PDF into single pages using pypdf."""

    def split(self, pdf_bytes: bytes) -> list[PageDocument]:
        if not pdf_bytes:
            raise SplitError("Failed to split PDF pages: document is empty")
        try:
            reader = PdfReader(io.BytesIO(pdf_bytes))
            total_pages = len(reader.pages)
        except Exception as exc:
            raise SplitError(f"Failed to split PDF pages: {exc}") from exc

        if total_pages == 0:
            raise SplitError("Failed to split PDF pages: document has no pages")

        pages: list[PageDocument] = []
        try:
            for index, page in enumerate(reader.pages):
                writer = PdfWriter()
                writer.add_page(page)
                buffer = io.BytesIO()
                writer.write(buffer)
                pages.append(PageDocument(index=index, pdf_bytes=buffer.getvalue()))
        except Exception as exc:
            raise SplitError(f"Failed to split PDF pages: {exc}") from exc
        return pages
