import pymupdf

from pageocr.pdf.base import BasePdfSplitter
from pageocr.pdf.exceptions import SplitError
from pageocr.pdf.models import PageDocument


class PyMuPdfSplitter(BasePdfSplitter):
    """Splits a PDF into single pages using PyMuPDF."""

    def split(self, pdf_bytes: bytes) -> list[PageDocument]:
        if not pdf_bytes:
            raise SplitError("Failed to split PDF pages: document is empty")
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.page_count == 0:
                    raise SplitError("Failed to split PDF pages: document has no pages")
                return [
                    PageDocument(index=i, pdf_bytes=self._extract_page(doc, i))
                    for i in range(doc.page_count)
                ]
        except SplitError:
            raise
        except Exception as exc:
            raise SplitError(f"Failed to split PDF pages: {exc}") from exc

    @staticmethod
    def _extract_page(doc: pymupdf.Document, index: int) -> bytes:
        with pymupdf.open() as single:  # type: ignore[no-untyped-call]
            single.insert_pdf(doc, from_page=index, to_page=index)
            return single.tobytes()
