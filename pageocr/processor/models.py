from dataclasses import dataclass, field

from pageocr.ocr.models import PageResult


def placeholder_text(page: int, message: str) -> str:
    """Text stored for a page whose OCR could not be completed."""
    return f"Error processing page {page}: {message}"


@dataclass(frozen=True)
class ResultSet:
    """OCR output for a whole document, one entry per page in page order."""

    pages: list[PageResult] = field(default_factory=list)
    total_pages: int = 0

    def to_payload(self) -> dict[str, object]:
        """JSON-ready shape served by the processing endpoint."""
        return {
            "pages": [{"page": p.page, "natural_text": p.natural_text} for p in self.pages],
            "total_pages": self.total_pages,
        }
