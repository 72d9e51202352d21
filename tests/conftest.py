import io
from collections.abc import Callable

import pytest
from pypdf import PdfWriter
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from pageocr.config.settings import Settings


def build_pdf(page_texts: list[str]) -> bytes:
    """Generate a PDF with one page per entry, each drawing its text."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for text in page_texts:
        c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def pdf_factory() -> Callable[[list[str]], bytes]:
    return build_pdf


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return build_pdf(["Hello PDF World"])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a three-page PDF with known text on each page."""
    return build_pdf(["Page one content", "Page two content", "Page three content"])


@pytest.fixture()
def zero_page_pdf_bytes() -> bytes:
    """Generate a structurally valid PDF that has no pages."""
    buf = io.BytesIO()
    PdfWriter().write(buf)
    return buf.getvalue()


@pytest.fixture()
def settings() -> Settings:
    """Settings with the required OCR values and no retry delay."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        ocr_api_url="https://ocr.test/v1/ocr",
        ocr_api_key="test-key",
        ocr_retry_delay_seconds=0.0,
    )
