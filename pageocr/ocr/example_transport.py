"""Example OCR transport.

Answers every page with a fixed envelope and makes no network calls. Useful
for local development and as a template for new providers: implement
BaseOcrTransport and register the provider in OcrClientFactory.
"""

from typing import ClassVar

from pageocr.ocr.client_base import BaseOcrTransport
from pageocr.ocr.envelope import ENVELOPE_PREFIX, ENVELOPE_SUFFIX


class ExampleOcrTransport(BaseOcrTransport):
    """Returns a canned `natural_text` envelope for any page."""

    # Newlines arrive escaped from the real service, so the sample keeps them escaped too.
    DEFAULT_TEXT: ClassVar[str] = "# Example page\\n\\nOCR output placeholder."

    def __init__(self, text: str | None = None) -> None:
        self._text = text if text is not None else self.DEFAULT_TEXT
        self.calls = 0

    def post_page(self, base64_pdf: str) -> str:
        _ = base64_pdf
        self.calls += 1
        return f"{ENVELOPE_PREFIX}{self._text}{ENVELOPE_SUFFIX}"
