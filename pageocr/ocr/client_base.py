from abc import ABC, abstractmethod


class BaseOcrTransport(ABC):
    """Contract for provider-specific OCR transports."""

    @abstractmethod
    def post_page(self, base64_pdf: str) -> str:
        """Send one base64-encoded single-page PDF and return the raw response body.

        Raises:
            OcrTransportError: on network failure or a non-2xx response.
        """

    def close(self) -> None:
        """Release any held connections."""
