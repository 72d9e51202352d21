from pageocr.config.settings import Settings
from pageocr.ocr.example_transport import ExampleOcrTransport
from pageocr.ocr.httpx_transport import HttpxOcrTransport
from pageocr.ocr.ocr_client import OcrClient


class OcrClientFactory:
    """Creates an OcrClient for the configured provider."""

    PROVIDERS = ("http", "example")

    @classmethod
    def create(cls, settings: Settings) -> OcrClient:
        provider = settings.ocr_provider.lower()
        if provider == "example":
            transport = ExampleOcrTransport()
        elif provider == "http":
            transport = HttpxOcrTransport(
                api_url=settings.ocr_api_url,
                api_key=settings.ocr_api_key,
                timeout_seconds=settings.ocr_timeout_seconds,
            )
        else:
            raise ValueError(
                f"Unknown OCR provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
            )
        return OcrClient(
            transport=transport,
            max_retries=settings.ocr_max_retries,
            retry_delay_seconds=settings.ocr_retry_delay_seconds,
        )
