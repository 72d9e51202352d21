import json

import httpx

from pageocr.ocr.client_base import BaseOcrTransport
from pageocr.ocr.exceptions import OcrTransportError


class HttpxOcrTransport(BaseOcrTransport):
    """Posts single-page PDFs to the remote OCR endpoint over httpx."""

    def __init__(
        self,
        *,
        api_url: str,
        api_key: str,
        timeout_seconds: float,
        client: httpx.Client | None = None,
    ) -> None:
        self._api_url = api_url
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        self._client = client if client is not None else httpx.Client(timeout=timeout_seconds)

    def post_page(self, base64_pdf: str) -> str:
        try:
            response = self._client.post(
                self._api_url,
                json={"base64_pdf": base64_pdf},
                headers=self._headers,
            )
        except httpx.TimeoutException as exc:
            raise OcrTransportError(f"OCR API timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            raise OcrTransportError(f"OCR API network error: {exc}") from exc

        if not response.is_success:
            raise OcrTransportError(
                f"OCR API returned {response.reason_phrase or 'an error'}",
                status_code=response.status_code,
            )
        return self._unwrap_body(response.text)

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _unwrap_body(body: str) -> str:
        # The envelope is sometimes served as a JSON string literal.
        stripped = body.strip()
        if not stripped.startswith('"'):
            return body
        try:
            decoded = json.loads(stripped)
        except json.JSONDecodeError:
            return body
        return decoded if isinstance(decoded, str) else body
