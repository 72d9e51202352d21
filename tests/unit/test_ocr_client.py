from unittest.mock import MagicMock, call, patch

import pytest

from pageocr.ocr.client_base import BaseOcrTransport
from pageocr.ocr.exceptions import OcrExtractionError, OcrPageError, OcrTransportError
from pageocr.ocr.ocr_client import OcrClient
from pageocr.ocr.models import ExtractionFailed, PageResult, TransportFailed
from pageocr.pdf.models import PageDocument


def _envelope(text: str) -> str:
    return '{"natural_text": "' + text + '"}'


def _make_client(
    responses: list[object], max_retries: int = 2, delay: float = 1.0
) -> tuple[OcrClient, MagicMock]:
    transport = MagicMock(spec=BaseOcrTransport)
    transport.post_page.side_effect = responses
    client = OcrClient(transport=transport, max_retries=max_retries, retry_delay_seconds=delay)
    return client, transport


def _page(index: int = 0) -> PageDocument:
    return PageDocument(index=index, pdf_bytes=b"%PDF-1.4 page")


@pytest.fixture()
def mock_sleep():  # type: ignore[no-untyped-def]
    with patch("pageocr.ocr.ocr_client.time.sleep") as sleep:
        yield sleep


class TestSuccessfulAttempt:
    def test_returns_page_result_numbered_from_one(self, mock_sleep: MagicMock) -> None:
        client, _transport = _make_client([_envelope("hello")])

        result = client.process_page(_page(index=4))

        assert result == PageResult(page=5, natural_text="hello")
        mock_sleep.assert_not_called()

    def test_sends_base64_encoded_page(self, mock_sleep: MagicMock) -> None:
        client, transport = _make_client([_envelope("hello")])

        client.process_page(PageDocument(index=0, pdf_bytes=b"ABC"))

        transport.post_page.assert_called_once_with("QUJD")

    def test_text_is_returned_verbatim(self, mock_sleep: MagicMock) -> None:
        client, _transport = _make_client([_envelope("  text\\nwith escapes  ")])

        result = client.process_page(_page())

        assert result.natural_text == "  text\\nwith escapes  "


class TestRetryPolicy:
    def test_makes_exactly_max_retries_plus_one_attempts(self, mock_sleep: MagicMock) -> None:
        failures = [OcrTransportError("down", status_code=500)] * 4
        client, transport = _make_client(failures, max_retries=3)

        with pytest.raises(OcrPageError):
            client.process_page(_page())

        assert transport.post_page.call_count == 4

    def test_delay_is_constant_between_attempts(self, mock_sleep: MagicMock) -> None:
        failures = [OcrTransportError("down")] * 3
        client, _transport = _make_client(failures, max_retries=2, delay=1.0)

        with pytest.raises(OcrPageError):
            client.process_page(_page())

        assert mock_sleep.call_args_list == [call(1.0), call(1.0)]

    def test_per_call_max_retries_overrides_default(self, mock_sleep: MagicMock) -> None:
        client, transport = _make_client([OcrTransportError("down")] * 5, max_retries=2)

        with pytest.raises(OcrPageError):
            client.process_page(_page(), max_retries=0)

        assert transport.post_page.call_count == 1
        mock_sleep.assert_not_called()

    def test_succeeds_on_third_attempt(self, mock_sleep: MagicMock) -> None:
        client, transport = _make_client(
            [OcrTransportError("down"), OcrTransportError("down"), _envelope("finally")]
        )

        result = client.process_page(_page())

        assert result == PageResult(page=1, natural_text="finally")
        assert transport.post_page.call_count == 3
        assert mock_sleep.call_count == 2

    def test_empty_text_is_retried(self, mock_sleep: MagicMock) -> None:
        client, transport = _make_client([_envelope("   "), _envelope("text")])

        result = client.process_page(_page())

        assert result.natural_text == "text"
        assert transport.post_page.call_count == 2

    def test_unrecognised_envelope_is_retried(self, mock_sleep: MagicMock) -> None:
        client, transport = _make_client(['{"error": "bad"}', _envelope("text")])

        result = client.process_page(_page())

        assert result.natural_text == "text"
        assert transport.post_page.call_count == 2

    def test_unexpected_error_is_not_retried(self, mock_sleep: MagicMock) -> None:
        client, transport = _make_client([ValueError("malformed chunk")])

        with pytest.raises(ValueError, match="malformed chunk"):
            client.process_page(_page())

        assert transport.post_page.call_count == 1
        mock_sleep.assert_not_called()

    def test_each_retry_is_logged_as_warning(self, mock_sleep: MagicMock) -> None:
        client, _transport = _make_client(
            [OcrTransportError("Service Unavailable", status_code=503)] * 2 + [_envelope("ok")]
        )

        with patch("pageocr.ocr.ocr_client.Log") as log:
            client.process_page(_page(index=2))

        assert log.warning.call_count == 2
        first = log.warning.call_args_list[0].args[0]
        assert "Page 3 attempt 1/3" in first
        assert "HTTP 503: Service Unavailable" in first


class TestTerminalFailure:
    def test_error_carries_page_attempts_and_last_status(self, mock_sleep: MagicMock) -> None:
        failures = [
            OcrTransportError("first"),
            OcrTransportError("second"),
            OcrTransportError("Bad Gateway", status_code=502),
        ]
        client, _transport = _make_client(failures)

        with pytest.raises(OcrPageError) as exc_info:
            client.process_page(_page(index=1))

        error = exc_info.value
        assert error.page == 2
        assert error.attempts == 3
        assert "HTTP 502" in error.reason
        assert "page 2" in str(error)
        assert "3 attempt" in str(error)

    def test_extraction_failure_reason_is_reported(self, mock_sleep: MagicMock) -> None:
        client, _transport = _make_client([_envelope("")], max_retries=0)

        with pytest.raises(OcrPageError, match="empty text"):
            client.process_page(_page())

    def test_close_releases_transport(self) -> None:
        client, transport = _make_client([])
        client.close()
        transport.close.assert_called_once()


class TestAttemptErrors:
    def test_transport_error_maps_to_transport_outcome(self) -> None:
        error = OcrTransportError("Bad Gateway", status_code=502)

        assert error.outcome == TransportFailed(message="Bad Gateway", status_code=502)
        assert error.outcome.describe() == "HTTP 502: Bad Gateway"

    def test_extraction_error_maps_to_extraction_outcome(self) -> None:
        error = OcrExtractionError("OCR returned empty text")

        assert error.outcome == ExtractionFailed(reason="OCR returned empty text")
        assert error.outcome.describe() == "OCR returned empty text"

    def test_unrecognised_envelope_raises_extraction_error_per_attempt(
        self, mock_sleep: MagicMock
    ) -> None:
        client, _transport = _make_client(['{"error": "bad"}'], max_retries=0)

        with pytest.raises(OcrPageError) as exc_info:
            client.process_page(_page())

        assert isinstance(exc_info.value.__cause__, OcrExtractionError)
        assert exc_info.value.attempts == 1
        assert "not a natural_text envelope" in exc_info.value.reason
