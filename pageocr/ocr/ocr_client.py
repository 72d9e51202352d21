"""Per-page OCR with a bounded, constant-delay retry policy."""

import base64
import time
from collections.abc import Callable

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from pageocr.logging.logger import Log
from pageocr.ocr.client_base import BaseOcrTransport
from pageocr.ocr.envelope import extract_natural_text
from pageocr.ocr.exceptions import OcrAttemptError, OcrExtractionError, OcrPageError
from pageocr.ocr.models import AttemptSucceeded, PageResult
from pageocr.pdf.models import PageDocument


class OcrClient:
    """Sends single-page PDFs to an OCR transport and parses the envelope."""

    def __init__(
        self,
        *,
        transport: BaseOcrTransport,
        max_retries: int = 2,
        retry_delay_seconds: float = 1.0,
    ) -> None:
        self._transport = transport
        self._max_retries = max_retries
        self._retry_delay_seconds = retry_delay_seconds

    def process_page(self, page: PageDocument, max_retries: int | None = None) -> PageResult:
        """OCR one page, retrying failed attempts after a fixed delay.

        Args:
            page: Single-page document produced by the splitter.
            max_retries: Attempts allowed beyond the first. Defaults to the
                         value the client was built with.

        Returns:
            PageResult numbered `page.index + 1` with the text as returned.

        Raises:
            OcrPageError: once `max_retries + 1` attempts have failed.
        """
        retries = self._max_retries if max_retries is None else max_retries
        total_attempts = retries + 1
        payload = base64.b64encode(page.pdf_bytes).decode("ascii")

        retrying = Retrying(
            stop=stop_after_attempt(total_attempts),
            wait=wait_fixed(self._retry_delay_seconds),
            retry=retry_if_exception_type(OcrAttemptError),
            sleep=self._sleep,
            before_sleep=self._log_retry(page.page_number, total_attempts),
            reraise=True,
        )
        attempt_number = 0
        try:
            for attempt in retrying:
                attempt_number = attempt.retry_state.attempt_number
                with attempt:
                    outcome = self._attempt(payload)
                    if attempt_number > 1:
                        Log.info(f"Page {page.page_number} succeeded on attempt {attempt_number}")
                    return PageResult(page=page.page_number, natural_text=outcome.text)
        except OcrAttemptError as exc:
            reason = exc.outcome.describe()
            Log.error(
                f"Page {page.page_number} failed after {attempt_number} attempt(s): {reason}"
            )
            raise OcrPageError(page.page_number, attempt_number, reason) from exc
        raise OcrPageError(page.page_number, attempt_number, "no attempt made")

    def close(self) -> None:
        self._transport.close()

    def _attempt(self, payload: str) -> AttemptSucceeded:
        raw = self._transport.post_page(payload)
        text = extract_natural_text(raw)
        if text is None:
            Log.debug(f"Unrecognised OCR response: {raw[:200]!r}")
            raise OcrExtractionError("response is not a natural_text envelope")
        if not text.strip():
            raise OcrExtractionError("OCR returned empty text")
        return AttemptSucceeded(text=text)

    @staticmethod
    def _sleep(seconds: float) -> None:
        time.sleep(seconds)

    @staticmethod
    def _log_retry(
        page_number: int, total_attempts: int
    ) -> Callable[[RetryCallState], None]:
        def before_sleep(retry_state: RetryCallState) -> None:
            error = retry_state.outcome.exception() if retry_state.outcome else None
            reason = error.outcome.describe() if isinstance(error, OcrAttemptError) else error
            delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
            Log.warning(
                f"Page {page_number} attempt {retry_state.attempt_number}/{total_attempts} "
                f"failed: {reason}; retrying in {delay}s"
            )

        return before_sleep
