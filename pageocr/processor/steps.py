import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

from pageocr.logging.logger import Log
from pageocr.ocr.exceptions import OcrPageError
from pageocr.ocr.models import PageResult
from pageocr.ocr.ocr_client import OcrClient
from pageocr.pdf.base import BasePdfSplitter
from pageocr.pdf.models import PageDocument
from pageocr.processor.exceptions import PipelineStateError
from pageocr.processor.models import ResultSet, placeholder_text
from pageocr.processor.pipeline import PipelineContext, PipelineStep

DEADLINE_EXCEEDED = "document processing deadline exceeded"


class SplitPagesStep(PipelineStep):
    def __init__(self, splitter: BasePdfSplitter) -> None:
        self._splitter = splitter

    def run(self, context: PipelineContext) -> PipelineContext:
        context.report("Splitting PDF into pages...")
        context.pages = self._splitter.split(context.raw_bytes)
        Log.info(f"PDF split into {len(context.pages)} pages")
        return context


class OcrPagesStep(PipelineStep):
    """Runs OCR for every page, substituting a placeholder for pages that fail.

    Pages go out one at a time in page order unless `page_concurrency` is
    above 1, in which case up to that many requests run at once.
    """

    def __init__(
        self,
        ocr_client: OcrClient,
        *,
        page_concurrency: int = 1,
        document_timeout_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ocr_client = ocr_client
        self._clock = clock
        self._page_concurrency = max(1, page_concurrency)
        self._document_timeout_seconds = document_timeout_seconds

    def run(self, context: PipelineContext) -> PipelineContext:
        deadline = (
            self._clock() + self._document_timeout_seconds
            if self._document_timeout_seconds is not None
            else None
        )
        total = len(context.pages)
        if self._page_concurrency == 1:
            results: list[tuple[PageResult, bool]] = []
            for page in context.pages:
                context.report(f"Processing page {page.page_number}/{total}...")
                results.append(self._process_one(page, total, deadline))
        else:
            context.report(f"Processing {total} pages...")
            with ThreadPoolExecutor(max_workers=self._page_concurrency) as pool:
                futures = [
                    pool.submit(self._process_one, page, total, deadline)
                    for page in context.pages
                ]
                results = [future.result() for future in futures]

        for result, failed in results:
            context.page_results.append(result)
            if failed:
                context.failed_pages.append(result.page)
        return context

    def _process_one(
        self, page: PageDocument, total: int, deadline: float | None
    ) -> tuple[PageResult, bool]:
        number = page.page_number
        if deadline is not None and self._clock() >= deadline:
            Log.warning(f"Skipping page {number}/{total}: {DEADLINE_EXCEEDED}")
            text = placeholder_text(number, DEADLINE_EXCEEDED)
            return PageResult(page=number, natural_text=text), True

        Log.info(f"Processing page {number}/{total}...")
        try:
            result = self._ocr_client.process_page(page)
        except OcrPageError as exc:
            Log.error(f"Failed to process page {number}: {exc}")
            text = placeholder_text(number, str(exc))
            return PageResult(page=number, natural_text=text), True
        except Exception as exc:
            Log.exception(f"Unexpected error processing page {number}")
            text = placeholder_text(number, str(exc))
            return PageResult(page=number, natural_text=text), True
        Log.info(f"Completed page {number}")
        return result, False


class AssembleResultStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if len(context.page_results) != len(context.pages):
            raise PipelineStateError(
                f"Expected {len(context.pages)} page results, got {len(context.page_results)}"
            )
        ordered = sorted(context.page_results, key=lambda r: r.page)
        context.result = ResultSet(pages=ordered, total_pages=len(context.pages))
        return context
