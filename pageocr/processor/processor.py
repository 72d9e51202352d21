from collections.abc import Sequence

from pageocr.config.settings import Settings
from pageocr.logging.logger import Log
from pageocr.ocr.factory import OcrClientFactory
from pageocr.pdf.exceptions import SplitError
from pageocr.pdf.factory import PdfSplitterFactory
from pageocr.processor.exceptions import PipelineStateError
from pageocr.processor.models import ResultSet
from pageocr.processor.pipeline import PipelineContext, PipelineStep, ProgressCallback
from pageocr.processor.steps import AssembleResultStep, OcrPagesStep, SplitPagesStep


class Processor:
    """Runs a PDF through the page pipeline.

    Pipeline: split -> OCR each page -> assemble ordered result set.
    Page-level OCR failures become placeholder pages; only a split failure
    reaches the caller.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(
        self,
        raw_bytes: bytes,
        *,
        document_id: str | None = None,
        progress: ProgressCallback | None = None,
    ) -> ResultSet:
        """Process one document and return its complete, ordered ResultSet.

        Raises:
            SplitError: if the document cannot be split into pages.
        """
        label = document_id or "<inline>"
        Log.info(f"Processing document {label} ({len(raw_bytes)} bytes)")
        context = PipelineContext(raw_bytes=raw_bytes, document_id=document_id, progress=progress)
        try:
            for step in self._steps:
                context = step.run(context)
        except SplitError as exc:
            Log.error(f"Document {label} could not be split: {exc}")
            raise

        if context.result is None:
            raise PipelineStateError("Pipeline finished without assembling a result")
        Log.info(
            f"Document {label} done: {context.result.total_pages} pages, "
            f"{len(context.failed_pages)} failed"
        )
        return context.result


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with the configured splitter and OCR client."""
    splitter = PdfSplitterFactory.create(settings)
    ocr_client = OcrClientFactory.create(settings)
    return Processor(
        steps=[
            SplitPagesStep(splitter),
            OcrPagesStep(
                ocr_client,
                page_concurrency=settings.page_concurrency,
                document_timeout_seconds=settings.document_timeout_seconds,
            ),
            AssembleResultStep(),
        ]
    )
