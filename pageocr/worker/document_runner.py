from pageocr.logging.logger import Log
from pageocr.pdf.exceptions import SplitError
from pageocr.processor.processor import Processor
from pageocr.store.document_store import DocumentQueueStore
from pageocr.store.models import Document, DocumentStatus


class DocumentRunner:
    """Run one document through the processor and record the outcome."""

    def __init__(self, processor: Processor, store: DocumentQueueStore) -> None:
        self._processor = processor
        self._store = store

    def run(self, document: Document) -> None:
        """Process a document claimed from the store.

        A split failure, or any unexpected error, leaves the document in the
        `error` state; otherwise it ends `completed` with its result set.
        """
        current = self._store.get_by_id(document.id)
        if current is None:
            Log.warning(f"Document {document.id} was removed before processing")
            return
        if current.status.is_terminal:
            Log.warning(f"Document {document.id} is already {current.status.value}, skipping")
            return

        Log.info(f"Running document {document.id} ({document.filename})")
        self._store.update_status(
            document.id,
            status=DocumentStatus.PROCESSING,
            processing_status="Processing with OCR API...",
        )
        try:
            result = self._processor.process(
                document.raw_bytes,
                document_id=document.id,
                progress=lambda note: self._store.update_status(
                    document.id, processing_status=note
                ),
            )
        except SplitError as exc:
            self._fail(document, str(exc))
            return
        except Exception as exc:
            Log.exception(f"Unexpected error while processing document {document.id}")
            self._fail(document, f"Failed to process document: {exc}")
            return

        self._store.update_status(
            document.id,
            status=DocumentStatus.COMPLETED,
            result=result,
            processing_status="Completed",
        )
        Log.info(f"Document {document.id} completed with {result.total_pages} pages")

    def _fail(self, document: Document, message: str) -> None:
        self._store.update_status(
            document.id,
            status=DocumentStatus.ERROR,
            error=message,
            processing_status=None,
        )
        Log.error(f"Document {document.id} marked as error: {message}")
