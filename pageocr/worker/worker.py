import threading

from pageocr.config.settings import Settings
from pageocr.logging.logger import Log
from pageocr.store.document_store import DocumentQueueStore
from pageocr.store.models import Document
from pageocr.worker.document_runner import DocumentRunner


class Worker:
    """Poll loop: claim -> dispatch -> wait."""

    def __init__(
        self,
        store: DocumentQueueStore,
        runner: DocumentRunner,
        settings: Settings,
    ) -> None:
        self._store = store
        self._runner = runner
        self._settings = settings
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def run(self, max_documents: int | None = None) -> None:
        """Main poll loop. Runs until stopped or interrupted.

        If max_documents is set, stop after processing that many documents (for testing).
        """
        Log.info("Worker started, polling for documents")
        documents_done = 0
        try:
            while not self._stop_event.is_set():
                if max_documents is not None and documents_done >= max_documents:
                    break
                document = self._try_claim_document()
                if document:
                    self._runner.run(document)
                    documents_done += 1
                else:
                    Log.debug("No documents pending, sleeping")
                    self._stop_event.wait(self._settings.worker_poll_interval_seconds)
        except KeyboardInterrupt:
            Log.info("Worker shutting down gracefully")

    def start_background(self) -> threading.Thread:
        """Run the poll loop on a daemon thread."""
        self._stop_event.clear()
        self._thread = threading.Thread(target=self.run, name="pageocr-worker", daemon=True)
        self._thread.start()
        return self._thread

    def stop(self, timeout: float | None = None) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        Log.info("Worker stopped")

    def _try_claim_document(self) -> Document | None:
        return self._store.claim_next_pending()
