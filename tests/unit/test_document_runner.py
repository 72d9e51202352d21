from collections.abc import Callable
from unittest.mock import MagicMock

from pageocr.ocr.models import PageResult
from pageocr.pdf.exceptions import SplitError
from pageocr.processor.models import ResultSet
from pageocr.processor.processor import Processor
from pageocr.store.document_store import DocumentQueueStore
from pageocr.store.models import Document, DocumentStatus, UploadedFile
from pageocr.worker.document_runner import DocumentRunner


def _make_runner() -> tuple[DocumentRunner, MagicMock, DocumentQueueStore, Document]:
    processor = MagicMock(spec=Processor)
    store = DocumentQueueStore()
    document = store.enqueue([UploadedFile(filename="scan.pdf", content=b"%PDF-1.4")])[0]
    return DocumentRunner(processor, store), processor, store, document


def _status(store: DocumentQueueStore, document_id: str) -> Document:
    document = store.get_by_id(document_id)
    assert document is not None
    return document


class TestSuccessfulRun:
    def test_marks_completed_with_result(self) -> None:
        runner, processor, store, document = _make_runner()
        result = ResultSet(pages=[PageResult(page=1, natural_text="A")], total_pages=1)
        processor.process.return_value = result

        runner.run(document)

        stored = _status(store, document.id)
        assert stored.status is DocumentStatus.COMPLETED
        assert stored.result == result
        assert stored.error is None

    def test_passes_document_bytes_and_id(self) -> None:
        runner, processor, _store, document = _make_runner()
        processor.process.return_value = ResultSet()

        runner.run(document)

        args, kwargs = processor.process.call_args
        assert args == (b"%PDF-1.4",)
        assert kwargs["document_id"] == document.id

    def test_progress_notes_reach_the_store(self) -> None:
        runner, processor, store, document = _make_runner()
        seen: list[str | None] = []

        def process(
            raw_bytes: bytes, *, document_id: str, progress: Callable[[str], None]
        ) -> ResultSet:
            progress("Processing page 1/1...")
            seen.append(_status(store, document_id).processing_status)
            assert _status(store, document_id).status is DocumentStatus.PROCESSING
            return ResultSet()

        processor.process.side_effect = process

        runner.run(document)

        assert seen == ["Processing page 1/1..."]


class TestFailedRun:
    def test_split_error_marks_document_error(self) -> None:
        runner, processor, store, document = _make_runner()
        processor.process.side_effect = SplitError("Failed to split PDF pages: broken")

        runner.run(document)

        stored = _status(store, document.id)
        assert stored.status is DocumentStatus.ERROR
        assert stored.error == "Failed to split PDF pages: broken"
        assert stored.result is None

    def test_unexpected_error_marks_document_error(self) -> None:
        runner, processor, store, document = _make_runner()
        processor.process.side_effect = RuntimeError("boom")

        runner.run(document)

        stored = _status(store, document.id)
        assert stored.status is DocumentStatus.ERROR
        assert "boom" in (stored.error or "")


class TestTerminalStates:
    def test_completed_document_is_not_reprocessed(self) -> None:
        runner, processor, store, document = _make_runner()
        store.update_status(document.id, status=DocumentStatus.COMPLETED)

        runner.run(document)

        processor.process.assert_not_called()
        assert _status(store, document.id).status is DocumentStatus.COMPLETED

    def test_errored_document_is_not_reprocessed(self) -> None:
        runner, processor, store, document = _make_runner()
        store.update_status(document.id, status=DocumentStatus.ERROR, error="x")

        runner.run(document)

        processor.process.assert_not_called()
        assert _status(store, document.id).status is DocumentStatus.ERROR

    def test_removed_document_is_skipped(self) -> None:
        runner, processor, store, document = _make_runner()
        store.remove(document.id)

        runner.run(document)

        processor.process.assert_not_called()
