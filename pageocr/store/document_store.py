import threading
import uuid
from collections.abc import Iterable
from dataclasses import replace

from pageocr.store.models import Document, DocumentStatus, UploadedFile

_UPDATABLE_FIELDS = frozenset({"status", "result", "error", "processing_status"})


class DocumentQueueStore:
    """In-memory registry of uploaded documents and the current selection.

    Nothing is persisted; a new store starts empty. Reads return copies so
    callers never mutate stored state outside `update_status`.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._documents: dict[str, Document] = {}
        self._selected_id: str | None = None
        self._issued_ids: set[str] = set()

    def enqueue(self, files: Iterable[UploadedFile]) -> list[Document]:
        """Register files as pending documents, in arrival order."""
        created: list[Document] = []
        with self._lock:
            for file in files:
                document_id = self._new_id()
                document = Document(
                    id=document_id,
                    filename=file.filename,
                    raw_bytes=file.content,
                )
                self._documents[document_id] = document
                created.append(replace(document))
        return created

    def update_status(self, document_id: str, **updates: object) -> None:
        """Merge fields into a document. No-op if the id is unknown.

        Raises:
            ValueError: if an update names a field that cannot be changed.
        """
        unknown = set(updates) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update document fields: {sorted(unknown)}")
        if "status" in updates:
            updates["status"] = DocumentStatus(updates["status"])
        with self._lock:
            document = self._documents.get(document_id)
            if document is None:
                return
            for name, value in updates.items():
                setattr(document, name, value)

    def claim_next_pending(self) -> Document | None:
        """Mark the oldest pending document as processing and return it."""
        with self._lock:
            for document in self._documents.values():
                if document.status is DocumentStatus.PENDING:
                    document.status = DocumentStatus.PROCESSING
                    return replace(document)
        return None

    def remove(self, document_id: str) -> None:
        with self._lock:
            self._documents.pop(document_id, None)
            if self._selected_id == document_id:
                self._selected_id = None

    def set_selected(self, document_id: str | None) -> None:
        with self._lock:
            self._selected_id = document_id

    @property
    def selected_id(self) -> str | None:
        with self._lock:
            return self._selected_id

    def get_by_id(self, document_id: str) -> Document | None:
        with self._lock:
            document = self._documents.get(document_id)
            return replace(document) if document is not None else None

    def list_all(self) -> list[Document]:
        with self._lock:
            return [replace(d) for d in self._documents.values()]

    def list_completed(self) -> list[Document]:
        with self._lock:
            return [
                replace(d)
                for d in self._documents.values()
                if d.status is DocumentStatus.COMPLETED
            ]

    def clear(self) -> None:
        with self._lock:
            self._documents.clear()
            self._selected_id = None

    def _new_id(self) -> str:
        document_id = uuid.uuid4().hex
        while document_id in self._issued_ids:
            document_id = uuid.uuid4().hex
        self._issued_ids.add(document_id)
        return document_id
