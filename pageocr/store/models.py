from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from pageocr.processor.models import ResultSet


class DocumentStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (DocumentStatus.COMPLETED, DocumentStatus.ERROR)


@dataclass(frozen=True)
class UploadedFile:
    """A file accepted at the ingestion boundary."""

    filename: str
    content: bytes
    content_type: str = "application/pdf"


@dataclass
class Document:
    """A queued document and its processing state."""

    id: str
    filename: str
    raw_bytes: bytes
    status: DocumentStatus = DocumentStatus.PENDING
    result: ResultSet | None = None
    error: str | None = None
    processing_status: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
