from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field

from pageocr.ocr.models import PageResult
from pageocr.pdf.models import PageDocument
from pageocr.processor.models import ResultSet

ProgressCallback = Callable[[str], None]


@dataclass(slots=True)
class PipelineContext:
    raw_bytes: bytes
    document_id: str | None = None
    progress: ProgressCallback | None = None
    pages: list[PageDocument] = field(default_factory=list)
    page_results: list[PageResult] = field(default_factory=list)
    failed_pages: list[int] = field(default_factory=list)
    result: ResultSet | None = None

    def report(self, message: str) -> None:
        if self.progress is not None:
            self.progress(message)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
