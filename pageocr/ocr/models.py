from dataclasses import dataclass


@dataclass(frozen=True)
class PageResult:
    """Text extracted from one page. `page` is 1-based."""

    page: int
    natural_text: str


@dataclass(frozen=True)
class AttemptSucceeded:
    """The endpoint answered and the envelope yielded non-blank text."""

    text: str


@dataclass(frozen=True)
class ExtractionFailed:
    """The endpoint answered but the envelope held no usable text."""

    reason: str

    def describe(self) -> str:
        return self.reason


@dataclass(frozen=True)
class TransportFailed:
    """The request did not complete with a 2xx response."""

    message: str
    status_code: int | None = None

    def describe(self) -> str:
        if self.status_code is None:
            return self.message
        return f"HTTP {self.status_code}: {self.message}"


OcrAttemptOutcome = AttemptSucceeded | ExtractionFailed | TransportFailed
