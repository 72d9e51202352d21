from dataclasses import dataclass


@dataclass(frozen=True)
class PageDocument:
    """A single-page PDF cut from a larger document."""

    index: int  # 0-based position in the source document
    pdf_bytes: bytes

    @property
    def page_number(self) -> int:
        return self.index + 1
