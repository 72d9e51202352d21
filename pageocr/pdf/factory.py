from pageocr.config.settings import Settings
from pageocr.pdf.base import BasePdfSplitter
from pageocr.pdf.pymupdf_adapter import PyMuPdfSplitter
from pageocr.pdf.pypdf_adapter import PyPdfSplitter


class PdfSplitterFactory:
    """Creates the PDF splitter named by settings."""

    ADAPTERS: dict[str, type[BasePdfSplitter]] = {
        "pymupdf": PyMuPdfSplitter,
        "pypdf": PyPdfSplitter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfSplitter:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
