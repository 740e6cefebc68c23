from legaldesk.config.settings import Settings
from legaldesk.pdf.base import BasePdfExtractor
from legaldesk.pdf.pdfplumber_adapter import PdfPlumberAdapter
from legaldesk.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Maps settings.pdf_engine onto a text-layer reader."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        adapter.engine: adapter for adapter in (PdfPlumberAdapter, PyMuPdfAdapter)
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        if engine not in cls.ADAPTERS:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.ADAPTERS)}"
            )
        return cls.ADAPTERS[engine]()
