import pytest

from legaldesk.config.settings import Settings
from legaldesk.pdf.factory import PdfExtractorFactory
from legaldesk.pdf.pdfplumber_adapter import PdfPlumberAdapter
from legaldesk.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPdfExtractorFactory:
    @pytest.mark.parametrize(
        ("engine", "expected"),
        [
            ("pdfplumber", PdfPlumberAdapter),
            ("pymupdf", PyMuPdfAdapter),
            (" PyMuPDF ", PyMuPdfAdapter),
        ],
    )
    def test_creates_configured_engine(self, engine: str, expected: type) -> None:
        assert isinstance(PdfExtractorFactory.create(Settings(pdf_engine=engine)), expected)

    def test_registry_is_keyed_by_engine_name(self) -> None:
        assert set(PdfExtractorFactory.ADAPTERS) == {"pdfplumber", "pymupdf"}

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine 'pdfjs'"):
            PdfExtractorFactory.create(Settings(pdf_engine="pdfjs"))
