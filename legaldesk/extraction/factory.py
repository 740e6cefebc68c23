from legaldesk.config.settings import Settings
from legaldesk.extraction.docx_adapter import DocxAdapter
from legaldesk.extraction.extractor import TextExtractor
from legaldesk.extraction.ocr_adapter import TesseractOcrAdapter
from legaldesk.pdf.factory import PdfExtractorFactory


class TextExtractorFactory:
    """Creates a TextExtractor wired with the configured engines."""

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        return TextExtractor(
            pdf_extractor=PdfExtractorFactory.create(settings),
            ocr_adapter=TesseractOcrAdapter(language=settings.ocr_language),
            docx_adapter=DocxAdapter(),
        )
