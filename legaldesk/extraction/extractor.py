from collections.abc import Callable

from legaldesk.extraction.docx_adapter import DocxAdapter
from legaldesk.extraction.media import resolve_media_kind
from legaldesk.extraction.models import MediaKind, ProgressCallback, UploadedFile
from legaldesk.extraction.ocr_adapter import TesseractOcrAdapter
from legaldesk.logging.logger import Log
from legaldesk.pdf.base import BasePdfExtractor

_Handler = Callable[[bytes, ProgressCallback | None], str]


class TextExtractor:
    """Turns an uploaded image, PDF, DOCX or plain-text file into raw text.

    Exactly one handler exists per MediaKind; anything else is rejected by
    resolve_media_kind before a handler runs. Failures are not retried.
    """

    def __init__(
        self,
        pdf_extractor: BasePdfExtractor,
        ocr_adapter: TesseractOcrAdapter,
        docx_adapter: DocxAdapter,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._ocr_adapter = ocr_adapter
        self._docx_adapter = docx_adapter
        self._handlers: dict[MediaKind, _Handler] = {
            MediaKind.IMAGE: self._extract_image,
            MediaKind.PDF: self._extract_pdf,
            MediaKind.DOCX: self._extract_docx,
            MediaKind.TEXT: self._extract_text,
        }

    def extract(
        self,
        file: UploadedFile,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        """Extract text from *file*.

        Args:
            file: The uploaded file and its declared media type.
            on_progress: Receives OCR progress events (image files only).

        Raises:
            UnsupportedFormatError: the declared type is not image/pdf/docx/text.
            LibraryUnavailableError: the OCR engine is not installed.
            ExtractionFailedError: the engine failed on the file.
        """
        kind = resolve_media_kind(file)
        Log.info(f"Extracting text from {file.name} ({kind.value}, {file.size_bytes} bytes)")
        text = self._handlers[kind](file.content, on_progress)
        Log.info(f"Extracted {len(text)} chars from {file.name}")
        return text

    def _extract_image(self, content: bytes, on_progress: ProgressCallback | None) -> str:
        return self._ocr_adapter.extract(content, on_progress=on_progress)

    def _extract_pdf(self, content: bytes, _on_progress: ProgressCallback | None) -> str:
        return self._pdf_extractor.extract(content)

    def _extract_docx(self, content: bytes, _on_progress: ProgressCallback | None) -> str:
        return self._docx_adapter.extract(content)

    @staticmethod
    def _extract_text(content: bytes, _on_progress: ProgressCallback | None) -> str:
        return content.decode("utf-8-sig", errors="replace")
