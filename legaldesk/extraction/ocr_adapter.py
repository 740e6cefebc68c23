"""Image-to-text extraction through a scoped Tesseract OCR engine.

Each call acquires its own engine, reports progress while recognition runs
and tears the engine down on every exit path.
"""

import io
from abc import ABC, abstractmethod
from collections.abc import Callable

import pytesseract
from PIL import Image

from legaldesk.extraction.exceptions import (
    ExtractionError,
    ExtractionFailedError,
    LibraryUnavailableError,
)
from legaldesk.extraction.models import OcrProgress, ProgressCallback
from legaldesk.logging.logger import Log


class ProgressReporter:
    """Forwards (status, progress) pairs, never letting progress go backwards."""

    def __init__(self, callback: ProgressCallback | None = None) -> None:
        self._callback = callback
        self._last = 0.0

    def __call__(self, status: str, progress: float) -> None:
        value = max(self._last, min(1.0, max(0.0, progress)))
        self._last = value
        if self._callback is not None:
            self._callback(OcrProgress(status=status, progress=value))


class OcrEngine(ABC):
    """Contract for a scoped OCR engine instance."""

    @abstractmethod
    def recognize(self, image_bytes: bytes, report: ProgressReporter) -> str:
        """Return the text recognized in *image_bytes*."""

    @abstractmethod
    def terminate(self) -> None:
        """Release everything the engine holds."""


class TesseractEngine(OcrEngine):
    """OCR engine backed by the Tesseract binary through pytesseract."""

    def __init__(self, language: str = "eng") -> None:
        try:
            version = pytesseract.get_tesseract_version()
        except pytesseract.TesseractNotFoundError as exc:
            raise LibraryUnavailableError(
                "OCR engine is not available: the tesseract binary was not found"
            ) from exc
        Log.debug(f"Tesseract {version} engine started (lang={language})")
        self._language = language
        self._image: Image.Image | None = None

    def recognize(self, image_bytes: bytes, report: ProgressReporter) -> str:
        report("loading image", 0.1)
        self._image = Image.open(io.BytesIO(image_bytes))
        self._image.load()
        report("recognizing text", 0.3)
        text: str = pytesseract.image_to_string(self._image, lang=self._language)
        report("recognizing text", 0.9)
        return text

    def terminate(self) -> None:
        if self._image is not None:
            self._image.close()
            self._image = None
        Log.debug("Tesseract engine terminated")


class TesseractOcrAdapter:
    """Extracts text from images, reporting OCR progress as it goes."""

    def __init__(
        self,
        language: str = "eng",
        engine_factory: Callable[[], OcrEngine] | None = None,
    ) -> None:
        self._engine_factory = engine_factory or (lambda: TesseractEngine(language))

    def extract(
        self,
        image_bytes: bytes,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        report = ProgressReporter(on_progress)
        report("initializing engine", 0.0)
        engine = self._engine_factory()
        try:
            text = engine.recognize(image_bytes, report)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionFailedError(f"OCR extraction failed: {exc}") from exc
        finally:
            engine.terminate()
        report("done", 1.0)
        return text.strip()
