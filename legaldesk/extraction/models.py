from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class MediaKind(Enum):
    """Closed set of file kinds the extractor can handle."""

    IMAGE = "image"
    PDF = "pdf"
    DOCX = "docx"
    TEXT = "text"


@dataclass(frozen=True)
class UploadedFile:
    """An uploaded file held in memory for the duration of one analysis."""

    name: str
    content: bytes
    media_type: str = ""

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class OcrProgress:
    """One OCR progress report: a status label and a fraction in [0, 1]."""

    status: str
    progress: float


ProgressCallback = Callable[[OcrProgress], None]
