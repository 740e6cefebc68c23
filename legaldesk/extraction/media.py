"""Resolves an uploaded file's declared media type to a MediaKind."""

from pathlib import PurePath

from legaldesk.extraction.exceptions import UnsupportedFormatError
from legaldesk.extraction.models import MediaKind, UploadedFile

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

_MIME_KINDS: dict[str, MediaKind] = {
    "application/pdf": MediaKind.PDF,
    DOCX_MIME: MediaKind.DOCX,
    "text/plain": MediaKind.TEXT,
}

_EXTENSION_KINDS: dict[str, MediaKind] = {
    ".png": MediaKind.IMAGE,
    ".jpg": MediaKind.IMAGE,
    ".jpeg": MediaKind.IMAGE,
    ".tif": MediaKind.IMAGE,
    ".tiff": MediaKind.IMAGE,
    ".bmp": MediaKind.IMAGE,
    ".gif": MediaKind.IMAGE,
    ".webp": MediaKind.IMAGE,
    ".pdf": MediaKind.PDF,
    ".docx": MediaKind.DOCX,
    ".txt": MediaKind.TEXT,
}

# Browsers and some uploaders send these when they cannot tell the type.
_UNDECLARED = frozenset({"", "application/octet-stream"})


def resolve_media_kind(file: UploadedFile) -> MediaKind:
    """Map the file's declared MIME type (or, when undeclared, its extension).

    Raises:
        UnsupportedFormatError: for any type outside image/pdf/docx/text.
    """
    media_type = file.media_type.split(";", 1)[0].strip().lower()

    if media_type in _UNDECLARED:
        suffix = PurePath(file.name).suffix.lower()
        kind = _EXTENSION_KINDS.get(suffix)
        if kind is None:
            raise UnsupportedFormatError(
                f"Unsupported file type '{suffix or media_type or 'unknown'}' "
                f"for {file.name}. Upload an image, .pdf, .docx or .txt file."
            )
        return kind

    if media_type.startswith("image/"):
        return MediaKind.IMAGE
    kind = _MIME_KINDS.get(media_type)
    if kind is None:
        raise UnsupportedFormatError(
            f"Unsupported file type '{media_type}' for {file.name}. "
            "Upload an image, .pdf, .docx or .txt file."
        )
    return kind
