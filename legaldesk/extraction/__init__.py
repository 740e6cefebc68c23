from legaldesk.extraction.models import MediaKind, OcrProgress, UploadedFile

__all__ = ["MediaKind", "OcrProgress", "UploadedFile"]
