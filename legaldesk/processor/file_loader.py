import mimetypes
from pathlib import Path

from legaldesk.extraction.media import DOCX_MIME
from legaldesk.extraction.models import UploadedFile
from legaldesk.processor.exceptions import FileReadError

mimetypes.add_type(DOCX_MIME, ".docx")


class FileLoader:
    """Reads a local file into an UploadedFile, guessing its media type from the name."""

    def load(self, path: Path) -> UploadedFile:
        """Read *path* from disk.

        Raises:
            FileReadError: if the file does not exist or cannot be read.
        """
        if not path.is_file():
            raise FileReadError(f"File not found: {path}")
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Failed to read {path}: {exc}") from exc
        media_type, _ = mimetypes.guess_type(path.name)
        return UploadedFile(name=path.name, content=content, media_type=media_type or "")
