from pathlib import Path

import pytest

from legaldesk.extraction.media import DOCX_MIME
from legaldesk.processor.exceptions import FileReadError
from legaldesk.processor.file_loader import FileLoader


class TestFileLoader:
    def test_loads_bytes_and_guesses_pdf(self, tmp_path: Path, sample_pdf_bytes: bytes) -> None:
        path = tmp_path / "lease.pdf"
        path.write_bytes(sample_pdf_bytes)

        file = FileLoader().load(path)

        assert file.name == "lease.pdf"
        assert file.content == sample_pdf_bytes
        assert file.media_type == "application/pdf"

    def test_guesses_docx(self, tmp_path: Path, docx_bytes: bytes) -> None:
        path = tmp_path / "nda.docx"
        path.write_bytes(docx_bytes)
        assert FileLoader().load(path).media_type == DOCX_MIME

    def test_unknown_extension_leaves_type_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "contract.unknownext"
        path.write_bytes(b"data")
        assert FileLoader().load(path).media_type == ""

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileReadError, match="File not found"):
            FileLoader().load(tmp_path / "nope.pdf")
