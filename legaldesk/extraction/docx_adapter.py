import io

from docx import Document

from legaldesk.extraction.exceptions import ExtractionFailedError


class DocxAdapter:
    """Extracts raw text from .docx files using python-docx; formatting is discarded."""

    def extract(self, docx_bytes: bytes) -> str:
        try:
            document = Document(io.BytesIO(docx_bytes))
            lines = [paragraph.text for paragraph in document.paragraphs]
            for table in document.tables:
                for row in table.rows:
                    cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                    if cells:
                        lines.append(" | ".join(cells))
            return "\n".join(lines).strip()
        except Exception as exc:
            raise ExtractionFailedError(f"docx extraction failed: {exc}") from exc
