import io
from collections.abc import Iterator

import pdfplumber

from legaldesk.pdf.base import BasePdfExtractor


class PdfPlumberAdapter(BasePdfExtractor):
    """Text-layer reader backed by pdfplumber (pdfminer.six)."""

    engine = "pdfplumber"

    def iter_page_words(self, pdf_bytes: bytes) -> Iterator[list[str]]:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            for page in pdf.pages:
                yield [word["text"] for word in page.extract_words()]
