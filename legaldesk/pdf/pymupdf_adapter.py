from collections.abc import Iterator

import pymupdf

from legaldesk.pdf.base import BasePdfExtractor
from legaldesk.pdf.exceptions import PdfExtractionError

# Index of the word string in the tuples returned by page.get_text("words").
_WORD_TEXT = 4


class PyMuPdfAdapter(BasePdfExtractor):
    """Text-layer reader backed by PyMuPDF."""

    engine = "pymupdf"

    def iter_page_words(self, pdf_bytes: bytes) -> Iterator[list[str]]:
        with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            if doc.needs_pass:
                raise PdfExtractionError("PDF is password-protected")
            for page in doc:
                yield [word[_WORD_TEXT] for word in page.get_text("words")]
