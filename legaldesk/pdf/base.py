from abc import ABC, abstractmethod
from collections.abc import Iterator

from legaldesk.pdf.exceptions import PdfExtractionError


class BasePdfExtractor(ABC):
    """Reads the text layer of a PDF.

    Engines only yield the words of each page; the joining is shared so that
    every engine produces the same shape: words separated by one space,
    pages separated by a newline, in ascending page order. No column or
    layout reconstruction is attempted.
    """

    engine: str = ""

    def extract(self, pdf_bytes: bytes) -> str:
        """Return the text layer of *pdf_bytes*, stripped of outer whitespace.

        Raises:
            PdfExtractionError: the document is unreadable or password-protected.
        """
        try:
            pages = [" ".join(words) for words in self.iter_page_words(pdf_bytes)]
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"{self.engine} extraction failed: {exc}") from exc
        return "\n".join(pages).strip()

    @abstractmethod
    def iter_page_words(self, pdf_bytes: bytes) -> Iterator[list[str]]:
        """Yield the words of each page in page order."""
