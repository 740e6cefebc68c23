from legaldesk.extraction.exceptions import ExtractionFailedError


class PdfExtractionError(ExtractionFailedError):
    """Raised when a PDF text layer cannot be read."""
