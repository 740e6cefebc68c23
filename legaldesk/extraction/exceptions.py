class ExtractionError(Exception):
    """Base exception for all text-extraction errors."""


class UnsupportedFormatError(ExtractionError):
    """Raised when an uploaded file's declared type has no extraction handler."""


class LibraryUnavailableError(ExtractionError):
    """Raised when a required third-party extraction engine is not installed."""


class ExtractionFailedError(ExtractionError):
    """Raised when an extraction engine fails on a supported file."""
