class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class DocumentNotFoundError(ProcessorError):
    """Raised when a document cannot be found in the database."""


class SavedQueryNotFoundError(ProcessorError):
    """Raised when a saved query does not exist or belongs to another user."""


class FileReadError(ProcessorError):
    """Raised when an input file cannot be read from disk."""
