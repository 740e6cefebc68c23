class FormError(Exception):
    """Base exception for form filling errors."""


class ConfigurationMissingError(FormError):
    """Raised when a form has no template URL or field map configured."""


class FetchFailedError(FormError):
    """Raised when the PDF template cannot be downloaded."""


class FieldWriteError(FormError):
    """Raised when a single mapped field cannot be written."""
