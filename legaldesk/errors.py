class ValidationError(Exception):
    """Raised when a required input is missing or malformed before any remote call."""


class RemoteServiceError(Exception):
    """Raised when a remote AI backend returns a non-2xx status or a malformed body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
