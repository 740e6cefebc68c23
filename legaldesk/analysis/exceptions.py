from legaldesk.errors import RemoteServiceError


class AnalysisError(RemoteServiceError):
    """Raised when contract analysis fails."""


class AnalysisValidationError(AnalysisError):
    """Raised when the analysis result does not match the expected shape."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
