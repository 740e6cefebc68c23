from abc import ABC, abstractmethod


class BaseAnalysisClient(ABC):
    """Provider seam for contract analysis.

    An implementation sends one chat request constrained to *json_schema* and
    returns the model's text unparsed; ContractAnalyzer owns parsing and
    validation. Provider failures are raised as AnalysisError subclasses.
    """

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        """Return the raw response text for one request."""
