from abc import ABC, abstractmethod

from legaldesk.analysis.models import ContractAnalysis


class BaseAnalyzer(ABC):
    """Contract for all contract analysis adapters."""

    @abstractmethod
    def analyze(self, text: str, jurisdiction: str) -> ContractAnalysis:
        """Review contract text under the laws of a jurisdiction.

        Args:
            text: Raw contract text from the extraction step.
            jurisdiction: Free-text jurisdiction, e.g. "California".

        Returns:
            ContractAnalysis with summary, risks, missing clauses,
            suggested fixes and key dates.

        Raises:
            AnalysisError: on any failure.
        """
