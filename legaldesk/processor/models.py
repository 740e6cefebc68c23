from dataclasses import dataclass

from legaldesk.analysis.models import ContractAnalysis
from legaldesk.database.models import DocumentRecord


@dataclass(frozen=True)
class SingleAnalysis:
    """Result of analyzing one file: the analysis and the document it was saved as."""

    analysis: ContractAnalysis
    document: DocumentRecord


@dataclass(frozen=True)
class BatchProgress:
    """Emitted after each file of a batch has been fully processed."""

    processed: int
    total: int
    current_file: str
