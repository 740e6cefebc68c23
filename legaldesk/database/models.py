from dataclasses import dataclass
from datetime import datetime

from legaldesk.analysis.models import ContractAnalysis
from legaldesk.analysis.serialization import parse_analysis_content

CONTRACT_ANALYSIS_TYPE = "Contract Analysis"


@dataclass(frozen=True)
class NewDocument:
    """Values for a documents row that has not been inserted yet."""

    user_id: str
    name: str
    type: str
    state: str | None = None
    status: str = "draft"
    source: str = "uploaded"
    content: str | None = None


@dataclass
class DocumentRecord:
    """Represents a row from the documents table."""

    id: str
    user_id: str
    name: str | None
    type: str | None
    state: str | None = None
    status: str | None = None
    source: str | None = None
    content: str | None = None
    feedback_is_useful: bool | None = None
    feedback_comment: str | None = None
    created_at: datetime | None = None

    def contract_analysis(self) -> ContractAnalysis | None:
        """Return the stored analysis, or None when the content is not one."""
        if self.type != CONTRACT_ANALYSIS_TYPE:
            return None
        return parse_analysis_content(self.content)


@dataclass
class SavedQueryRecord:
    """Represents a row from the saved_queries table."""

    id: str
    user_id: str
    name: str
    query: str
    jurisdiction: str
    created_at: datetime | None = None
