from dataclasses import dataclass, field


@dataclass(frozen=True)
class Conflict:
    """A potential conflict of interest flagged for a prospective client or matter."""

    conflict_type: str
    parties_involved: tuple[str, ...]
    reason: str
    matched_name: str = ""
    conflicting_matter_id: str = ""
    conflicting_matter_name: str = ""


@dataclass(frozen=True)
class ArgumentStrength:
    assessment: str
    reasoning: str


@dataclass(frozen=True)
class Precedent:
    case_name: str
    citation: str
    reasoning: str


@dataclass(frozen=True)
class RelevantCase:
    case_name: str
    citation: str
    court: str
    decision_date: str
    url: str
    snippet: str
    ai_summary: str


@dataclass(frozen=True)
class LegalResearchResult:
    summary: str
    argument_strength: ArgumentStrength
    suggested_precedents: list[Precedent] = field(default_factory=list)
    relevant_cases: list[RelevantCase] = field(default_factory=list)


@dataclass(frozen=True)
class MotionPrediction:
    """Predicted outcome of a motion, with supporting precedents."""

    prediction: str
    confidence: float
    risk_level: str
    recommended_strategy: str
    supporting_cases: list[Precedent] = field(default_factory=list)
    raw_cases_fetched: int = 0


DEFAULT_OPTIONAL_CLAUSES = ("arbitration", "indemnification", "confidentiality")


@dataclass(frozen=True)
class DraftRequest:
    """Details of a legal document to draft for one US state."""

    document_type: str
    state: str
    effective_date: str
    party_a_name: str = ""
    party_a_address: str = ""
    party_b_name: str = ""
    party_b_address: str = ""
    optional_clauses: tuple[str, ...] = ()
    custom_details: str = ""

    @property
    def document_name(self) -> str:
        return (
            f"{self.party_a_name or 'Party A'} & {self.party_b_name or 'Party B'} "
            f"{self.document_type}"
        )

    def to_payload(self) -> dict[str, object]:
        """Return the camelCase ``formData`` object the drafting function expects."""
        clauses = {name: False for name in DEFAULT_OPTIONAL_CLAUSES}
        clauses.update({name: True for name in self.optional_clauses})
        return {
            "documentType": self.document_type,
            "state": self.state,
            "partyA_name": self.party_a_name,
            "partyA_address": self.party_a_address,
            "partyB_name": self.party_b_name,
            "partyB_address": self.party_b_address,
            "effectiveDate": self.effective_date,
            "optionalClauses": clauses,
            "customDetails": self.custom_details,
        }
