import json

from legaldesk.analysis.exceptions import AnalysisValidationError
from legaldesk.analysis.models import ContractAnalysis
from legaldesk.analysis.validator import validate_and_build


def analysis_to_dict(analysis: ContractAnalysis) -> dict[str, object]:
    return {
        "summary": analysis.summary,
        "risks": [
            {"severity": r.severity, "description": r.description, "snippet": r.snippet}
            for r in analysis.risks
        ],
        "missingClauses": list(analysis.missing_clauses),
        "suggestedFixes": list(analysis.suggested_fixes),
        "keyDates": [{"date": d.date, "obligation": d.obligation} for d in analysis.key_dates],
    }


def serialize_analysis(analysis: ContractAnalysis) -> str:
    """Serialize an analysis into the JSON stored as document content."""
    return json.dumps(analysis_to_dict(analysis), ensure_ascii=False)


def parse_analysis_content(content: str | None) -> ContractAnalysis | None:
    """Parse stored document content back into a ContractAnalysis.

    Returns None when the content is empty, not JSON, or not an analysis.
    """
    if not content:
        return None
    try:
        raw = json.loads(content)
    except (json.JSONDecodeError, TypeError):
        return None
    if not isinstance(raw, dict):
        return None
    try:
        return validate_and_build(raw)
    except AnalysisValidationError:
        return None
