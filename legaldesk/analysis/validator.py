"""Domain validation for raw contract analysis JSON."""

from typing import Any

from legaldesk.analysis.exceptions import AnalysisValidationError
from legaldesk.analysis.models import SEVERITIES, ContractAnalysis, KeyDate, Risk

_REQUIRED_KEYS = ("summary", "risks", "missingClauses", "suggestedFixes", "keyDates")


def validate_and_build(raw: dict[str, Any]) -> ContractAnalysis:
    """Validate a parsed analysis object and build a ContractAnalysis.

    Keys are the camelCase names used by the provider and by stored
    document content.

    Raises:
        AnalysisValidationError: when a key is missing or has the wrong shape.
    """
    missing = [key for key in _REQUIRED_KEYS if key not in raw]
    if missing:
        raise AnalysisValidationError(f"Missing required keys: {missing}")

    summary = raw["summary"]
    if not isinstance(summary, str):
        raise AnalysisValidationError("'summary' must be a string")

    return ContractAnalysis(
        summary=summary,
        risks=_build_risks(raw["risks"]),
        missing_clauses=_build_strings(raw["missingClauses"], "missingClauses"),
        suggested_fixes=_build_strings(raw["suggestedFixes"], "suggestedFixes"),
        key_dates=_build_key_dates(raw["keyDates"]),
    )


def _build_risks(raw: Any) -> list[Risk]:
    if not isinstance(raw, list):
        raise AnalysisValidationError("'risks' must be a list")
    return [_build_risk(item, i) for i, item in enumerate(raw)]


def _build_risk(raw: Any, index: int) -> Risk:
    if not isinstance(raw, dict):
        raise AnalysisValidationError(f"Risk at index {index} must be an object")
    severity = raw.get("severity")
    if severity not in SEVERITIES:
        raise AnalysisValidationError(
            f"Risk at index {index}: 'severity' must be one of {list(SEVERITIES)}, "
            f"got {severity!r}"
        )
    description = raw.get("description")
    if not isinstance(description, str):
        raise AnalysisValidationError(
            f"Risk at index {index}: 'description' must be a string"
        )
    snippet = raw.get("snippet")
    if not isinstance(snippet, str):
        raise AnalysisValidationError(f"Risk at index {index}: 'snippet' must be a string")
    return Risk(severity=severity, description=description, snippet=snippet)


def _build_strings(raw: Any, key: str) -> list[str]:
    if not isinstance(raw, list):
        raise AnalysisValidationError(f"'{key}' must be a list")
    for i, item in enumerate(raw):
        if not isinstance(item, str):
            raise AnalysisValidationError(f"'{key}' item at index {i} must be a string")
    return list(raw)


def _build_key_dates(raw: Any) -> list[KeyDate]:
    if not isinstance(raw, list):
        raise AnalysisValidationError("'keyDates' must be a list")
    key_dates: list[KeyDate] = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise AnalysisValidationError(f"Key date at index {i} must be an object")
        date = item.get("date")
        obligation = item.get("obligation")
        if not isinstance(date, str) or not isinstance(obligation, str):
            raise AnalysisValidationError(
                f"Key date at index {i}: 'date' and 'obligation' must be strings"
            )
        key_dates.append(KeyDate(date=date, obligation=obligation))
    return key_dates
