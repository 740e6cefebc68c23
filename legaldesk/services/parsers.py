"""Builders for remote function payloads.

Every builder raises RemoteServiceError when the payload does not have the
shape the caller renders, so a malformed response never reaches a view.
"""

from typing import Any

from legaldesk.errors import RemoteServiceError
from legaldesk.services.models import (
    ArgumentStrength,
    Conflict,
    LegalResearchResult,
    MotionPrediction,
    Precedent,
    RelevantCase,
)


def build_conflicts(payload: Any) -> list[Conflict]:
    if not isinstance(payload, dict):
        raise RemoteServiceError("Conflict check returned an unexpected response")
    raw = payload.get("conflicts")
    if not isinstance(raw, list):
        raise RemoteServiceError("Conflict check response has no 'conflicts' list")
    return [_build_conflict(item, i) for i, item in enumerate(raw)]


def _build_conflict(raw: Any, index: int) -> Conflict:
    if not isinstance(raw, dict):
        raise RemoteServiceError(f"Conflict at index {index} must be an object")
    matched_name = _str(raw.get("matchedName"))
    parties = raw.get("partiesInvolved")
    if isinstance(parties, str):
        parties_involved: tuple[str, ...] = (parties,)
    elif isinstance(parties, list):
        parties_involved = tuple(str(p) for p in parties)
    elif parties is None:
        parties_involved = (matched_name,) if matched_name else ()
    else:
        raise RemoteServiceError(
            f"Conflict at index {index}: 'partiesInvolved' must be a string or a list"
        )
    return Conflict(
        conflict_type=_str(raw.get("conflictType")),
        parties_involved=parties_involved,
        reason=_str(raw.get("reason")),
        matched_name=matched_name,
        conflicting_matter_id=_str(raw.get("conflictingMatterId")),
        conflicting_matter_name=_str(raw.get("conflictingMatterName")),
    )


def build_legal_research(payload: Any) -> LegalResearchResult:
    if not isinstance(payload, dict) or not isinstance(payload.get("summary"), str):
        raise RemoteServiceError("Legal research returned an unexpected response")
    strength = payload.get("argumentStrength") or {}
    if not isinstance(strength, dict):
        raise RemoteServiceError("'argumentStrength' must be an object")
    return LegalResearchResult(
        summary=payload["summary"],
        argument_strength=ArgumentStrength(
            assessment=_str(strength.get("assessment")) or "Uncertain",
            reasoning=_str(strength.get("reasoning")),
        ),
        suggested_precedents=_build_precedents(payload.get("suggestedPrecedents")),
        relevant_cases=[
            RelevantCase(
                case_name=_str(item.get("caseName")),
                citation=_str(item.get("citation")),
                court=_str(item.get("court")),
                decision_date=_str(item.get("decisionDate")),
                url=_str(item.get("url")),
                snippet=_str(item.get("snippet")),
                ai_summary=_str(item.get("aiSummary")),
            )
            for item in _objects(payload.get("relevantCases"), "relevantCases")
        ],
    )


def build_motion_prediction(payload: Any) -> MotionPrediction:
    if not isinstance(payload, dict) or "prediction" not in payload:
        raise RemoteServiceError("Motion prediction returned an unexpected response")
    confidence = payload.get("confidence", 0)
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
        raise RemoteServiceError("'confidence' must be a number")
    return MotionPrediction(
        prediction=_str(payload.get("prediction")),
        confidence=float(confidence),
        risk_level=_str(payload.get("riskLevel")),
        recommended_strategy=_str(payload.get("recommendedStrategy")),
        supporting_cases=_build_precedents(payload.get("supportingCases")),
        raw_cases_fetched=int(payload.get("rawCasesFetched") or 0),
    )


def _build_precedents(raw: Any) -> list[Precedent]:
    return [
        Precedent(
            case_name=_str(item.get("caseName")),
            citation=_str(item.get("citation")),
            reasoning=_str(item.get("reasoning")),
        )
        for item in _objects(raw, "precedents")
    ]


def _objects(raw: Any, key: str) -> list[dict[str, Any]]:
    if raw is None:
        return []
    if not isinstance(raw, list) or not all(isinstance(item, dict) for item in raw):
        raise RemoteServiceError(f"'{key}' must be a list of objects")
    return raw


def _str(value: Any) -> str:
    return "" if value is None else str(value)
