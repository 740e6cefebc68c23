"""Client for the hosted AI functions (research, conflicts, reviews, drafting, predictions)."""

import json
from collections.abc import Callable, Mapping
from typing import Any

import httpx

from legaldesk.config.settings import Settings
from legaldesk.errors import RemoteServiceError, ValidationError
from legaldesk.logging.logger import Log
from legaldesk.services.models import Conflict, DraftRequest, LegalResearchResult, MotionPrediction
from legaldesk.services.parsers import (
    build_conflicts,
    build_legal_research,
    build_motion_prediction,
)

_MIN_MATTER_SUMMARY_LENGTH = 5


class FunctionsClient:
    """POSTs JSON to ``<base_url>/functions/v1/<name>`` and returns the decoded body.

    Required inputs are validated before any request is made. Calls are never
    retried.
    """

    def __init__(
        self,
        base_url: str,
        *,
        api_key: str = "",
        access_token: str = "",
        timeout_seconds: int = 60,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not base_url.strip():
            raise ValueError("functions_base_url is required to call remote functions")
        self._base_url = base_url.rstrip("/")
        self._headers = {"Content-Type": "application/json"}
        if api_key:
            self._headers["apikey"] = api_key
        token = access_token or api_key
        if token:
            self._headers["Authorization"] = f"Bearer {token}"
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "FunctionsClient":
        return cls(
            settings.functions_base_url,
            api_key=settings.functions_api_key,
            access_token=settings.functions_access_token,
            timeout_seconds=settings.functions_timeout_seconds,
        )

    def review_document(self, contract_text: str, state: str) -> str:
        """Return a state-focused review of a contract as markdown text."""
        _require(contract_text, "Please paste the contract text to review.")
        _require(state, "Please select a state.")
        payload = self._invoke("review-document", {"contractText": contract_text, "state": state})
        return _text_field(payload, "review-document")

    def legal_research(self, query: str, jurisdiction: str) -> LegalResearchResult:
        _require(query, "Please enter a research question.")
        _require(jurisdiction, "Please select a jurisdiction.")
        payload = self._invoke("legal-research", {"query": query, "jurisdiction": jurisdiction})
        return build_legal_research(payload)

    def analyze_case_law(self, opinion_id: str) -> dict[str, Any]:
        _require(opinion_id, "An opinion ID is required.")
        return _summary_payload(
            self._invoke("case-law-analysis", {"opinion_id": opinion_id}), "case-law-analysis"
        )

    def person_profile(self, person_id: str) -> dict[str, Any]:
        _require(person_id, "A person ID is required.")
        return _summary_payload(
            self._invoke("person-profile", {"person_id": person_id}), "person-profile"
        )

    def summarize_docket(self, docket_id: str) -> dict[str, Any]:
        _require(docket_id, "A docket ID is required.")
        return _summary_payload(
            self._invoke("docket-summary", {"docket_id": docket_id}), "docket-summary"
        )

    def predict_motion_outcome(
        self,
        motion_type: str,
        jurisdiction: str,
        my_argument: str,
        opposing_argument: str,
    ) -> MotionPrediction:
        _require(motion_type, "Please select a motion type.")
        _require(jurisdiction, "Please select a jurisdiction.")
        _require(my_argument, "Please describe your argument.")
        _require(opposing_argument, "Please describe the opposing argument.")
        payload = self._invoke(
            "predict-motion-outcome",
            {
                "motion_type": motion_type,
                "jurisdiction": jurisdiction,
                "my_argument": my_argument,
                "opposing_argument": opposing_argument,
            },
        )
        return build_motion_prediction(payload)

    def generate_client_update(self, case_data: Mapping[str, Any]) -> str:
        """Draft a plain-language status update for a client from case data."""
        if not case_data:
            raise ValidationError("Case data is required to draft a client update.")
        payload = self._invoke("generate-client-update", dict(case_data))
        return _text_field(payload, "generate-client-update")

    def generate_document(
        self,
        request: DraftRequest,
        on_chunk: Callable[[str], None] | None = None,
    ) -> str:
        """Draft a state-specific legal document and return its markdown text.

        The function answers with server-sent ``data:`` lines, each carrying a
        model chunk at ``candidates[0].content.parts[0].text``; ``[DONE]`` and
        lines that are not JSON are skipped. A plain ``{"text": ...}`` body is
        accepted as a single chunk. *on_chunk* receives every chunk in order.

        Raises:
            ValidationError: no document type or state was given.
            RemoteServiceError: the call failed or produced no text.
        """
        _require(request.document_type, "Please select a document type.")
        _require(request.state, "Please select a state.")
        name = "generate-document"
        emit = on_chunk or (lambda _chunk: None)
        chunks: list[str] = []
        other_lines: list[str] = []
        try:
            with httpx.Client(timeout=self._timeout_seconds, transport=self._transport) as client:
                with client.stream(
                    "POST",
                    self._url(name),
                    json={"formData": request.to_payload()},
                    headers=self._headers,
                ) as response:
                    if not response.is_success:
                        response.read()
                        raise _failure(response, name, _json_or_none(response))
                    for line in response.iter_lines():
                        if not line.startswith("data: "):
                            other_lines.append(line)
                            continue
                        chunk = _stream_chunk(line[len("data: "):])
                        if chunk:
                            emit(chunk)
                            chunks.append(chunk)
        except httpx.HTTPError as exc:
            raise RemoteServiceError(f"Request to {name} failed: {exc}") from exc

        if not chunks:
            chunks.append(_plain_text_body("\n".join(other_lines), name))
            emit(chunks[0])
        text = "".join(chunks)
        Log.info(f"Drafted {request.document_type} for {request.state}: {len(text)} chars")
        return text

    def smart_conflict_check(
        self,
        client_name: str,
        opposing_parties: str,
        matter_summary: str,
    ) -> list[Conflict]:
        """Check a prospective client and matter for conflicts of interest.

        Raises:
            ValidationError: blank client name, or a matter summary shorter than
                five characters.
            RemoteServiceError: the call failed or 'conflicts' is not a list.
        """
        _require(client_name, "Client name is required.")
        if len(matter_summary.strip()) < _MIN_MATTER_SUMMARY_LENGTH:
            raise ValidationError(
                f"Matter summary must be at least {_MIN_MATTER_SUMMARY_LENGTH} characters."
            )
        payload = self._invoke(
            "smart-conflict-check",
            {
                "client_name": client_name,
                "opposing_parties": opposing_parties,
                "matter_summary": matter_summary,
            },
        )
        conflicts = build_conflicts(payload)
        Log.info(f"Conflict check for {client_name}: {len(conflicts)} potential conflicts")
        return conflicts

    def _url(self, name: str) -> str:
        return f"{self._base_url}/functions/v1/{name}"

    def _invoke(self, name: str, body: dict[str, Any]) -> Any:
        Log.debug(f"Invoking remote function {name}")
        try:
            with httpx.Client(timeout=self._timeout_seconds, transport=self._transport) as client:
                response = client.post(self._url(name), json=body, headers=self._headers)
        except httpx.HTTPError as exc:
            raise RemoteServiceError(f"Request to {name} failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            if not response.is_success:
                raise _failure(response, name, None) from exc
            raise RemoteServiceError(f"{name} returned a malformed response") from exc

        if not response.is_success:
            raise _failure(response, name, payload)
        if isinstance(payload, dict) and payload.get("error"):
            raise RemoteServiceError(str(payload["error"]), status_code=response.status_code)
        return payload


def _require(value: str, message: str) -> None:
    if not value or not value.strip():
        raise ValidationError(message)


def _text_field(payload: Any, name: str) -> str:
    if not isinstance(payload, dict) or not isinstance(payload.get("text"), str):
        raise RemoteServiceError(f"{name} returned a malformed response")
    return payload["text"]


def _summary_payload(payload: Any, name: str) -> dict[str, Any]:
    if not isinstance(payload, dict) or "aiSummary" not in payload:
        raise RemoteServiceError(f"{name} returned a malformed response")
    return payload


def _failure(response: httpx.Response, name: str, payload: Any) -> RemoteServiceError:
    message = payload.get("error") if isinstance(payload, dict) else None
    return RemoteServiceError(
        str(message) if message else response.reason_phrase or f"{name} returned HTTP {response.status_code}",
        status_code=response.status_code,
    )


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _stream_chunk(data: str) -> str:
    if data.strip() == "[DONE]":
        return ""
    try:
        parsed = json.loads(data)
        text = parsed["candidates"][0]["content"]["parts"][0]["text"]
    except (ValueError, LookupError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


def _plain_text_body(body: str, name: str) -> str:
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise RemoteServiceError(f"{name} returned no document text") from exc
    if isinstance(payload, dict) and payload.get("error"):
        raise RemoteServiceError(str(payload["error"]))
    text = payload.get("text") if isinstance(payload, dict) else None
    if not isinstance(text, str) or not text:
        raise RemoteServiceError(f"{name} returned no document text")
    return text
