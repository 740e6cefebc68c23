"""AI-powered contract analyzer."""

import json
from pathlib import Path

from legaldesk.analysis.base import BaseAnalyzer
from legaldesk.analysis.client_base import BaseAnalysisClient
from legaldesk.analysis.exceptions import AnalysisError
from legaldesk.analysis.models import ContractAnalysis
from legaldesk.analysis.prompt_loader import load_json_schema, load_prompt_template
from legaldesk.analysis.validator import validate_and_build
from legaldesk.logging.logger import Log


class ContractAnalyzer(BaseAnalyzer):
    """Reviews contract text for risks, missing clauses and key dates using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._json_schema = json.loads(load_json_schema(json_schema_path))

    def analyze(self, text: str, jurisdiction: str) -> ContractAnalysis:
        prompt = self._prompt_template.format(
            jurisdiction=jurisdiction,
            contract_text=text,
        )
        Log.debug(f"Analysis prompt:\n{prompt}")

        raw_response = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        result = validate_and_build(self._parse_json(raw_response))
        Log.info(
            f"Analysis complete: {len(result.risks)} risks, "
            f"{len(result.missing_clauses)} missing clauses, {len(result.key_dates)} key dates"
        )
        return result

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise AnalysisError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise AnalysisError("JSON response must be an object")
        return parsed
