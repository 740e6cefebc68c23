"""Offline analysis client adapter.

Returns a canned analysis without touching the network. Handy for local
runs of the CLI and as the template for a new provider adapter: implement
BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from legaldesk.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Adapter that returns a fixed, schema-valid analysis JSON."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "summary": "No analysis provider is configured; this is a placeholder review.",
        "risks": [],
        "missingClauses": [],
        "suggestedFixes": [],
        "keyDates": [],
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema
        return json.dumps(self.DEFAULT_RESPONSE)
