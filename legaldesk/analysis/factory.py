from typing import ClassVar

from legaldesk.analysis.analyzer import ContractAnalyzer
from legaldesk.analysis.base import BaseAnalyzer
from legaldesk.analysis.example_client_adapter import ExampleClientAdapter
from legaldesk.analysis.openai_client_adapter import OpenAIClientAdapter
from legaldesk.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured contract analyzer."""

    GEMINI_BASE_URL: ClassVar[str] = "https://generativelanguage.googleapis.com/v1beta/openai/"
    PROVIDERS: ClassVar[tuple[str, ...]] = ("example", "gemini", "openai", "openai_compatible")

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalyzer:
        provider = settings.analysis_provider.strip().lower()
        if provider == "example":
            return ContractAnalyzer(client=ExampleClientAdapter(), model="example")
        if provider == "gemini":
            client = OpenAIClientAdapter(
                api_key=settings.analysis_gemini_api_key,
                timeout_seconds=settings.analysis_gemini_timeout_seconds,
                base_url=cls.GEMINI_BASE_URL,
            )
            model = settings.analysis_gemini_model_name
        elif provider == "openai":
            client = OpenAIClientAdapter(
                api_key=settings.analysis_openai_api_key,
                timeout_seconds=settings.analysis_openai_timeout_seconds,
            )
            model = settings.analysis_openai_model_name
        elif provider == "openai_compatible":
            base_url = settings.analysis_openai_compatible_base_url.strip()
            if not base_url:
                raise ValueError(
                    "analysis_openai_compatible_base_url is required for "
                    "analysis_provider=openai_compatible"
                )
            client = OpenAIClientAdapter(
                api_key=settings.analysis_openai_compatible_api_key,
                timeout_seconds=settings.analysis_openai_compatible_timeout_seconds,
                base_url=base_url,
            )
            model = settings.analysis_openai_compatible_model_name
        else:
            raise ValueError(
                f"Unknown analysis provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
            )
        return ContractAnalyzer(
            client=client,
            model=model,
            temperature=settings.analysis_temperature,
        )
