from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "legaldesk"
    db_username: str = "legaldesk"
    db_password: str = "secret"
    db_pool_max_size: int = 4

    pdf_engine: str = "pdfplumber"
    ocr_language: str = "eng"

    analysis_provider: str = "gemini"
    analysis_temperature: float = 0.0

    analysis_gemini_api_key: str = ""
    analysis_gemini_model_name: str = "gemini-2.5-flash"
    analysis_gemini_timeout_seconds: int = 60

    analysis_openai_api_key: str = ""
    analysis_openai_model_name: str = "gpt-4o-mini"
    analysis_openai_timeout_seconds: int = 60

    analysis_openai_compatible_base_url: str = ""
    analysis_openai_compatible_api_key: str = ""
    analysis_openai_compatible_model_name: str = ""
    analysis_openai_compatible_timeout_seconds: int = 60

    functions_base_url: str = ""
    functions_api_key: str = ""
    functions_access_token: str = ""
    functions_timeout_seconds: int = 60

    forms_proxy_url: str = "https://api.allorigins.win/raw?url="
    forms_timeout_seconds: int = 30
