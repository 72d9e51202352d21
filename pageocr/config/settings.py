from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    ocr_api_url: str = Field(min_length=1)
    ocr_api_key: str = Field(min_length=1)
    ocr_provider: str = "http"
    ocr_timeout_seconds: float = 120.0
    ocr_max_retries: int = Field(default=2, ge=0)
    ocr_retry_delay_seconds: float = Field(default=1.0, ge=0.0)

    pdf_engine: str = "pymupdf"

    page_concurrency: int = Field(default=1, ge=1)
    document_timeout_seconds: float | None = None

    max_file_size_mb: int = 20
    worker_poll_interval_seconds: float = 1.0

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = ["*"]
