from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


MAX_UPLOAD_BYTES = 10 * 1024 * 1024
GOOGLE_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"


def get_default_static_dir() -> str:
    """Directory holding the browser page, next to the package."""
    return str(Path(__file__).resolve().parents[1] / "public")


class Settings(BaseSettings):
    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o-mini", alias="OPENAI_MODEL")
    openai_base_url: str | None = Field(default=None, alias="OPENAI_BASE_URL")
    openai_timeout_seconds: float | None = Field(default=None, alias="OPENAI_TIMEOUT_SECONDS")

    google_api_key: str | None = Field(default=None, alias="GOOGLE_API_KEY")
    google_search_engine_id: str | None = Field(default=None, alias="GOOGLE_SEARCH_ENGINE_ID")
    google_search_url: str = Field(default=GOOGLE_SEARCH_URL, alias="GOOGLE_SEARCH_URL")
    search_timeout_seconds: float = Field(default=10.0, alias="SEARCH_TIMEOUT_SECONDS")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    max_upload_bytes: int = Field(default=MAX_UPLOAD_BYTES, alias="MAX_UPLOAD_BYTES")
    static_dir: str = Field(default_factory=get_default_static_dir, alias="PDFLENS_STATIC_DIR")
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"], alias="CORS_ALLOW_ORIGINS")

    # Upstream error messages are echoed to clients unless disabled
    expose_error_details: bool = Field(default=True, alias="EXPOSE_ERROR_DETAILS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
