# src/code_review/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Groq (OpenAI-compatible API)
    groq_api_key: str | None = None
    groq_base_url: str = "https://api.groq.com/openai/v1"
    groq_model: str = "mixtral-8x7b-32768"
    temperature: float = 0.5
    max_tokens: int = 2048
    request_timeout: float | None = None

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    # Client
    review_api_url: str = "http://127.0.0.1:8000/api/review"


@lru_cache
def get_settings() -> Settings:
    return Settings()
