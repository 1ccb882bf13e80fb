"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./journal.db"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173"]  # Vite dev server

    # AI coach
    anthropic_api_key: str = ""
    coach_model: str = "claude-sonnet-4-20250514"
    coach_max_tokens: int = 1500
    coach_recent_trades: int = 10

    model_config = {"env_prefix": "TJ_", "env_file": ".env"}


settings = Settings()
