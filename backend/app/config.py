"""Application configuration settings."""

from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "TI Concursos API"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    # Default to a local SQLite file for dev. Deployments override via DATABASE_URL.
    database_url: str = f"sqlite+aiosqlite:///{Path(__file__).parent.parent / 'data' / 'app.db'}"

    # Auth
    jwt_secret_key: str = "dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # CORS
    cors_origins: list[str] = ["*"]

    # Bootstrap admin (created on startup when both are set)
    seed_admin_email: str | None = None
    seed_admin_password: str | None = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
