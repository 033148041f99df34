# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Optional env vars (.env):
      - DATABASE_URL (Postgres/SQLite connection string). When unset the
        API runs on the in-memory store and nothing survives a restart.
      - SMTP_USERNAME / SMTP_PASSWORD (mailbox used to send inquiries)
      - BUSINESS_EMAIL (inbox receiving inquiries; defaults to sender)
    """

    PROJECT_NAME: str = "Goodwill Global Exports API"
    API_PREFIX: str = "/api"
    PORT: int = 5000

    CORS_ORIGINS: list[str] = [
        "http://localhost:5000",
        "http://127.0.0.1:5000",
        "http://localhost:5173",
    ]

    # Persistence
    DATABASE_URL: str | None = None

    # SMTP (Gmail on 465 by default)
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 465
    SMTP_USERNAME: str | None = None
    SMTP_PASSWORD: str | None = None
    SMTP_FROM_EMAIL: str | None = None
    SMTP_FROM_NAME: str = "Goodwill Global Exports"
    SMTP_USE_TLS: bool = False
    SMTP_USE_SSL: bool = True
    BUSINESS_EMAIL: str | None = None

    # Wire defaults
    DEFAULT_BLOG_AUTHOR: str = "GOODWILL GLOBAL EXPORTS"
    DEFAULT_PRODUCT_CATEGORY: str = "Regular"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def sender_address(self) -> str | None:
        """Address used in From; falls back to the SMTP login."""
        return self.SMTP_FROM_EMAIL or self.SMTP_USERNAME

    @property
    def inbox_address(self) -> str | None:
        """Business inbox that receives contact and quote inquiries."""
        return self.BUSINESS_EMAIL or self.sender_address


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
