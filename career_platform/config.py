from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Load project-root .env early so pydantic-settings and direct os.getenv access agree,
# even if the process CWD is not the repo root.
_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_IN_TEST = (os.getenv("ENVIRONMENT") or "").lower() == "test" or bool(os.getenv("PYTEST_CURRENT_TEST"))
if _ENV_PATH.exists() and not _IN_TEST:
    load_dotenv(dotenv_path=_ENV_PATH, override=True)


def _normalize_email(value: str) -> str:
    return (value or "").strip().lower()


def _parse_admin_emails(raw: Any) -> list[str]:
    if raw is None:
        return []

    items: list[Any]
    if isinstance(raw, (list, tuple, set)):
        items = list(raw)
    elif isinstance(raw, str):
        s = raw.strip()
        if not s:
            return []

        # JSON array string or comma-separated string.
        if s.startswith("["):
            try:
                parsed = json.loads(s)
                items = parsed if isinstance(parsed, list) else [parsed]
            except json.JSONDecodeError:
                items = [p.strip() for p in s.strip("[]").split(",")]
        else:
            items = [p.strip() for p in s.split(",")]
    else:
        items = [raw]

    emails: list[str] = []
    for item in items:
        if item is None:
            continue
        email = _normalize_email(str(item))
        if email:
            emails.append(email)
    return emails


class Settings(BaseSettings):
    app_name: str = Field(default="Career Platform API")
    version: str = Field(default="0.1.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=True)

    # DB_URL and ORM_DB_URL both configure the ORM; ORM_DB_URL wins.
    db_url: str | None = Field(default=None, validation_alias="DB_URL")
    orm_db_url: str | None = Field(default=None, validation_alias="ORM_DB_URL")

    # In development, allow the ORM to reuse the DB_* settings against MySQL.
    orm_use_mysql: bool = Field(default=False, validation_alias="ORM_USE_MYSQL")
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=3306, validation_alias="DB_PORT")
    db_name: str = Field(default="career_platform", validation_alias="DB_NAME")
    db_user: str = Field(default="root", validation_alias="DB_USER")
    db_password: str = Field(default="password", validation_alias="DB_PASSWORD")
    db_charset: str = Field(default="utf8mb4", validation_alias="DB_CHARSET")

    jwt_secret: str = Field(default="change-me")
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60)
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
        validation_alias="CORS_ORIGINS",
    )

    # Admin access control
    # - JSON array string: ADMIN_EMAILS=["admin@example.com","ops@example.com"]
    # - Comma-separated:   ADMIN_EMAILS=admin@example.com,ops@example.com
    admin_emails: list[str] = Field(default_factory=list, validation_alias="ADMIN_EMAILS")
    admin_email: str | None = Field(default=None, validation_alias="ADMIN_EMAIL")

    # Text generation (roadmap, summary, chatbot). Features answer 503 while unset.
    gemini_api_key: str | None = Field(default=None, validation_alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-2.5-flash", validation_alias="GEMINI_MODEL")
    gemini_api_base: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        validation_alias="GEMINI_API_BASE",
    )
    llm_timeout_seconds: float = Field(default=30.0, validation_alias="LLM_TIMEOUT_SECONDS")

    # Optional JSON file replacing the built-in CV skill dictionary.
    skill_dictionary_path: str | None = Field(default=None, validation_alias="SKILL_DICTIONARY_PATH")

    @field_validator("admin_emails", mode="before")
    @classmethod
    def _validate_admin_emails(cls, v: Any) -> list[str]:
        return _parse_admin_emails(v)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


def build_sqlalchemy_db_url(settings: Settings) -> str:
    if settings.orm_db_url:
        return settings.orm_db_url

    if settings.db_url:
        return settings.db_url

    # In development, default ORM to sqlite unless explicitly configured.
    if settings.environment.lower() == "development" and not settings.orm_use_mysql:
        return "sqlite:///./dev.db"

    # NOTE: password may include special chars; prefer DB_URL for complex passwords.
    return (
        f"mysql+pymysql://{settings.db_user}:{settings.db_password}"
        f"@{settings.db_host}:{settings.db_port}/{settings.db_name}"
        f"?charset={settings.db_charset}"
    )


def get_admin_allowlist() -> set[str]:
    emails = set(_normalize_email(e) for e in (settings.admin_emails or []))
    emails.update(_parse_admin_emails(settings.admin_email))
    return emails


def is_admin_email(email: str) -> bool:
    return _normalize_email(email) in get_admin_allowlist()
