"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
    "sqlite://",
)


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    API_PREFIX: str = "/api"

    # Required: no default, the app refuses to start without it
    DATABASE_URL: str

    # Session tokens
    JWT_SECRET: SecretStr
    JWT_ALGORITHM: str = "HS256"
    SESSION_TTL_MINUTES: int = 60

    # Session cookie. The dashboard reads it from document.cookie, hence not httpOnly by default.
    COOKIE_NAME: str = "token"
    COOKIE_SECURE: bool = False
    COOKIE_HTTPONLY: bool = False
    COOKIE_SAMESITE: Literal["lax", "strict", "none"] = "lax"

    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    # Hugging Face inference router (chat assistant)
    HF_API_KEY: SecretStr
    HF_BASE_URL: str = "https://router.huggingface.co/v1"
    HF_MODEL: str = "meta-llama/Llama-3.2-3B-Instruct"
    HF_MAX_TOKENS: int = 150
    HF_TEMPERATURE: float = 0.7
    HF_REQUEST_TIMEOUT_SEC: float = 30.0

    # Expired session-token purge (run via cron or CLI, never from requests)
    TOKEN_RETENTION_ENABLED: bool = True

    @field_validator("API_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            raise ValueError("API_PREFIX must start with '/' (e.g. /api)")
        return v

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a PostgreSQL or SQLite URL (e.g. postgresql+psycopg2:// or sqlite:///kodbank.db)"
            )
        return v.strip()

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("JWT_SECRET must be set and non-empty")
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_ALGORITHM must be set and non-empty")
        return v.strip()

    @field_validator("SESSION_TTL_MINUTES")
    @classmethod
    def validate_session_ttl_minutes(cls, v: int) -> int:
        if v < 1 or v > 10080:
            raise ValueError(
                "SESSION_TTL_MINUTES must be between 1 and 10080 (1 min to 7 days)"
            )
        return v

    @field_validator("COOKIE_NAME")
    @classmethod
    def validate_cookie_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("COOKIE_NAME must be set and non-empty")
        return v.strip()

    @field_validator("HF_API_KEY")
    @classmethod
    def validate_hf_api_key(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("HF_API_KEY must be set and non-empty")
        return v

    @field_validator("HF_BASE_URL")
    @classmethod
    def validate_hf_base_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("HF_BASE_URL must be set and non-empty")
        s = v.strip().lower()
        if not (s.startswith("http://") or s.startswith("https://")):
            raise ValueError(
                "HF_BASE_URL must use http or https (e.g. https://router.huggingface.co/v1)"
            )
        return v.strip().rstrip("/")

    @field_validator("HF_MAX_TOKENS")
    @classmethod
    def validate_hf_max_tokens(cls, v: int) -> int:
        if v < 1 or v > 4096:
            raise ValueError("HF_MAX_TOKENS must be between 1 and 4096")
        return v

    @field_validator("HF_TEMPERATURE")
    @classmethod
    def validate_hf_temperature(cls, v: float) -> float:
        if v < 0 or v > 2:
            raise ValueError("HF_TEMPERATURE must be between 0 and 2")
        return v

    @field_validator("HF_REQUEST_TIMEOUT_SEC")
    @classmethod
    def validate_hf_timeout(cls, v: float) -> float:
        if v <= 0 or v > 120:
            raise ValueError(
                "HF_REQUEST_TIMEOUT_SEC must be greater than 0 and at most 120"
            )
        return v


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
