"""Application configuration via environment variables."""

from dataclasses import dataclass
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings


@dataclass(frozen=True)
class CorsPolicy:
    """Fixed CORS headers appended to every response."""

    allow_origin: str = "*"
    allow_methods: str = "GET, OPTIONS"
    allow_headers: str = "*"

    def headers(self) -> dict[str, str]:
        return {
            "Access-Control-Allow-Headers": self.allow_headers,
            "Access-Control-Allow-Methods": self.allow_methods,
            "Access-Control-Allow-Origin": self.allow_origin,
        }


class Settings(BaseSettings):
    session_key: str
    expiration_ttl: int = 300
    session_transport: Literal["path", "cookie"] = "path"
    session_id_length: int = 16
    cookie_domain: str = ""
    route_prefix: str = ""
    cors_allow_origin: str = "*"
    session_store: Literal["memory", "dynamodb"] = "memory"
    dynamodb_table: str = "session_tokens"
    dynamodb_endpoint: str = ""  # For DynamoDB Local
    aws_region: str = "us-west-2"

    @field_validator("session_key")
    @classmethod
    def _secret_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("SESSION_KEY must not be empty")
        return v

    @field_validator("expiration_ttl", "session_id_length")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v

    @field_validator("route_prefix")
    @classmethod
    def _normalize_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v

    @property
    def cors_policy(self) -> CorsPolicy:
        return CorsPolicy(allow_origin=self.cors_allow_origin)

    model_config = {"env_prefix": "", "case_sensitive": False}


settings: Settings | None = None


def get_settings() -> Settings:
    global settings
    if settings is None:
        settings = Settings()
    return settings


def override_settings(s: Settings) -> None:
    """For testing: inject a Settings instance."""
    global settings
    settings = s
