from __future__ import annotations

from dataclasses import dataclass

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # API access
    access_token: str | None = Field(default=None, validation_alias="GOCARDLESS_ACCESS_TOKEN")
    environment: str = Field(default="sandbox", validation_alias="GOCARDLESS_ENVIRONMENT")
    base_url: str | None = Field(default=None, validation_alias="GOCARDLESS_BASE_URL")

    # Webhooks
    webhook_secret: str | None = Field(default=None, validation_alias="GOCARDLESS_WEBHOOK_SECRET")

    # Request signing (outbound payments)
    signing_key_id: str | None = Field(default=None, validation_alias="GOCARDLESS_SIGNING_KEY_ID")
    signing_private_key_path: str | None = Field(
        default=None, validation_alias="GOCARDLESS_SIGNING_PRIVATE_KEY_PATH"
    )

    # Transport
    timeout_seconds: float = Field(default=30.0, validation_alias="GOCARDLESS_TIMEOUT_SECONDS")
    retries_on_timeout: int = Field(default=2, validation_alias="GOCARDLESS_RETRIES_ON_TIMEOUT")
    wait_between_retries: float = Field(
        default=0.5, validation_alias="GOCARDLESS_WAIT_BETWEEN_RETRIES"
    )
    error_on_idempotency_conflict: bool = Field(
        default=False, validation_alias="GOCARDLESS_ERROR_ON_IDEMPOTENCY_CONFLICT"
    )

    model_config = {
        "env_file": ".env",
        "extra": "ignore",
    }

    @classmethod
    def load(cls) -> "Settings":
        load_dotenv(override=False)
        return cls()


@dataclass(frozen=True)
class EnvironmentDefaults:
    base_url: str


def env_defaults(env: str) -> EnvironmentDefaults:
    env = env.lower().strip()
    if env == "live":
        return EnvironmentDefaults(base_url="https://api.gocardless.com")
    if env == "sandbox":
        return EnvironmentDefaults(base_url="https://api-sandbox.gocardless.com")
    raise ValueError(f"Unknown environment: {env}")
