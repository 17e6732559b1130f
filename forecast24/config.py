"""
Client configuration, loaded from the environment (and an optional .env file).
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from . import canon, exceptions

ENV_PREFIX = "FORECAST24_"

# env suffix -> ClientConfig field
ENV_FIELDS: dict[str, str] = {
    "API_BASE": "api_base",
    "TIMEOUT_S": "timeout_s",
    "HISTORY_DAYS": "history_days",
    "HISTORY_LIMIT": "history_limit",
    "TZ": "tz",
}


class ClientConfig(BaseModel):
    """Pricing API client settings."""

    api_base: str
    timeout_s: float = canon.DEFAULT_TIMEOUT_S
    history_days: int = canon.HISTORY_DAYS
    history_limit: int = canon.HISTORY_LIMIT
    tz: Optional[str] = None  # e.g. "Europe/Oslo" for local hour labels

    @field_validator("api_base")
    @classmethod
    def _strip_base(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("api_base must not be empty")
        return v

    @field_validator("timeout_s", "history_days", "history_limit")
    @classmethod
    def _positive(cls, v):
        if v <= 0:
            raise ValueError("must be positive")
        return v

    @classmethod
    def from_env(
        cls,
        env: Optional[Mapping[str, str]] = None,
        *,
        dotenv_path: Optional[str] = None,
    ) -> "ClientConfig":
        """Build a config from FORECAST24_* variables.

        When `env` is not given, a .env file is loaded first (existing
        variables win) and os.environ is read.
        """
        if env is None:
            load_dotenv(dotenv_path)
            env = os.environ

        if not env.get(ENV_PREFIX + "API_BASE"):
            raise exceptions.ConfigError(
                f"{ENV_PREFIX}API_BASE is not set. Point it at the pricing API."
            )

        values = {
            field: env[ENV_PREFIX + suffix]
            for suffix, field in ENV_FIELDS.items()
            if env.get(ENV_PREFIX + suffix)
        }
        try:
            return cls(**values)
        except ValidationError as e:
            raise exceptions.ConfigError(f"Invalid client configuration: {e}") from e
