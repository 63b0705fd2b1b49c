"""Configuration management for the Spotify MCP server.

This module defines the ``SpotifyConfig`` model and helpers to load configuration
from environment variables.
"""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, model_validator

# Load variables from a local .env file for development convenience
load_dotenv()

DEFAULT_API_BASE_URL = "https://api.spotify.com/v1"
DEFAULT_TOKEN_URL = "https://accounts.spotify.com/api/token"


class SpotifyConfig(BaseModel):
    """Configuration values required to interact with the Spotify Web API."""

    client_id: str
    client_secret: str
    redirect_uri: str | None = None
    api_base_url: str = DEFAULT_API_BASE_URL
    token_url: str = DEFAULT_TOKEN_URL
    timeout_ms: int = Field(default=10000, ge=100, le=600000)
    token_timeout_ms: int = Field(default=10000, ge=100, le=600000)
    token_refresh_margin_s: int = Field(default=3, ge=0, le=300)
    default_market: str = Field(default="US", min_length=2, max_length=2)

    @model_validator(mode="after")
    def _validate_credentials(self) -> SpotifyConfig:
        if not self.client_id.strip() or not self.client_secret.strip():
            msg = "Set both SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET."
            raise ValueError(msg)
        return self

    @property
    def base_url_str(self) -> str:
        """Return the API base URL without a trailing slash."""
        return self.api_base_url.rstrip("/")

    @classmethod
    def from_env(cls) -> SpotifyConfig:
        """Build a configuration object from environment variables."""
        client_id = os.getenv("SPOTIFY_CLIENT_ID")
        if not client_id:
            msg = "SPOTIFY_CLIENT_ID is required to reach the Spotify API."
            raise RuntimeError(msg)
        raw_config: dict[str, Any] = {
            "client_id": client_id,
            "client_secret": os.getenv("SPOTIFY_CLIENT_SECRET", ""),
            "redirect_uri": os.getenv("SPOTIFY_REDIRECT_URI"),
            "api_base_url": os.getenv("SPOTIFY_API_BASE_URL"),
            "token_url": os.getenv("SPOTIFY_TOKEN_URL"),
            "timeout_ms": os.getenv("SPOTIFY_TIMEOUT_MS"),
            "token_timeout_ms": os.getenv("SPOTIFY_TOKEN_TIMEOUT_MS"),
            "token_refresh_margin_s": os.getenv("SPOTIFY_TOKEN_REFRESH_MARGIN_S"),
            "default_market": os.getenv("SPOTIFY_MARKET"),
        }
        # Unset variables fall back to the model defaults
        raw_config = {key: value for key, value in raw_config.items() if value is not None}
        try:
            return cls(**raw_config)
        except ValidationError as exc:
            messages = "; ".join(err["msg"] for err in exc.errors())
            msg = f"Invalid Spotify configuration: {messages}"
            raise RuntimeError(msg) from exc


__all__ = ["DEFAULT_API_BASE_URL", "DEFAULT_TOKEN_URL", "SpotifyConfig"]
