"""Token management utilities for the Spotify Web API."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from types import TracebackType
from typing import Any, Self

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..config import SpotifyConfig
from ..errors import CredentialExchangeError, InvalidArgumentError
from .http_client import build_timeout, extract_error_message, open_http_client

logger = logging.getLogger("spotify_mcp.token_manager")

EXCHANGE_CODE_OPERATION = "Exchange Authorization Code"


@dataclass(frozen=True, slots=True)
class Credential:
    """A bearer token together with the instant it stops being valid."""

    token: str
    expires_at: datetime

    def is_usable(self, now: datetime, margin: timedelta = timedelta(0)) -> bool:
        """Return True while ``now`` is before the expiry minus ``margin``."""
        return now < self.expires_at - margin


class _ClientCredentialsPayload(BaseModel):
    """Fields required from a client-credentials token response."""

    model_config = ConfigDict(extra="allow")

    access_token: str = Field(min_length=1)
    expires_in: int = Field(gt=0)
    token_type: str | None = None


class TokenManager:
    """Manage the client-credentials bearer token, refreshing when necessary.

    Concurrent callers that find no usable token share a single in-flight
    exchange: the first caller starts it under the lock, every other caller
    awaits the same task and observes the same token or the same error.
    """

    def __init__(self, config: SpotifyConfig, *, http_client: httpx.AsyncClient | None = None) -> None:
        """Initialize the token manager.

        Args:
            config: The resolved Spotify configuration to authenticate with.
            http_client: Optional shared HTTP client; a short-lived client is
                opened per exchange when omitted.

        """
        self._config = config
        self._http_client = http_client
        self._credential: Credential | None = None
        self._refresh_task: asyncio.Task[Credential] | None = None
        self._lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None

    def __enter__(self) -> Self:
        """Return the token manager for context manager usage."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Close resources when leaving a context manager block."""
        self.close()

    def close(self) -> None:
        """Release the manager at the end of a ``with`` block. Safe to call more than once."""
        self.invalidate()

    @property
    def credential(self) -> Credential | None:
        """Return the currently cached credential, if any."""
        return self._credential

    @property
    def refresh_margin(self) -> timedelta:
        """Return how long before expiry a token is treated as stale."""
        return timedelta(seconds=self._config.token_refresh_margin_s)

    def invalidate(self) -> None:
        """Drop the cached credential so the next call performs an exchange."""
        self._credential = None

    def _ensure_lock(self) -> asyncio.Lock:
        """Return an asyncio lock bound to the current event loop.

        Creates a new lock if one does not exist or if the event loop has changed.
        """
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
            # A refresh task owned by another loop cannot be awaited here
            self._refresh_task = None
        return self._lock

    async def get_token(self) -> str:
        """Return a valid bearer token, exchanging client credentials if needed.

        Raises:
            CredentialExchangeError: If the identity endpoint rejects the
                exchange, cannot be reached, or returns a malformed payload.

        """
        credential = self._credential
        if credential is not None and credential.is_usable(datetime.now(UTC), self.refresh_margin):
            return credential.token

        async with self._ensure_lock():
            credential = self._credential
            if credential is not None and credential.is_usable(datetime.now(UTC), self.refresh_margin):
                return credential.token
            if self._refresh_task is None:
                self._refresh_task = asyncio.create_task(self._refresh_credential())
            refresh_task = self._refresh_task

        # Shielded so one cancelled waiter does not abort the exchange for the rest
        credential = await asyncio.shield(refresh_task)
        return credential.token

    async def _refresh_credential(self) -> Credential:
        """Exchange client credentials and cache the resulting token."""
        try:
            payload = await self._post_token_request(
                {
                    "grant_type": "client_credentials",
                    "client_id": self._config.client_id,
                    "client_secret": self._config.client_secret,
                },
            )
            try:
                parsed = _ClientCredentialsPayload.model_validate(payload)
            except ValidationError as exc:
                msg = f"Spotify token endpoint returned a malformed payload: {exc.error_count()} invalid field(s)."
                raise CredentialExchangeError(msg) from exc

            credential = Credential(
                token=parsed.access_token,
                expires_at=datetime.now(UTC) + timedelta(seconds=parsed.expires_in),
            )
            self._credential = credential
        except CredentialExchangeError:
            logger.exception("Failed to obtain a Spotify access token")
            raise
        finally:
            if self._refresh_task is asyncio.current_task():
                self._refresh_task = None

        logger.debug("Fetched new bearer token from Spotify; expires at %s.", credential.expires_at.isoformat())
        return credential

    async def exchange_authorization_code(self, code: str) -> dict[str, Any]:
        """Exchange a user authorization code for a token payload.

        The cached client-credentials token is not touched; the upstream payload
        is returned unchanged.

        Args:
            code: The authorization code returned to the redirect URI.

        Returns:
            The token payload from the accounts service.

        Raises:
            InvalidArgumentError: If the code is empty or no redirect URI is configured.
            CredentialExchangeError: If the exchange fails.

        """
        if not code or not code.strip():
            msg = "Authorization code is required"
            raise InvalidArgumentError(msg, operation=EXCHANGE_CODE_OPERATION)
        if not self._config.redirect_uri:
            msg = "SPOTIFY_REDIRECT_URI must be set to exchange an authorization code."
            raise InvalidArgumentError(msg, operation=EXCHANGE_CODE_OPERATION)

        try:
            return await self._post_token_request(
                {
                    "grant_type": "authorization_code",
                    "code": code.strip(),
                    "redirect_uri": self._config.redirect_uri,
                    "client_id": self._config.client_id,
                    "client_secret": self._config.client_secret,
                },
            )
        except CredentialExchangeError as exc:
            exc.operation = EXCHANGE_CODE_OPERATION
            logger.exception("Failed to exchange Spotify authorization code")
            raise

    async def _post_token_request(self, form: dict[str, str]) -> dict[str, Any]:
        """POST a form-encoded grant to the accounts service.

        Args:
            form: The grant fields to send.

        Returns:
            The decoded JSON object returned by the accounts service.

        Raises:
            CredentialExchangeError: On timeout, network error, non-2xx status, or
                a body that is not a JSON object.

        """
        grant_type = form["grant_type"]
        timeout_ms = self._config.token_timeout_ms
        try:
            async with (
                asyncio.timeout(timeout_ms / 1000),
                open_http_client(timeout_ms, client=self._http_client) as http_client,
            ):
                response = await http_client.post(
                    self._config.token_url,
                    data=form,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                    timeout=build_timeout(timeout_ms),
                )
        except (TimeoutError, httpx.TimeoutException) as exc:
            msg = f"Timed out after {timeout_ms}ms during the {grant_type} exchange with Spotify."
            raise CredentialExchangeError(msg) from exc
        except httpx.HTTPError as exc:
            msg = f"Network error during the {grant_type} exchange with Spotify: {exc}"
            raise CredentialExchangeError(msg) from exc

        if not response.is_success:
            message = extract_error_message(response)
            msg = f"Spotify token endpoint returned HTTP {response.status_code}: {message}"
            raise CredentialExchangeError(msg, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            msg = f"Invalid JSON response from Spotify token endpoint: {exc}"
            raise CredentialExchangeError(msg, status_code=response.status_code) from exc
        if not isinstance(payload, dict):
            msg = "Spotify token endpoint returned a non-object JSON payload."
            raise CredentialExchangeError(msg, status_code=response.status_code)
        return payload


__all__ = ["EXCHANGE_CODE_OPERATION", "Credential", "TokenManager"]
