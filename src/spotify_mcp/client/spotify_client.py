"""Spotify Web API client.

Every outbound API call goes through ``SpotifyClient.request``, the single place
where the bearer token is attached, the timeout is enforced, and failures are
classified into the error kinds of ``spotify_mcp.errors``.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any, TypeAlias

import httpx

from ..config import SpotifyConfig
from ..errors import (
    CredentialExchangeError,
    SpotifyError,
    UnknownFailureError,
    UpstreamApiError,
    UpstreamUnavailableError,
)
from ..models.normalized import Acknowledgement
from .http_client import build_timeout, extract_error_message, open_http_client
from .token_manager import TokenManager

logger = logging.getLogger("spotify_mcp.spotify_client")

JsonObject: TypeAlias = dict[str, Any]
Transform: TypeAlias = Callable[[Any], Any]


def classify_failure(operation: str, exc: Exception, *, timeout_ms: int) -> SpotifyError:
    """Map an unexpected exception raised during a request to an error kind.

    Args:
        operation: Human-readable operation name.
        exc: The exception raised while sending the request or handling its response.
        timeout_ms: The timeout that was in force, for the error message.

    Returns:
        ``UpstreamUnavailableError`` for timeouts and transport failures,
        ``UnknownFailureError`` for anything else.

    """
    if isinstance(exc, TimeoutError | httpx.TimeoutException):
        msg = f"No response received from Spotify ({operation}) within {timeout_ms}ms."
        return UpstreamUnavailableError(msg, operation=operation)
    if isinstance(exc, httpx.TransportError):
        msg = f"No response received from Spotify ({operation}). Check your network connection: {exc}"
        return UpstreamUnavailableError(msg, operation=operation)
    msg = f"{operation} failed: {exc}"
    return UnknownFailureError(msg, operation=operation)


class SpotifyClient:
    """Authenticated access to the Spotify Web API.

    The client owns its ``TokenManager``; both share the optional HTTP client so
    tests and long-running hosts can inject a configured ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        config: SpotifyConfig,
        *,
        token_manager: TokenManager | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: The resolved Spotify configuration.
            token_manager: Credential manager to use; one is created from
                ``config`` when omitted.
            http_client: Optional shared HTTP client.

        """
        self._config = config
        self._http_client = http_client
        self.token_manager = token_manager or TokenManager(config, http_client=http_client)

    @property
    def config(self) -> SpotifyConfig:
        """Return the configuration this client was built with."""
        return self._config

    def build_url(self, path: str) -> str:
        """Return the absolute API URL for ``path``."""
        return f"{self._config.base_url_str}/{path.lstrip('/')}"

    async def request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json_body: JsonObject | None = None,
        transform: Transform | None = None,
    ) -> Any:
        """Send one authenticated request and route its response.

        Args:
            operation: Human-readable operation name attached to errors and logs.
            method: HTTP method.
            path: Path relative to the API base URL.
            params: Optional query parameters.
            json_body: Optional JSON request body.
            transform: Optional function applied to a decoded 2xx body.

        Returns:
            The transformed (or raw) JSON body, or ``None`` when a 2xx response
            carries no body.

        Raises:
            SpotifyError: One of the error kinds, tagged with ``operation``.

        """
        timeout_ms = self._config.timeout_ms
        try:
            token = await self.token_manager.get_token()
        except CredentialExchangeError as exc:
            # Waiters on one refresh share the exception object; tag a copy per caller
            error = CredentialExchangeError(exc.message, operation=operation, status_code=exc.status_code)
            logger.error("Spotify %s error: %s", operation, error)
            raise error from exc

        try:
            headers = {
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
            }
            async with (
                asyncio.timeout(timeout_ms / 1000),
                open_http_client(timeout_ms, client=self._http_client) as http_client,
            ):
                response = await http_client.request(
                    method,
                    self.build_url(path),
                    params=params,
                    json=json_body,
                    headers=headers,
                    timeout=build_timeout(timeout_ms),
                )

            logger.debug("Spotify %s: %s %s -> HTTP %s", operation, method, path, response.status_code)
            if not response.is_success:
                message = extract_error_message(response)
                msg = f"Spotify API Error ({operation}): {message}"
                raise UpstreamApiError(msg, operation=operation, status_code=response.status_code)

            if not response.content:
                return None
            payload = response.json()
            return transform(payload) if transform is not None else payload
        except SpotifyError as exc:
            logger.error("Spotify %s error: %s", operation, exc)
            raise
        except Exception as exc:  # noqa: BLE001 - classified and re-raised below
            error = classify_failure(operation, exc, timeout_ms=timeout_ms)
            logger.error("Spotify %s error: %s", operation, error)
            raise error from exc

    async def send_command(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        message: str,
        params: dict[str, str] | None = None,
        json_body: JsonObject | None = None,
    ) -> Acknowledgement:
        """Send a fire-and-forget command and acknowledge a 2xx answer.

        Any body the API returns is ignored; command results are observed by
        querying state again.
        """
        await self.request(operation, method, path, params=params, json_body=json_body)
        return Acknowledgement(success=True, message=message)


__all__ = ["JsonObject", "SpotifyClient", "Transform", "classify_failure"]
