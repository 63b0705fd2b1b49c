"""Error kinds raised by the Spotify client.

Every failure that leaves the client is one of the ``SpotifyError`` subclasses
below, so callers can branch on a stable kind instead of parsing messages:

- ``InvalidArgumentError``: caller input rejected before any network call.
- ``CredentialExchangeError``: the identity endpoint rejected the exchange or
  could not be reached.
- ``UpstreamApiError``: the Web API answered with a non-2xx status.
- ``UpstreamUnavailableError``: network failure or timeout; the effect of the
  request is unknown.
- ``UnknownFailureError``: anything else raised while building a request or
  transforming its response.
"""


class SpotifyError(Exception):
    """Base class for all Spotify client failures.

    Attributes:
        operation: Human-readable name of the operation that failed, if known.
        status_code: HTTP status returned upstream, if any.

    """

    kind = "spotify_error"

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        status_code: int | None = None,
    ) -> None:
        """Initialize the error with its message and optional context."""
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.status_code = status_code

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable description of the error."""
        return {
            "kind": self.kind,
            "message": self.message,
            "operation": self.operation,
            "status_code": self.status_code,
        }


class InvalidArgumentError(SpotifyError):
    """Caller-supplied input failed validation. Not retryable."""

    kind = "invalid_argument"


class CredentialExchangeError(SpotifyError):
    """The identity endpoint rejected the credential exchange or was unreachable."""

    kind = "credential_exchange"


class UpstreamApiError(SpotifyError):
    """The Spotify Web API returned a non-2xx response."""

    kind = "upstream_api"


class UpstreamUnavailableError(SpotifyError):
    """The Spotify Web API could not be reached or did not answer in time."""

    kind = "upstream_unavailable"


class UnknownFailureError(SpotifyError):
    """Unexpected failure while building a request or transforming a response."""

    kind = "unknown_failure"


__all__ = [
    "CredentialExchangeError",
    "InvalidArgumentError",
    "SpotifyError",
    "UnknownFailureError",
    "UpstreamApiError",
    "UpstreamUnavailableError",
]
