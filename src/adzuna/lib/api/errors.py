"""Errors raised by request builders when a fetch fails."""

from __future__ import annotations

from adzuna.lib.models.models import ApiException


class AdzunaError(Exception):
    """Base class for every failure surfaced by ``fetch()``.

    Attributes:
        http_status: HTTP status of the response, or None when no response
            was received.
        api_error: The structured error body, when the API returned one.
    """

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        api_error: ApiException | None = None,
    ) -> None:
        self.http_status = http_status
        self.api_error = api_error
        self.message = message
        super().__init__(message)


class TransportError(AdzunaError):
    """The request never produced a response (DNS, connection, TLS, timeout)."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Transport error: {message}")


class ApiError(AdzunaError):
    """API returned an error response with a structured body."""

    def __init__(self, http_status: int, api_error: ApiException) -> None:
        detail = api_error.display or api_error.exception
        super().__init__(
            f"API Error {http_status} {api_error.exception}: {detail}",
            http_status=http_status,
            api_error=api_error,
        )

    @property
    def exception(self) -> str:
        """Machine-readable reason, e.g. ``AUTH_FAIL``."""
        return self.api_error.exception


class UnexpectedResponseError(AdzunaError):
    """API returned an error response whose body could not be understood."""

    def __init__(self, http_status: int, body: str) -> None:
        self.body = body
        super().__init__(f"API Error {http_status}: {body[:200]}", http_status=http_status)


class DeserializationError(AdzunaError):
    """A successful response did not match the expected model."""

    def __init__(self, http_status: int, model: str, reason: str) -> None:
        self.model = model
        super().__init__(
            f"Could not parse {model} from response: {reason}",
            http_status=http_status,
        )
