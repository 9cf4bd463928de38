"""Error taxonomy for the restpipe networking layer."""

from __future__ import annotations


class RestPipeError(Exception):
    """Base class for every error raised by restpipe."""


class ConfigurationError(RestPipeError, ValueError):
    """A request option or parser received invalid input."""


class TransportError(RestPipeError):
    """The request could not be sent or no response was received."""


class RequestTimeoutError(TransportError):
    """The transport gave up waiting for the server."""


class CallCancelledError(TransportError):
    """The call context was cancelled before the exchange completed."""


class DeadlineExceededError(TransportError):
    """The call context deadline passed before the exchange completed."""


class ResponseReadError(RestPipeError):
    """The response body could not be read."""


class StatusCodeError(RestPipeError):
    """Represents an HTTP response rejected by the response validator.

    The body is captured when the validator runs; the response stream is not
    available to any parser afterwards.
    """

    def __init__(self, code: int, status: str, body: str) -> None:
        super().__init__(code, status, body)
        self._code = code
        self._status = status
        self._body = body

    @property
    def code(self) -> int:
        return self._code

    @property
    def status(self) -> str:
        return self._status

    @property
    def body(self) -> str:
        return self._body

    def http_status_code(self) -> int:
        """Return the HTTP status code of the rejected response."""
        return self._code

    def __str__(self) -> str:
        return f"error: {self._code} | {self._status} | {self._body}"
