"""Transport capability and its requests-backed implementation."""

from __future__ import annotations

import logging
from typing import Protocol

import requests

from .config import TransportConfig
from .errors import RequestTimeoutError, TransportError
from .request import Request

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Sends a built request and returns the raw response."""

    def send(self, request: Request) -> requests.Response: ...


class RequestsTransport:
    """Transport that dispatches requests through a ``requests.Session``.

    The request headers are sent exactly as built by the option chain; the
    configured user agent and default headers only fill in missing keys.
    Responses are returned unread (``stream=True``) and must be closed by
    the caller.
    """

    def __init__(
        self,
        config: TransportConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._config = config or TransportConfig()
        self._session = session or requests.Session()

    @property
    def config(self) -> TransportConfig:
        return self._config

    def _resolve_timeout(self, request: Request) -> float | None:
        """Clamp the configured timeout to the call context deadline."""
        timeout = self._config.timeout_seconds
        remaining = request.context.remaining()
        if remaining is None:
            return timeout
        if timeout is None:
            return remaining
        return min(timeout, remaining)

    def _prepare(self, request: Request) -> requests.PreparedRequest:
        headers = dict(request.headers)
        for key, value in self._config.default_headers.items():
            if key not in request.headers:
                headers[key] = value
        if self._config.user_agent and "User-Agent" not in request.headers:
            headers["User-Agent"] = self._config.user_agent

        # Bytes bodies are replayed unchanged when requests follows a redirect;
        # Request.get_body serves callers that need a stream.
        prepared = requests.PreparedRequest()
        prepared.prepare(
            method=request.method,
            url=request.url,
            headers=headers,
            data=request.body,
        )
        return prepared

    def send(self, request: Request) -> requests.Response:
        request.context.check()
        timeout = self._resolve_timeout(request)
        try:
            prepared = self._prepare(request)
            response = self._session.send(
                prepared,
                stream=True,
                timeout=timeout,
                verify=self._config.verify_tls,
                allow_redirects=self._config.allow_redirects,
            )
        except requests.exceptions.Timeout as exc:
            raise RequestTimeoutError(str(exc)) from exc
        except requests.exceptions.RequestException as exc:
            raise TransportError(str(exc)) from exc

        if request.context.cancelled():
            logger.debug("dropping response for cancelled call %s", request.url)
            response.close()
            request.context.check()
        return response

    def close(self) -> None:
        self._session.close()
