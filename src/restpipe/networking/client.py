"""Request-execution pipeline for building typed API clients.

A :class:`Client` owns an endpoint, a transport, a global request option
chain and a response validator. Every call builds a fresh request, applies
the global chain and then the per-call chain, dispatches it, validates the
response and hands it to a parser. Calls return a Result; nothing is
retried at this layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Sequence, TypeVar

import requests

from .context import CallContext, background
from .debug import log_request, log_response
from .errors import ConfigurationError
from .parsers import (
    ResponseParser,
    json_parser,
    no_body_parser,
    raw_bytes_parser,
    raw_string_parser,
)
from .request import Request, RequestOption
from .transport import RequestsTransport, Transport
from .types import Err, Ok, Result
from .validation import ResponseValidator, response_validator

T = TypeVar("T")

LOGGER_NAME = "restpipe"


def _default_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client configuration produced by :func:`new_client`.

    A ``None`` transport is replaced by a default RequestsTransport when the
    Client is built.
    """

    endpoint: str
    transport: Transport | None = None
    request_options: tuple[RequestOption, ...] = ()
    validator: ResponseValidator = response_validator
    logger: logging.Logger = field(default_factory=_default_logger)
    debug: bool = False

    def __post_init__(self) -> None:
        if not self.endpoint:
            raise ValueError("endpoint must be a non-empty string")


Option = Callable[[ClientConfig], ClientConfig]


def with_transport(transport: Transport) -> Option:
    """Use a custom transport, e.g. a preconfigured RequestsTransport."""

    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, transport=transport)

    return apply


def with_logger(logger: logging.Logger) -> Option:
    """Send debug dumps and body-discard notices to ``logger``."""

    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, logger=logger)

    return apply


def with_request_options(*options: RequestOption) -> Option:
    """Append request options applied to every request of the client."""

    def apply(config: ClientConfig) -> ClientConfig:
        return replace(
            config, request_options=config.request_options + tuple(options)
        )

    return apply


def request_basic_auth_option(username: str, password: str) -> Option:
    """Add basic credentials to every request of the client."""

    def set_auth(request: Request) -> None:
        request.set_basic_auth(username, password)

    return with_request_options(set_auth)


def with_debug(enabled: bool) -> Option:
    """Log full request and response dumps for every call."""

    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, debug=enabled)

    return apply


def with_response_validator(validator: ResponseValidator) -> Option:
    """Replace the default status code validator."""

    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, validator=validator)

    return apply


class Client:
    """HTTP client running the build/send/validate/parse pipeline.

    The configuration is frozen, so one instance can serve concurrent calls
    from several threads.
    """

    def __init__(self, config: ClientConfig) -> None:
        if config.transport is None:
            config = replace(config, transport=RequestsTransport())
        self._config = config

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    @property
    def logger(self) -> logging.Logger:
        return self._config.logger

    def close(self) -> None:
        """Close the transport when it holds resources."""
        close = getattr(self._config.transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _build_meta(
        self,
        request: Request,
        stage: str,
        response: requests.Response | None = None,
        final_error: BaseException | None = None,
    ) -> dict[str, Any]:
        """Construct metadata dictionary from request and response."""
        meta: dict[str, Any] = {}
        meta["method"] = request.method
        meta["url"] = request.url
        meta["stage"] = stage
        if response is not None:
            meta["status"] = response.status_code
            meta["status_code"] = response.status_code
            meta["reason"] = response.reason
            if response.url:
                meta["url"] = response.url
        if final_error is not None:
            meta["final_error"] = type(final_error).__name__
        return meta

    def _apply_options(
        self,
        request: Request,
        options: Sequence[RequestOption],
        description: str,
    ) -> None:
        for option in options:
            try:
                option(request)
            except ConfigurationError as exc:
                raise ConfigurationError(f"{description}: {exc}") from exc

    def get_json(
        self,
        path: str,
        target: Callable[[Any], T] | None,
        *options: RequestOption,
        context: CallContext | None = None,
    ) -> Result[T, Exception]:
        """GET ``path`` and decode the JSON body with ``target``."""
        return self.do_request_json(
            "GET", path, target, *options, context=context
        )

    def do_request_json(
        self,
        method: str,
        path: str,
        target: Callable[[Any], T] | None,
        *options: RequestOption,
        context: CallContext | None = None,
    ) -> Result[T, Exception]:
        return self.do_request(
            method, path, json_parser(target), *options, context=context
        )

    def get(
        self,
        path: str,
        *options: RequestOption,
        context: CallContext | None = None,
    ) -> Result[None, Exception]:
        """GET ``path`` expecting no meaningful response body."""
        return self.do_request_no_body("GET", path, *options, context=context)

    def do_request_no_body(
        self,
        method: str,
        path: str,
        *options: RequestOption,
        context: CallContext | None = None,
    ) -> Result[None, Exception]:
        return self.do_request(
            method,
            path,
            no_body_parser(self._config.logger),
            *options,
            context=context,
        )

    def do_request_string(
        self,
        method: str,
        path: str,
        *options: RequestOption,
        context: CallContext | None = None,
    ) -> Result[str, Exception]:
        return self.do_request(
            method, path, raw_string_parser(), *options, context=context
        )

    def do_request_bytes(
        self,
        method: str,
        path: str,
        *options: RequestOption,
        context: CallContext | None = None,
    ) -> Result[bytes, Exception]:
        return self.do_request(
            method, path, raw_bytes_parser(), *options, context=context
        )

    def do_request(
        self,
        method: str,
        path: str,
        parser: ResponseParser,
        *options: RequestOption,
        context: CallContext | None = None,
    ) -> Result[Any, Exception]:
        """Run the full pipeline for one call.

        Args:
            method: HTTP method, sent as given; empty means GET.
            path: Appended verbatim to the client endpoint.
            parser: Consumes the accepted response and returns the value.
            *options: Per-call request options, applied after the global
                chain in the given order.
            context: Cancellation context for this call only.

        Returns:
            ``Ok`` with the parser's value, or ``Err`` with the option,
            transport, validation or parse error. ``meta["stage"]`` names
            the step that produced the outcome.
        """
        request = Request(
            method=method or "GET",
            url=self._config.endpoint + path,
            context=context or background(),
        )

        stage = "global_options"
        try:
            self._apply_options(
                request,
                self._config.request_options,
                "failed to apply global request option",
            )
            stage = "request_options"
            self._apply_options(
                request, options, "failed to apply request option"
            )
            stage = "send"
            request.context.check()
        except Exception as exc:
            return Err(exc, meta=self._build_meta(request, stage, final_error=exc))

        if self._config.debug:
            log_request(request, self._config.logger)

        try:
            response = self._config.transport.send(request)
        except Exception as exc:
            return Err(exc, meta=self._build_meta(request, stage, final_error=exc))

        try:
            if self._config.debug:
                log_response(response, self._config.logger)

            stage = "validate"
            self._config.validator(response)

            stage = "parse"
            value = parser(response)
        except Exception as exc:
            return Err(
                exc,
                meta=self._build_meta(request, stage, response, final_error=exc),
            )
        finally:
            response.close()

        return Ok(value, meta=self._build_meta(request, stage, response))


def new_client(endpoint: str, *options: Option) -> Client:
    """Create a client for ``endpoint`` and apply ``options`` in order."""
    config = ClientConfig(endpoint=endpoint)
    for option in options:
        config = option(config)
    return Client(config)

