"""Composable HTTP request pipeline: options, transport, validator, parsers."""

from .client import (
    Client,
    ClientConfig,
    Option,
    new_client,
    request_basic_auth_option,
    with_debug,
    with_logger,
    with_request_options,
    with_response_validator,
    with_transport,
)
from .config import TransportConfig
from .context import CallContext, background
from .errors import (
    CallCancelledError,
    ConfigurationError,
    DeadlineExceededError,
    RequestTimeoutError,
    ResponseReadError,
    RestPipeError,
    StatusCodeError,
    TransportError,
)
from .options import with_body_opt, with_headers_opt, with_query_opt
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

__all__ = [
    "CallCancelledError",
    "CallContext",
    "Client",
    "ClientConfig",
    "ConfigurationError",
    "DeadlineExceededError",
    "Err",
    "Ok",
    "Option",
    "Request",
    "RequestOption",
    "RequestTimeoutError",
    "RequestsTransport",
    "ResponseParser",
    "ResponseReadError",
    "ResponseValidator",
    "RestPipeError",
    "Result",
    "StatusCodeError",
    "Transport",
    "TransportConfig",
    "TransportError",
    "background",
    "json_parser",
    "new_client",
    "no_body_parser",
    "raw_bytes_parser",
    "raw_string_parser",
    "request_basic_auth_option",
    "response_validator",
    "with_body_opt",
    "with_debug",
    "with_headers_opt",
    "with_logger",
    "with_query_opt",
    "with_request_options",
    "with_response_validator",
    "with_transport",
]
