"""Built-in request options.

Each factory returns a :data:`RequestOption`, a callable that mutates a
:class:`~restpipe.networking.request.Request` in place and raises
:class:`ConfigurationError` when it cannot be applied.
"""

from __future__ import annotations

from typing import IO, Mapping, Sequence, Union
from urllib.parse import urlencode

from requests.structures import CaseInsensitiveDict

from .errors import ConfigurationError
from .request import Request, RequestOption

QueryValues = Mapping[str, Union[str, Sequence[str]]]
Body = Union[bytes, bytearray, str, IO[bytes]]


def with_query_opt(query: QueryValues | None) -> RequestOption:
    """Overwrite the request query string with the encoded ``query``.

    Keys are encoded in sorted order; any existing query is discarded.
    """

    def apply(request: Request | None) -> None:
        if query is None or request is None:
            raise ConfigurationError(
                f"with_query_opt error: {request!r} | {query!r}"
            )
        pairs = sorted(query.items(), key=lambda item: item[0])
        request.query = urlencode(pairs, doseq=True)

    return apply


def with_headers_opt(headers: Mapping[str, str] | None) -> RequestOption:
    """Replace the whole header collection of the request."""

    def apply(request: Request | None) -> None:
        if headers is None or request is None:
            raise ConfigurationError(
                f"with_headers_opt error: {request!r} | {headers!r}"
            )
        request.headers = CaseInsensitiveDict(headers)

    return apply


def with_body_opt(body: Body | None) -> RequestOption:
    """Set the request body.

    Streams are read to the end when the option is applied, so the request
    can hand out a fresh copy of the body for every send.
    """

    def apply(request: Request | None) -> None:
        if body is None or request is None:
            raise ConfigurationError(
                f"with_body_opt error: {request!r} | {body!r}"
            )
        request.set_body(_materialize(body))

    return apply


def _materialize(body: Body) -> bytes:
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    read = getattr(body, "read", None)
    if read is None:
        raise ConfigurationError(
            f"unsupported body type: {type(body).__name__}"
        )
    try:
        data = read()
    except OSError as exc:
        raise ConfigurationError(f"failed to read request body: {exc}") from exc
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)
