"""Human-readable request/response dumps for debug logging.

Dumping a response reads its body into ``response.content``; parsers read
through the cached content, so a dump never starves the parser.
"""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

import requests

from .request import Request

_HTTP_VERSIONS = {10: "HTTP/1.0", 11: "HTTP/1.1", 20: "HTTP/2"}


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def dump_request(request: Request) -> str:
    """Render the request in HTTP/1.1 wire form."""
    parts = urlsplit(request.url)
    target = parts.path or "/"
    if parts.query:
        target = f"{target}?{parts.query}"

    lines = [f"{request.method} {target} HTTP/1.1", f"Host: {parts.netloc}"]
    lines.extend(f"{key}: {value}" for key, value in request.headers.items())
    if request.body is not None:
        lines.append(f"Content-Length: {request.content_length}")
    head = "\r\n".join(lines)
    body = _decode(request.body) if request.body else ""
    return f"{head}\r\n\r\n{body}"


def dump_response(response: requests.Response) -> str:
    """Render the response status line, headers and full body."""
    version = _HTTP_VERSIONS.get(
        getattr(response.raw, "version", 11), "HTTP/1.1"
    )
    lines = [f"{version} {response.status_code} {response.reason or ''}".rstrip()]
    lines.extend(f"{key}: {value}" for key, value in response.headers.items())
    head = "\r\n".join(lines)
    return f"{head}\r\n\r\n{_decode(response.content)}"


def log_request(request: Request, logger: logging.Logger) -> None:
    try:
        dump = dump_request(request)
    except ValueError as exc:
        logger.error("failed to dump http request for logging: %s", exc)
        return
    logger.info("%s", dump)


def log_response(response: requests.Response, logger: logging.Logger) -> None:
    try:
        dump = dump_response(response)
    except (requests.exceptions.RequestException, OSError, ValueError) as exc:
        logger.error("failed to dump http response for logging: %s", exc)
        return
    logger.info("%s", dump)
