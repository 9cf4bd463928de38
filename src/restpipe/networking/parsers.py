"""Pluggable response body parsers.

A parser receives an accepted response and returns the decoded value. Input
checks happen when the parser runs, which is after the request has already
been dispatched.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

import requests

from .debug import log_response
from .errors import ConfigurationError

T = TypeVar("T")

ResponseParser = Callable[[requests.Response], Any]


def _read_failure(exc: Exception) -> ConfigurationError:
    return ConfigurationError(f"failed to read resp body: {exc}")


def json_parser(
    target: Callable[[Any], T] | None,
) -> Callable[[requests.Response], T]:
    """Decode the body as JSON and convert it with ``target``.

    ``target`` is any callable taking the decoded document, e.g. ``list``,
    ``dict`` or a model's ``from_dict``. Decoding and conversion errors are
    raised unchanged.
    """

    def parse(response: requests.Response | None) -> T:
        if response is None or target is None:
            raise ConfigurationError(
                f"json_parser function error: {response!r} | {target!r}"
            )
        return target(response.json())

    return parse


def raw_string_parser() -> Callable[[requests.Response], str]:
    """Return the whole body as text."""

    def parse(response: requests.Response | None) -> str:
        if response is None:
            raise ConfigurationError(
                f"raw_string_parser function error: {response!r}"
            )
        try:
            return response.text
        except (requests.exceptions.RequestException, OSError) as exc:
            raise _read_failure(exc) from exc

    return parse


def raw_bytes_parser() -> Callable[[requests.Response], bytes]:
    """Return the whole body as bytes."""

    def parse(response: requests.Response | None) -> bytes:
        if response is None:
            raise ConfigurationError(
                f"raw_bytes_parser function error: {response!r}"
            )
        try:
            return response.content
        except (requests.exceptions.RequestException, OSError) as exc:
            raise _read_failure(exc) from exc

    return parse


def content_length(response: requests.Response) -> int:
    """Return the declared Content-Length, or -1 when unknown."""
    value = response.headers.get("Content-Length")
    if value is None:
        return -1
    try:
        return int(value)
    except ValueError:
        return -1


def no_body_parser(
    logger: logging.Logger | None,
) -> Callable[[requests.Response], None]:
    """Ignore the body; dump it to ``logger`` if the server sent one anyway."""

    def parse(response: requests.Response | None) -> None:
        if response is None:
            raise ConfigurationError(
                f"no_body_parser function error: {response!r}"
            )
        if content_length(response) != 0 and logger is not None:
            log_response(response, logger)

    return parse
