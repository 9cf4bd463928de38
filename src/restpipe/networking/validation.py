"""Default response acceptability policy."""

from __future__ import annotations

from typing import Callable

import requests

from .errors import ResponseReadError, StatusCodeError

ResponseValidator = Callable[[requests.Response], None]

# Responses with a status strictly above this value are rejected; 300 itself
# is accepted.
MAX_ACCEPTED_STATUS = 300


def response_validator(response: requests.Response) -> None:
    """Reject responses whose status code is above 300.

    Raises:
        StatusCodeError: carrying the code, status line and full body text.
        ResponseReadError: when the body of a rejected response cannot be read.
    """
    if response.status_code <= MAX_ACCEPTED_STATUS:
        return

    try:
        body = response.text
    except (requests.exceptions.RequestException, OSError, RuntimeError) as exc:
        raise ResponseReadError(f"failed to read response body: {exc}") from exc

    raise StatusCodeError(
        code=response.status_code,
        status=_status_line(response),
        body=body,
    )


def _status_line(response: requests.Response) -> str:
    if response.reason:
        return f"{response.status_code} {response.reason}"
    return str(response.status_code)
