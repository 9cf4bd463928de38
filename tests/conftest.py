import io
from typing import Callable

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from restpipe.networking.request import Request


class TrackingResponse(requests.Response):
    """requests.Response that counts how often it is closed."""

    def __init__(self) -> None:
        super().__init__()
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        super().close()


class FailingBody(io.RawIOBase):
    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        raise OSError("connection reset")


def build_response(
    *,
    status: int = 200,
    body: bytes = b"",
    headers: dict[str, str] | None = None,
    reason: str = "OK",
    url: str = "",
    raw=None,
) -> TrackingResponse:
    response = TrackingResponse()
    response.status_code = status
    response.reason = reason
    response.url = url
    response.encoding = "utf-8"
    response.headers = CaseInsensitiveDict(headers or {})
    response.raw = raw if raw is not None else io.BytesIO(body)
    return response


class FakeTransport:
    """Transport double returning canned responses and recording requests."""

    def __init__(self) -> None:
        self.requests: list[Request] = []
        self.responses: list[requests.Response] = []
        self.error: Exception | None = None
        self.closed = False

    def queue(self, **kwargs) -> TrackingResponse:
        response = build_response(**kwargs)
        self.responses.append(response)
        return response

    def send(self, request: Request) -> requests.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_response() -> Callable[..., TrackingResponse]:
    return build_response


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def failing_body() -> FailingBody:
    return FailingBody()
