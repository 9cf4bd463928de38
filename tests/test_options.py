import base64
import io

import pytest

from restpipe.networking.errors import ConfigurationError
from restpipe.networking.options import (
    with_body_opt,
    with_headers_opt,
    with_query_opt,
)
from restpipe.networking.request import Request


@pytest.fixture
def request_():
    return Request(method="GET", url="http://host/api/v1/groups?old=1&keep=2")


def test_query_option_replaces_existing_query(request_):
    with_query_opt({"id": "test"})(request_)

    assert request_.query == "id=test"
    assert request_.url == "http://host/api/v1/groups?id=test"


def test_query_option_sorts_keys_and_keeps_value_order(request_):
    with_query_opt({"b": ["2", "1"], "a": "x y"})(request_)

    assert request_.query == "a=x+y&b=2&b=1"


def test_query_option_with_empty_values_clears_query(request_):
    with_query_opt({})(request_)

    assert request_.url == "http://host/api/v1/groups"


def test_query_option_rejects_missing_inputs(request_):
    with pytest.raises(ConfigurationError):
        with_query_opt(None)(request_)

    with pytest.raises(ConfigurationError):
        with_query_opt({"id": "x"})(None)


def test_headers_option_replaces_instead_of_merging(request_):
    request_.headers["User-Agent"] = "old"
    request_.headers["X-Old"] = "1"

    with_headers_opt({"Accept": "application/json"})(request_)

    assert dict(request_.headers) == {"Accept": "application/json"}
    assert request_.headers["accept"] == "application/json"


def test_headers_option_copies_input(request_):
    headers = {"X-Test": "1"}
    with_headers_opt(headers)(request_)
    headers["X-Test"] = "2"

    assert request_.headers["X-Test"] == "1"


def test_headers_option_rejects_missing_inputs(request_):
    with pytest.raises(ConfigurationError):
        with_headers_opt(None)(request_)

    with pytest.raises(ConfigurationError):
        with_headers_opt({})(None)


def test_body_option_accepts_bytes_and_text(request_):
    with_body_opt(b"abc")(request_)
    assert request_.body == b"abc"
    assert request_.content_length == 3

    with_body_opt("hé")(request_)
    assert request_.body == "hé".encode("utf-8")
    assert request_.content_length == 3


def test_body_option_materializes_stream_into_rereadable_body(request_):
    with_body_opt(io.BytesIO(b'{"name": "x"}'))(request_)

    first = request_.get_body()
    second = request_.get_body()

    assert first is not second
    assert first.read() == b'{"name": "x"}'
    assert second.read() == b'{"name": "x"}'
    assert request_.content_length == len(b'{"name": "x"}')


def test_get_body_without_body_is_none(request_):
    assert request_.get_body() is None


def test_body_option_surfaces_stream_failures(request_, failing_body):
    with pytest.raises(ConfigurationError) as excinfo:
        with_body_opt(failing_body)(request_)

    assert isinstance(excinfo.value.__cause__, OSError)


def test_body_option_rejects_missing_inputs(request_):
    with pytest.raises(ConfigurationError):
        with_body_opt(None)(request_)

    with pytest.raises(ConfigurationError):
        with_body_opt(b"x")(None)

    with pytest.raises(ConfigurationError):
        with_body_opt(42)(request_)  # type: ignore[arg-type]


def test_set_basic_auth_writes_authorization_header(request_):
    request_.set_basic_auth("user", "secret")

    expected = base64.b64encode(b"user:secret").decode("ascii")
    assert request_.headers["Authorization"] == f"Basic {expected}"
