# pyright: reportUnknownParameterType=false, reportUnknownMemberType=false
from unittest.mock import patch

from restpipe.networking.client import new_client
from restpipe.networking.errors import StatusCodeError


def test_get_404_is_err_result_with_status_metadata(make_response):
    client = new_client("http://example.com")

    with patch("requests.Session.send") as mock_send:
        mock_send.return_value = make_response(
            body=b"not found",
            status=404,
            reason="Not Found",
            url="http://example.com/missing",
        )
        result = client.do_request_string("GET", "/missing")

    assert not result.ok
    assert isinstance(result.error, StatusCodeError)
    assert result.error.http_status_code() == 404
    assert result.error.body == "not found"
    assert result.meta["status_code"] == 404
    assert result.meta["reason"] == "Not Found"
    assert result.meta["url"] == "http://example.com/missing"


def test_get_500_is_err_result_with_status_metadata(make_response):
    client = new_client("http://example.com")

    with patch("requests.Session.send") as mock_send:
        mock_send.return_value = make_response(
            body=b"server error",
            status=500,
            reason="Internal Server Error",
        )
        result = client.do_request_string("GET", "/error")

    assert not result.ok
    assert result.error.body == "server error"
    assert result.meta["status_code"] == 500
    assert result.meta["reason"] == "Internal Server Error"


def test_300_is_accepted(make_response):
    client = new_client("http://example.com")

    with patch("requests.Session.send") as mock_send:
        mock_send.return_value = make_response(
            body=b"choices",
            status=300,
            reason="Multiple Choices",
        )
        result = client.do_request_string("GET", "/choices")

    assert result.ok
    assert result.value == "choices"
    assert result.meta["status_code"] == 300


def test_301_is_rejected(make_response):
    client = new_client("http://example.com")

    with patch("requests.Session.send") as mock_send:
        mock_send.return_value = make_response(
            body=b"",
            status=301,
            reason="Moved Permanently",
        )
        result = client.get("/moved")

    assert not result.ok
    assert result.error.http_status_code() == 301
    assert result.error.body == ""
