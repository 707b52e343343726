"""Tests for wikimedia_client.py — upstream GET and error mapping."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from random_article_backend import config
from random_article_backend.wikimedia_client import WikimediaError, get_json

REQUESTS_GET = "random_article_backend.wikimedia_client.requests.get"
URL = "https://en.wikipedia.org/api/rest_v1/page/random/summary"


def _response(status=200, json_data=None, json_error=None):
    resp = MagicMock()
    resp.status_code = status
    if status >= 400:
        err = requests.HTTPError(f"{status} Error")
        err.response = resp
        resp.raise_for_status.side_effect = err
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = json_data
    return resp


class TestGetJson:
    def test_returns_payload(self):
        with patch(REQUESTS_GET, return_value=_response(json_data={"title": "X"})) as mock_get:
            assert get_json(URL) == {"title": "X"}

        args, kwargs = mock_get.call_args
        assert args == (URL,)
        assert kwargs["headers"]["User-Agent"] == config.WIKIMEDIA_USER_AGENT
        assert kwargs["headers"]["accept"] == "application/json"
        assert kwargs["timeout"] == config.WIKIMEDIA_TIMEOUT

    def test_explicit_timeout(self):
        with patch(REQUESTS_GET, return_value=_response(json_data={})) as mock_get:
            get_json(URL, timeout=3)
        assert mock_get.call_args.kwargs["timeout"] == 3

    def test_http_error_has_status(self):
        with patch(REQUESTS_GET, return_value=_response(status=404)):
            with pytest.raises(WikimediaError) as exc:
                get_json(URL)
        assert exc.value.status_code == 404
        assert exc.value.url == URL

    def test_network_error(self):
        with patch(REQUESTS_GET, side_effect=requests.ConnectionError("refused")):
            with pytest.raises(WikimediaError) as exc:
                get_json(URL)
        assert exc.value.status_code is None

    def test_timeout(self):
        with patch(REQUESTS_GET, side_effect=requests.Timeout("slow")):
            with pytest.raises(WikimediaError):
                get_json(URL)

    def test_invalid_json(self):
        with patch(REQUESTS_GET, return_value=_response(json_error=ValueError("bad json"))):
            with pytest.raises(WikimediaError):
                get_json(URL)

    def test_non_object_json(self):
        with patch(REQUESTS_GET, return_value=_response(json_data=["not", "a", "dict"])):
            with pytest.raises(WikimediaError):
                get_json(URL)
