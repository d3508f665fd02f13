"""Tests for the HTTP preset store client."""

import asyncio
from unittest.mock import Mock

import pytest
import requests

from adgen.adapters.http_store import HttpConfigurationStore
from adgen.configuration import PersistedConfiguration
from adgen.core.errors import StoreNetworkError, StoreResponseError


def _response(status_code: int, payload=None, text: str | None = None) -> Mock:
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    if payload is not None:
        response.json.return_value = payload
        response.content = b"{}"
        response.text = "{}"
    else:
        response.json.side_effect = ValueError("no json")
        response.content = (text or "").encode()
        response.text = text or ""
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} error"
        )
    else:
        response.raise_for_status.return_value = None
    return response


RECORD = {
    "id": "7",
    "name": "mobile",
    "placement_count": 2,
    "width": 320,
    "height": 50,
    "overrides": {"bidfloor": "0.5"},
}


class TestHttpConfigurationStore:
    """Tests for HttpConfigurationStore."""

    @pytest.fixture
    def session(self):
        session = Mock(spec=requests.Session)
        session.headers = {}
        return session

    @pytest.fixture
    def store(self, session):
        return HttpConfigurationStore("https://adgen.example/api", session=session)

    def test_create_posts_payload(self, store, session):
        session.request.return_value = _response(201, RECORD)
        record = PersistedConfiguration(
            name="mobile",
            placement_count=2,
            width=320,
            height=50,
            overrides={"bidfloor": "0.5"},
        )

        stored = asyncio.run(store.create(record))

        assert stored.id == "7"
        method, url = session.request.call_args.args
        assert method == "POST"
        assert url == "https://adgen.example/api/configurations"
        assert session.request.call_args.kwargs["json"] == {
            "name": "mobile",
            "placement_count": 2,
            "width": 320,
            "height": 50,
            "overrides": {"bidfloor": "0.5"},
        }

    def test_list(self, store, session):
        session.request.return_value = _response(200, [RECORD, {**RECORD, "name": "b"}])

        presets = asyncio.run(store.list())

        assert [p.name for p in presets] == ["mobile", "b"]

    def test_list_rejects_non_list(self, store, session):
        session.request.return_value = _response(200, {"presets": []})

        with pytest.raises(StoreResponseError, match="Expected a list"):
            asyncio.run(store.list())

    def test_get_quotes_name(self, store, session):
        session.request.return_value = _response(200, RECORD)

        asyncio.run(store.get("my preset/1"))

        _, url = session.request.call_args.args
        assert url == "https://adgen.example/api/configurations/my%20preset%2F1"

    def test_get_not_found_is_none(self, store, session):
        session.request.return_value = _response(404, {"message": "Not found"})

        assert asyncio.run(store.get("missing")) is None

    def test_http_error_raises_response_error(self, store, session):
        session.request.return_value = _response(500, {"message": "boom"})

        with pytest.raises(StoreResponseError) as exc_info:
            asyncio.run(store.list())

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "boom"

    def test_invalid_json_raises_response_error(self, store, session):
        session.request.return_value = _response(200, text="<html>")

        with pytest.raises(StoreResponseError, match="invalid JSON"):
            asyncio.run(store.list())

    def test_unexpected_payload(self, store, session):
        session.request.return_value = _response(200, {"name": "x"})

        with pytest.raises(StoreResponseError, match="Unexpected preset payload"):
            asyncio.run(store.get("x"))

    def test_network_error(self, store, session):
        session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(StoreNetworkError, match="Network error"):
            asyncio.run(store.list())

    def test_timeout_passed(self, session):
        store = HttpConfigurationStore("https://adgen.example/api/", timeout=2.5, session=session)
        session.request.return_value = _response(200, [])

        asyncio.run(store.list())

        assert session.request.call_args.kwargs["timeout"] == 2.5
