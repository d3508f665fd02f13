"""Preset store client for the REST backend of the ad generator."""

from __future__ import annotations

import asyncio
import builtins
from typing import Any
from urllib.parse import quote, urljoin

import requests
from pydantic import ValidationError

from adgen.configuration.models import PersistedConfiguration
from adgen.core.errors import StoreNetworkError, StoreResponseError
from adgen.core.structlog_logger import StructlogMixin


DEFAULT_TIMEOUT = 10.0


class HttpConfigurationStore(StructlogMixin):
    """Talks to ``{api_url}configurations`` over HTTP.

    Requests are blocking ``requests`` calls moved off the event loop with
    ``asyncio.to_thread``.
    """

    def __init__(
        self,
        api_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        super().__init__()
        self.api_url = api_url if api_url.endswith("/") else f"{api_url}/"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {"accept": "application/json", "content-type": "application/json"}
        )

    def _get_full_url(self, endpoint: str) -> str:
        return urljoin(self.api_url, endpoint)

    def _handle_response(self, response: requests.Response) -> Any:
        """Decode a JSON body or raise the matching StoreError."""

        def safe_json_parse(resp: requests.Response) -> Any:
            if not resp.content:
                return None
            try:
                return resp.json()
            except ValueError:
                return None

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            data = safe_json_parse(response)
            message = data.get("message") if isinstance(data, dict) else None
            raise StoreResponseError(
                message or f"Preset request failed: {e}",
                status_code=response.status_code,
                response_data=data,
            ) from e

        try:
            return response.json()
        except ValueError as e:
            content_preview = response.text[:200] if response.text else "(empty)"
            raise StoreResponseError(
                "Server returned invalid JSON response",
                status_code=response.status_code,
                context={"content_preview": content_preview},
            ) from e

    def _request(self, method: str, endpoint: str, **kwargs: Any) -> requests.Response:
        url = self._get_full_url(endpoint)
        self.logger.debug("preset_request", method=method, url=url)
        try:
            return self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise StoreNetworkError(f"Network error: {e}", {"url": url}) from e

    def _parse_record(self, data: Any) -> PersistedConfiguration:
        try:
            return PersistedConfiguration.model_validate(data)
        except ValidationError as e:
            raise StoreResponseError(
                f"Unexpected preset payload: {e.errors()[0]['msg']}",
                response_data=data,
            ) from e

    def _create(self, record: PersistedConfiguration) -> PersistedConfiguration:
        payload = record.model_dump(mode="json", exclude_none=True)
        response = self._request("POST", "configurations", json=payload)
        stored = self._parse_record(self._handle_response(response))
        self.logger.info("preset_saved", name=stored.name, id=stored.id)
        return stored

    def _list(self) -> builtins.list[PersistedConfiguration]:
        data = self._handle_response(self._request("GET", "configurations"))
        if not isinstance(data, builtins.list):
            raise StoreResponseError(
                "Expected a list of presets", response_data=data
            )
        return [self._parse_record(item) for item in data]

    def _get(self, name_or_id: str) -> PersistedConfiguration | None:
        response = self._request(
            "GET", f"configurations/{quote(name_or_id, safe='')}"
        )
        if response.status_code == 404:
            return None
        return self._parse_record(self._handle_response(response))

    async def create(self, record: PersistedConfiguration) -> PersistedConfiguration:
        return await asyncio.to_thread(self._create, record)

    async def get(self, name_or_id: str) -> PersistedConfiguration | None:
        return await asyncio.to_thread(self._get, name_or_id)

    async def list(self) -> builtins.list[PersistedConfiguration]:
        return await asyncio.to_thread(self._list)
