from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from .config import GOOGLE_SEARCH_URL, Settings, get_settings
from .errors import SearchConfigurationError, SearchError


logger = logging.getLogger(__name__)


def _provider_error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        message = payload["error"].get("message")
        if message:
            return str(message)
    return f"Search provider returned HTTP {response.status_code}"


class GoogleSearchClient:
    """Google Custom Search JSON API, one GET per query."""

    def __init__(
        self,
        api_key: Optional[str],
        engine_id: Optional[str],
        endpoint: str = GOOGLE_SEARCH_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.engine_id = engine_id
        self.endpoint = endpoint
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "GoogleSearchClient":
        return cls(
            api_key=settings.google_api_key,
            engine_id=settings.google_search_engine_id,
            endpoint=settings.google_search_url,
            timeout=settings.search_timeout_seconds,
        )

    async def search(self, query: str) -> Dict[str, Any]:
        if not self.api_key or not self.engine_id:
            raise SearchConfigurationError("Google API credentials not configured")

        params = {"key": self.api_key, "cx": self.engine_id, "q": query}
        logger.info("Searching for %r", query)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.endpoint, params=params)
        except httpx.HTTPError as exc:
            raise SearchError(f"Search provider unreachable: {exc}") from exc

        if response.is_error:
            raise SearchError(_provider_error_message(response))

        try:
            payload = response.json()
        except ValueError as exc:
            raise SearchError(f"Search provider returned invalid JSON: {exc}") from exc

        if not isinstance(payload, dict):
            raise SearchError("Search provider returned an unexpected payload")
        return payload


def get_search_client() -> GoogleSearchClient:
    return GoogleSearchClient.from_settings(get_settings())
