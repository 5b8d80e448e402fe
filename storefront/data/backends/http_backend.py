from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from ...logging_config import get_logger
from ..errors import ResourceLoadError
from ..interface import DataSource
from .base import ensure_records

logger = get_logger(__name__)


class HttpJsonDataSource(DataSource):
    """
    HTTP implementation for datasets published as static files,
    e.g. `https://example.org/data/orders.json`.

    One AsyncClient is opened per load; no retries.
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def describe(self) -> str:
        return self.base_url

    def url_for(self, name: str) -> str:
        return f"{self.base_url}/{name}.json"

    async def load(self, name: str) -> List[Dict[str, Any]]:
        url = self.url_for(name)
        logger.debug(f"Fetching dataset {name} from {url}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                r = await client.get(url)
                r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ResourceLoadError(name, url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise ResourceLoadError(name, url, str(e) or type(e).__name__) from e
        try:
            payload = r.json()
        except ValueError as e:
            raise ResourceLoadError(name, url, f"invalid JSON: {e}") from e
        return ensure_records(payload, name, url)
