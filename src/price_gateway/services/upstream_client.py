"""
Upstream Client - the only place that talks to the PrintFactory ordering service.

Two calls:
- GET the driver list
- POST a product/quantity list and get raw subscription quotes back

No retries and no caching; any failure becomes an UpstreamError.
"""
import logging
from typing import Any, Mapping, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from ..config.settings import Settings
from ..errors import UpstreamError
from ..engine.models import Driver, PricesResponse

logger = logging.getLogger(__name__)

_drivers_adapter = TypeAdapter(list[Driver])


def build_prices_payload(products: Mapping[str, int]) -> dict[str, Any]:
    """Request body for the vendor price call. Products go out as [code, qty] pairs."""
    return {
        "Product": "PrintFactory",
        "Currency": "EUR",
        "Products": [[code, qty] for code, qty in products.items()],
        "Country": "",
        "Dealer": None,
    }


class UpstreamClient:
    """Async client for the vendor driver list and price endpoints."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        # Vendor .asp endpoints may answer with redirects
        self._client = httpx.AsyncClient(transport=transport, follow_redirects=True)

    async def aclose(self):
        await self._client.aclose()

    async def _request_json(self, method: str, url: str, **kwargs) -> Any:
        """Send a request and decode the JSON body, mapping every failure to UpstreamError."""
        try:
            logger.info(f"{method} {url}")
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            data = response.json()
            logger.debug(f"Upstream answered {response.status_code} ({len(response.content)} bytes)")
            return data
        except httpx.HTTPStatusError as e:
            logger.error(f"Upstream returned {e.response.status_code} for {url}")
            raise UpstreamError(f"upstream returned status {e.response.status_code} for {url}") from e
        except httpx.RequestError as e:
            logger.error(f"Request error connecting to upstream: {e}")
            raise UpstreamError(f"error sending request for url ({url}): {e}") from e
        except ValueError as e:
            logger.error(f"Upstream sent a body that is not JSON: {e}")
            raise UpstreamError(f"invalid JSON from upstream: {e}") from e

    async def fetch_drivers(self) -> list[Driver]:
        """Fetch the current driver list."""
        data = await self._request_json("GET", self.settings.drivers_url)
        try:
            return _drivers_adapter.validate_python(data)
        except ValidationError as e:
            logger.error("Driver list did not match the expected shape")
            raise UpstreamError(f"unexpected driver list shape: {e}") from e

    async def fetch_raw_prices(self, products: Mapping[str, int]) -> Any:
        """POST the product list and return the decoded, unvalidated response body."""
        payload = build_prices_payload(products)
        logger.debug(f"Price request payload: {payload}")
        return await self._request_json("POST", self.settings.prices_url, json=payload)

    async def fetch_prices(self, products: Mapping[str, int]) -> PricesResponse:
        """Fetch and validate raw price quotes."""
        data = await self.fetch_raw_prices(products)
        try:
            return PricesResponse.model_validate(data)
        except ValidationError as e:
            logger.error("Price response did not match the expected shape")
            raise UpstreamError(f"unexpected price response shape: {e}") from e
