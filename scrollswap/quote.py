"""Client for the Permit2 swap price endpoint."""

from typing import Mapping, Optional

import httpx

from .logger import get_logger
from .models import PriceQuery, PriceQuote

log = get_logger(__name__)

PRICE_PATH = "/swap/permit2/price"


class QuoteClient:
    """Authenticated GET requests against the quote API."""

    def __init__(
        self,
        base_url: str,
        headers: Mapping[str, str],
        http: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = dict(headers)
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient()

    async def get_price(self, query: PriceQuery) -> PriceQuote:
        """Fetch an indicative price for selling ``query.sell_amount``.

        Raises:
            ValueError: If the query is invalid or the body is not a JSON object
            httpx.HTTPStatusError: On non-2xx responses
        """
        query.validate()
        url = f"{self.base_url}{PRICE_PATH}"
        log.debug("[QUOTE][PRICE][REQUEST] %s", query.as_params())
        try:
            response = await self._http.get(url, params=query.as_params(), headers=self.headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            log.warning(
                "[QUOTE][PRICE] GET failed: status=%s body=%s",
                exc.response.status_code,
                exc.response.text,
            )
            raise
        return PriceQuote.from_json(response.json())

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "QuoteClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
