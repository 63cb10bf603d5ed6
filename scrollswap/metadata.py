"""Unifra enhanced-API queries: transfers, token metadata, balances, allowances.

Each query posts a JSON-RPC style body to an endpoint path named after the
method. Inputs are passed through unvalidated; the remote service enforces
them.
"""

from typing import Any, Mapping, Optional, Sequence

import httpx

from .logger import get_logger
from .models import RpcRequest

log = get_logger(__name__)

GET_ASSET_TRANSFERS = "unifra_getAssetTransfers"
GET_TOKEN_METADATA = "unifra_getTokenMetadata"
GET_TOKEN_BALANCES = "unifra_getTokenBalances"
GET_TOKEN_ALLOWANCE = "unifra_getTokenAllowance"


class MetadataClient:
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

    async def _call(self, request: RpcRequest) -> Any:
        url = f"{self.base_url}/{request.method}"
        response = await self._http.post(url, json=request.as_json(), headers=self.headers)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            log.warning(
                "[METADATA] %s failed: status=%s body=%s",
                request.method,
                exc.response.status_code,
                exc.response.text,
            )
            raise
        return response.json()

    async def get_asset_transfers(self, address: str) -> Any:
        data = await self._call(RpcRequest(GET_ASSET_TRANSFERS, (address,)))
        log.info("[METADATA] Transfers: %s", data)
        return data

    async def get_token_metadata(self, token_address: str) -> Any:
        data = await self._call(RpcRequest(GET_TOKEN_METADATA, (token_address,)))
        log.info("[METADATA] Token metadata: %s", data)
        return data

    async def get_token_balances(self, address: str, token_addresses: Sequence[str]) -> Any:
        data = await self._call(
            RpcRequest(GET_TOKEN_BALANCES, (address, list(token_addresses)))
        )
        log.info("[METADATA] Token balances: %s", data)
        return data

    async def get_token_allowance(self, owner: str, spender: str, token_address: str) -> Any:
        data = await self._call(
            RpcRequest(GET_TOKEN_ALLOWANCE, (owner, spender, token_address))
        )
        log.info("[METADATA] Token allowance: %s", data)
        return data

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "MetadataClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
