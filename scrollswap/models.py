"""Strongly-typed value objects for swap requests and responses."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .abi import ERC20_ABI, WETH_ABI
from .types import BytesLike, ChecksumAddress, as_address

JSONRPC_VERSION = "2.0"


@dataclass(frozen=True)
class Token:
    """On-chain token descriptor: address plus interface definition."""

    address: ChecksumAddress
    abi: tuple = field(repr=False)
    symbol: str = ""
    decimals: int = 18

    def validate(self) -> None:
        if self.decimals < 0:
            raise ValueError("token.decimals must be >= 0")
        if not self.abi:
            raise ValueError("token.abi must not be empty")

    @classmethod
    def create(
        cls,
        address: BytesLike,
        abi: list,
        symbol: str = "",
        decimals: int = 18,
    ) -> "Token":
        """Create a Token with automatic address checksumming."""
        token = cls(
            address=as_address(address),
            abi=tuple(abi),
            symbol=symbol,
            decimals=decimals,
        )
        token.validate()
        return token


WETH = Token.create(
    "0x5300000000000000000000000000000000000004", WETH_ABI, symbol="WETH"
)
WSTETH = Token.create(
    "0x2DAf22Caf40404ad8ff0Ab1E77F9C08Fef3953e2", ERC20_ABI, symbol="wstETH"
)


@dataclass(frozen=True)
class PriceQuery:
    """Parameters of a Permit2 price request."""

    chain_id: int
    sell_token: ChecksumAddress
    buy_token: ChecksumAddress
    sell_amount: int
    taker: ChecksumAddress

    def validate(self) -> None:
        if self.chain_id <= 0:
            raise ValueError("chain_id must be > 0")
        if self.sell_amount <= 0:
            raise ValueError("sell_amount must be > 0")
        if not self.sell_token or not self.buy_token:
            raise ValueError("sell_token and buy_token are required")
        if not self.taker:
            raise ValueError("taker is required")

    def as_params(self) -> dict[str, str]:
        return {
            "chainId": str(self.chain_id),
            "sellToken": self.sell_token,
            "buyToken": self.buy_token,
            "sellAmount": str(self.sell_amount),
            "taker": self.taker,
        }


@dataclass(frozen=True)
class PriceQuote:
    """Price response. Only the allowance issue is interpreted."""

    payload: Mapping[str, Any]

    @property
    def has_allowance_issue(self) -> bool:
        """True unless the response reports `issues.allowance` as null (or has no issues)."""
        issues = self.payload.get("issues")
        if not isinstance(issues, Mapping):
            return False
        return issues.get("allowance", {}) is not None

    @property
    def allowance_spender(self) -> Optional[str]:
        """Spender that still needs an allowance, or None if none is required."""
        issues = self.payload.get("issues")
        if not isinstance(issues, Mapping):
            return None
        allowance = issues.get("allowance")
        if not isinstance(allowance, Mapping):
            return None
        return allowance.get("spender") or None

    @classmethod
    def from_json(cls, data: Any) -> "PriceQuote":
        if not isinstance(data, Mapping):
            raise ValueError(f"price response must be a JSON object, got {type(data).__name__}")
        return cls(payload=data)


@dataclass(frozen=True)
class RpcRequest:
    """JSON-RPC style body posted to a method-named endpoint path."""

    method: str
    params: tuple
    id: int = 1

    def as_json(self) -> dict:
        return {
            "params": list(self.params),
            "jsonrpc": JSONRPC_VERSION,
            "id": self.id,
        }
