"""Read and write clients bound to Scroll Sepolia over one HTTP transport."""

from typing import Any, Sequence

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import AsyncHTTPProvider, AsyncWeb3

from .logger import get_logger
from .models import Token
from .types import ChecksumAddress, HexStr, as_private_key, as_tx_hash

log = get_logger(__name__)

SCROLL_SEPOLIA_CHAIN_ID = 534351

RECEIPT_TIMEOUT = 120


def create_public_client(transport_url: str) -> AsyncWeb3:
    """Return a read-only web3 client for the configured transport."""
    return AsyncWeb3(AsyncHTTPProvider(transport_url))


class WalletClient:
    """Signing client: one local account plus a web3 client on the same transport.

    Transactions are signed locally and submitted as raw transactions, so the
    node never needs to manage the key.
    """

    def __init__(
        self,
        account: LocalAccount,
        w3: AsyncWeb3,
        chain_id: int = SCROLL_SEPOLIA_CHAIN_ID,
    ):
        self.account = account
        self.w3 = w3
        self.chain_id = chain_id

    @property
    def address(self) -> ChecksumAddress:
        return ChecksumAddress(self.account.address)

    async def write_contract(
        self,
        token: Token,
        function_name: str,
        args: Sequence[Any],
    ) -> HexStr:
        """Build, sign and send a state-changing contract call.

        Args:
            token: Contract to call
            function_name: ABI function name (e.g. "approve")
            args: Positional call arguments

        Returns:
            Transaction hash as 0x-prefixed hex
        """
        contract = self.w3.eth.contract(address=token.address, abi=list(token.abi))
        call = contract.functions[function_name](*args)
        nonce = await self.w3.eth.get_transaction_count(self.address)
        tx = await call.build_transaction(
            {
                "chainId": self.chain_id,
                "from": self.address,
                "nonce": nonce,
            }
        )
        signed = self.account.sign_transaction(tx)
        tx_hash = await self.w3.eth.send_raw_transaction(signed.raw_transaction)
        log.debug(
            "[CHAIN][WRITE] %s.%s nonce=%s hash=%s",
            token.symbol or token.address,
            function_name,
            nonce,
            as_tx_hash(tx_hash),
        )
        return as_tx_hash(tx_hash)

    async def wait_for_transaction_receipt(
        self,
        tx_hash: HexStr,
        timeout: float = RECEIPT_TIMEOUT,
    ):
        """Block until the transaction is mined and return its receipt."""
        return await self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)


def create_wallet_client(
    private_key: str,
    transport_url: str,
    chain_id: int = SCROLL_SEPOLIA_CHAIN_ID,
) -> WalletClient:
    """Derive the signing account from the key and bind it to the transport."""
    account = Account.from_key(as_private_key(private_key))
    return WalletClient(account, create_public_client(transport_url), chain_id)
