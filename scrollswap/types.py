"""Type definitions and coercion helpers for addresses and hex values.

These converters are designed to be used from dataclass ``create``
classmethods and client call sites.
"""

from typing import NewType, Union

from eth_utils import to_bytes, to_checksum_address

ChecksumAddress = NewType("ChecksumAddress", str)
HexStr = NewType("HexStr", str)

BytesLike = Union[bytes, str]


def as_bytes(value: BytesLike) -> bytes:
    """Convert hex string, bytes, bytearray, or memoryview to bytes."""
    if isinstance(value, str):
        if value == "" or value == "0x":
            return b""
        return to_bytes(hexstr=value)
    return bytes(value)


def as_address(value: BytesLike) -> ChecksumAddress:
    """Convert hex string or bytes to a validated, checksummed 20-byte address."""
    b = as_bytes(value)
    if len(b) != 20:
        raise ValueError(f"address must be 20 bytes, got {len(b)}")
    return ChecksumAddress(to_checksum_address(b))


def as_private_key(value: str) -> HexStr:
    """Normalize a private key to a 0x-prefixed 32-byte hex string.

    Keys stored without the prefix are accepted.
    """
    key = value.strip()
    if not key.startswith(("0x", "0X")):
        key = "0x" + key
    b = to_bytes(hexstr=key)
    if len(b) != 32:
        raise ValueError(f"private key must be 32 bytes, got {len(b)}")
    return HexStr("0x" + b.hex())


def as_tx_hash(value: BytesLike) -> HexStr:
    """Render a transaction hash as a 0x-prefixed hex string."""
    b = as_bytes(value)
    if len(b) != 32:
        raise ValueError(f"transaction hash must be 32 bytes, got {len(b)}")
    return HexStr("0x" + b.hex())
