"""Value types shared by derivation, search and deployment."""

import re
from dataclasses import dataclass
from typing import Union

from eth_utils import remove_0x_prefix, to_checksum_address

from .constants import ADDRESS_SIZE, HASH_SIZE
from .errors import InvalidInput

BytesLike = Union[bytes, str]

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


def _fixed_bytes(value: BytesLike, size: int, label: str) -> bytes:
    if isinstance(value, str):
        digits = remove_0x_prefix(value)
        if not _HEX_DIGITS.fullmatch(digits) or len(digits) % 2:
            raise InvalidInput(f"{label} is not valid hex: {value!r}")
        value = bytes.fromhex(digits)
    elif isinstance(value, (bytearray, memoryview)):
        value = bytes(value)
    elif not isinstance(value, bytes):
        raise InvalidInput(f"{label} must be bytes or hex string, got {type(value).__name__}")
    if len(value) != size:
        raise InvalidInput(f"{label} must be {size} bytes, got {len(value)}")
    return value


def to_address(value: BytesLike) -> bytes:
    """Normalize a 20-byte address given as bytes or hex."""
    return _fixed_bytes(value, ADDRESS_SIZE, "Address")


def to_hash32(value: BytesLike) -> bytes:
    """Normalize a 32-byte hash or salt given as bytes or hex."""
    return _fixed_bytes(value, HASH_SIZE, "Hash")


def to_hex(value: bytes) -> str:
    return "0x" + value.hex()


def normalize_prefix(prefix: str) -> str:
    """
    Lowercase a vanity prefix and drop an optional 0x marker.

    The empty prefix is accepted and matches every address.

    Raises:
        InvalidInput: If the prefix has non-hex characters or is longer
            than an address
    """
    if not isinstance(prefix, str):
        raise InvalidInput(f"Prefix must be a string, got {type(prefix).__name__}")
    digits = remove_0x_prefix(prefix.lower())
    if not _HEX_DIGITS.fullmatch(digits):
        raise InvalidInput(f"Prefix must contain only hex digits: {prefix!r}")
    if len(digits) > ADDRESS_SIZE * 2:
        raise InvalidInput(
            f"Prefix must be at most {ADDRESS_SIZE * 2} hex digits, got {len(digits)}"
        )
    return digits


@dataclass(frozen=True)
class SearchResult:
    salt: bytes
    address: bytes
    # Counter value the salt was generated from
    index: int

    @property
    def salt_hex(self) -> str:
        return to_hex(self.salt)

    @property
    def address_hex(self) -> str:
        return to_hex(self.address)

    @property
    def checksum_address(self) -> str:
        return to_checksum_address(self.address)
