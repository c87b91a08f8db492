"""CREATE2 address computation utilities (EIP-1014).

CREATE2 allows deterministic contract address generation before deployment.
The address is computed as:
    address = keccak256(0xff ++ sender_address ++ salt ++ keccak256(init_code))[12:]

Reference: https://eips.ethereum.org/EIPS/eip-1014
"""

import rlp

from .constants import ADDRESS_SIZE, CREATE2_PREFIX, HASH_SIZE
from .crypto import keccak256
from .errors import InvalidInput


def _check_length(value: bytes, size: int, label: str) -> None:
    if len(value) != size:
        raise InvalidInput(f"{label} must be {size} bytes, got {len(value)}")


def compute_create2_address_with_code_hash(
    sender: bytes,
    salt: bytes,
    init_code_hash: bytes,
) -> bytes:
    """
    Compute CREATE2 address with pre-computed init_code hash.

    This is the form the vanity search uses: the init code is hashed once
    and only the salt changes between candidates.

    Args:
        sender: 20-byte deployer (factory) address
        salt: 32-byte salt value
        init_code_hash: 32-byte keccak256 hash of init_code

    Returns:
        20-byte predicted contract address

    Raises:
        InvalidInput: If any argument has the wrong length

    Example:
        >>> sender = bytes(20)
        >>> salt = bytes(32)
        >>> addr = compute_create2_address_with_code_hash(sender, salt, keccak256(b"\\x00"))
        >>> addr.hex()
        '4d1a2e2bb4f88f0250f26ffff098b0b30b26bf38'
    """
    _check_length(sender, ADDRESS_SIZE, "Sender")
    _check_length(salt, HASH_SIZE, "Salt")
    _check_length(init_code_hash, HASH_SIZE, "Init code hash")

    preimage = CREATE2_PREFIX + sender + salt + init_code_hash
    return keccak256(preimage)[12:]


def compute_create2_address(
    sender: bytes,
    salt: bytes,
    init_code: bytes,
) -> bytes:
    """
    Compute CREATE2 contract address from the full init code.

    Args:
        sender: 20-byte deployer address
        salt: 32-byte salt value (can be any 32 bytes)
        init_code: Contract initialization code (bytecode plus encoded
            constructor arguments)

    Returns:
        20-byte predicted contract address (before deployment)

    Raises:
        InvalidInput: If sender is not 20 bytes or salt is not 32 bytes

    Note:
        The init_code includes the constructor arguments, so different
        arguments produce different addresses.
    """
    return compute_create2_address_with_code_hash(sender, salt, keccak256(init_code))


def compute_create_address(sender: bytes, nonce: int) -> bytes:
    """
    Compute CREATE (nonce-based) contract address.

    The contract address is the last 20 bytes of:
        keccak256(rlp([sender, nonce]))
    """
    _check_length(sender, ADDRESS_SIZE, "Sender")
    if nonce < 0:
        raise InvalidInput(f"Nonce must be non-negative, got {nonce}")

    encoded = rlp.encode([sender, nonce])
    return keccak256(encoded)[12:]
