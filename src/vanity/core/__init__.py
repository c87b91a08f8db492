"""Core types, hashing and address derivation."""

from .constants import ADDRESS_SIZE, HASH_SIZE, CREATE2_PREFIX, ZERO_ADDRESS
from .crypto import keccak256
from .errors import (
    VanityError,
    InvalidInput,
    SearchExhausted,
    DeploymentMismatch,
    VerificationFailed,
)
from .types import SearchResult, to_address, to_hash32, to_hex, normalize_prefix
from .create2 import (
    compute_create2_address,
    compute_create2_address_with_code_hash,
    compute_create_address,
)

__all__ = [
    "ADDRESS_SIZE",
    "HASH_SIZE",
    "CREATE2_PREFIX",
    "ZERO_ADDRESS",
    "keccak256",
    "VanityError",
    "InvalidInput",
    "SearchExhausted",
    "DeploymentMismatch",
    "VerificationFailed",
    "SearchResult",
    "to_address",
    "to_hash32",
    "to_hex",
    "normalize_prefix",
    "compute_create2_address",
    "compute_create2_address_with_code_hash",
    "compute_create_address",
]
