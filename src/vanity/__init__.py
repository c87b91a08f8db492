"""CREATE2 vanity salt search and deterministic deployment."""

from .core import (
    DeploymentMismatch,
    InvalidInput,
    SearchExhausted,
    SearchResult,
    VanityError,
    VerificationFailed,
    compute_create2_address,
    compute_create2_address_with_code_hash,
    keccak256,
)
from .search import (
    find_vanity_salt,
    find_vanity_salt_parallel,
    generate_salt,
    require_vanity_salt,
)

__all__ = [
    "DeploymentMismatch",
    "InvalidInput",
    "SearchExhausted",
    "SearchResult",
    "VanityError",
    "VerificationFailed",
    "compute_create2_address",
    "compute_create2_address_with_code_hash",
    "keccak256",
    "find_vanity_salt",
    "find_vanity_salt_parallel",
    "generate_salt",
    "require_vanity_salt",
]
