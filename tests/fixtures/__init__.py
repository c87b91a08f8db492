"""Test fixtures for address derivation and vanity search tests."""

from .addresses import (
    ZERO_ADDRESS,
    DEADBEEF_ADDRESS,
    LOW_DEADBEEF_ADDRESS,
    E2E_DEPLOYER,
    DEPLOYER_ADDRESS,
    CREATE2_VECTORS,
    CREATE_VECTORS,
)
from .contracts import (
    SIMPLE_INIT_CODE,
    SIMPLE_INIT_CODE_HASH,
    PROXY_BYTECODE,
    CONTRACT_BYTECODES,
    FakeDeployClient,
)

__all__ = [
    # Addresses
    "ZERO_ADDRESS",
    "DEADBEEF_ADDRESS",
    "LOW_DEADBEEF_ADDRESS",
    "E2E_DEPLOYER",
    "DEPLOYER_ADDRESS",
    "CREATE2_VECTORS",
    "CREATE_VECTORS",
    # Contracts
    "SIMPLE_INIT_CODE",
    "SIMPLE_INIT_CODE_HASH",
    "PROXY_BYTECODE",
    "CONTRACT_BYTECODES",
    "FakeDeployClient",
]
