"""Pytest configuration and shared fixtures for all tests."""

import pytest

from vanity.config import SearchConfig
from vanity.core.create2 import compute_create2_address_with_code_hash
from vanity.search.salts import generate_salt

from tests.fixtures.addresses import DEADBEEF_ADDRESS, E2E_DEPLOYER
from tests.fixtures.contracts import SIMPLE_INIT_CODE_HASH, FakeDeployClient


# =============================================================================
# Search Inputs
# =============================================================================

@pytest.fixture
def deployer():
    """Factory address used by most search tests."""
    return DEADBEEF_ADDRESS


@pytest.fixture
def e2e_deployer():
    """Deployer 0x00...01."""
    return E2E_DEPLOYER


@pytest.fixture
def init_code_hash():
    """keccak256 of the simple storage init code."""
    return SIMPLE_INIT_CODE_HASH


@pytest.fixture
def brute_force():
    """Reference search: first counter in [start, stop) whose address has the prefix."""
    def _brute_force(deployer, init_code_hash, prefix, stop, start=0):
        for i in range(start, stop):
            address = compute_create2_address_with_code_hash(
                deployer, generate_salt(i), init_code_hash
            )
            if address.hex().startswith(prefix.lower()):
                return i, address
        return None
    return _brute_force


# =============================================================================
# Deployment Fixtures
# =============================================================================

@pytest.fixture
def fake_client():
    """In-memory deploy client returning real CREATE/CREATE2 addresses."""
    return FakeDeployClient()


@pytest.fixture
def small_search_config():
    """Budget large enough for one- and two-digit prefixes."""
    return SearchConfig(max_iterations=50_000, progress_interval=1_000)
