"""Interface to the chain client that actually sends deployment transactions."""

from __future__ import annotations

from abc import ABC, abstractmethod


class DeployClient(ABC):
    """
    Blocking deployment backend.

    Every method returns only after the transaction receipt is available,
    so callers can rely on the returned address being live on chain.
    """

    @abstractmethod
    def get_bytecode(self, name: str) -> bytes:
        """Creation bytecode of a compiled contract artifact."""

    @abstractmethod
    def deploy_contract(self, name: str, constructor_args: bytes = b"") -> bytes:
        """Deploy ``name`` with a plain CREATE transaction and return its address."""

    @abstractmethod
    def deploy_create2(self, factory: bytes, salt: bytes, init_code: bytes) -> bytes:
        """Call ``factory.deploy(salt, init_code)`` and return the address the chain reports."""

    @abstractmethod
    def call(self, address: bytes, data: bytes) -> bytes:
        """Read-only call (eth_call) of ``address`` with ``data``; returns the raw return data."""
