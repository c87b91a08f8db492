"""
Sequential CREATE2 deployment of upgradeable proxies at vanity addresses.

The sequence is:
  1. Deploy the CREATE2 factory
  2. For every proxy, in order:
     a. deploy the implementation
     b. build the initializer call data and the proxy init code
     c. search a salt giving the proxy address the wanted prefix
     d. deploy through the factory and check the address against the prediction
  3. Read every proxy back: log its version and check the addresses its
     getters report against the proxies they should point to

Each step waits for the previous one; later proxies may reference the
addresses of earlier ones in their initializer arguments.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Optional

from vanity.config import DEFAULT_SEARCH_CONFIG, SearchConfig
from vanity.core.create2 import compute_create2_address
from vanity.core.crypto import keccak256
from vanity.core.errors import (
    DeploymentMismatch,
    InvalidInput,
    SearchExhausted,
    VerificationFailed,
)
from vanity.core.types import normalize_prefix, to_address, to_hex
from vanity.deploy.client import DeployClient
from vanity.deploy.encoding import build_proxy_init_code, decode_result, encode_call
from vanity.search.searcher import search_vanity_salt


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ref:
    """Initializer argument standing for the proxy address of an earlier deployment."""
    name: str


@dataclass(frozen=True)
class ProxySpec:
    name: str
    implementation: str
    prefix: str
    init_signature: str = "initialize()"
    init_args: tuple = ()
    # (getter signature, expected address or Ref) pairs read after deployment
    checks: tuple = ()


@dataclass(frozen=True)
class ProxyDeployment:
    name: str
    implementation: bytes
    proxy: bytes
    salt: bytes
    init_code_hash: bytes
    # Counter value the salt came from
    salt_index: int


@dataclass
class DeploymentSummary:
    factory: bytes
    proxies: dict[str, ProxyDeployment] = field(default_factory=dict)

    def addresses(self) -> dict[str, str]:
        return {name: to_hex(d.proxy) for name, d in self.proxies.items()}


# ERC-8004 registries: identity first, the other two are initialized with it
ERC8004_PROXIES: tuple[ProxySpec, ...] = (
    ProxySpec(
        name="IdentityRegistry",
        implementation="IdentityRegistryUpgradeable",
        prefix="8004a",
    ),
    ProxySpec(
        name="ReputationRegistry",
        implementation="ReputationRegistryUpgradeable",
        prefix="8004b",
        init_signature="initialize(address)",
        init_args=(Ref("IdentityRegistry"),),
        checks=(("getIdentityRegistry()", Ref("IdentityRegistry")),),
    ),
    ProxySpec(
        name="ValidationRegistry",
        implementation="ValidationRegistryUpgradeable",
        prefix="8004c",
        init_signature="initialize(address)",
        init_args=(Ref("IdentityRegistry"),),
        checks=(("getIdentityRegistry()", Ref("IdentityRegistry")),),
    ),
)


class VanityDeployer:
    def __init__(
        self,
        client: DeployClient,
        config: SearchConfig = DEFAULT_SEARCH_CONFIG,
        proxy_contract: str = "ERC1967Proxy",
        factory_contract: str = "Create2Factory",
        version_signature: Optional[str] = "getVersion()",
    ):
        self.client = client
        self.config = config.validate()
        self.proxy_contract = proxy_contract
        self.factory_contract = factory_contract
        self.version_signature = version_signature
        self._proxy_bytecode: Optional[bytes] = None

    @property
    def proxy_bytecode(self) -> bytes:
        if self._proxy_bytecode is None:
            self._proxy_bytecode = self.client.get_bytecode(self.proxy_contract)
        return self._proxy_bytecode

    def _log_progress(self, checked: int) -> None:
        logger.info("  Checked %s salts...", f"{checked:,}")

    def deploy_factory(self) -> bytes:
        logger.info("Deploying CREATE2 factory %s...", self.factory_contract)
        factory = self.client.deploy_contract(self.factory_contract)
        logger.info("  Factory deployed at: %s", to_hex(factory))
        return factory

    def _resolve_args(self, args: tuple, deployed: dict[str, ProxyDeployment]) -> list[Any]:
        resolved = []
        for arg in args:
            if isinstance(arg, Ref):
                if arg.name not in deployed:
                    raise InvalidInput(f"Reference to {arg.name!r} before it was deployed")
                resolved.append(deployed[arg.name].proxy)
            else:
                resolved.append(arg)
        return resolved

    def deploy_proxy(
        self,
        factory: bytes,
        spec: ProxySpec,
        deployed: Optional[dict[str, ProxyDeployment]] = None,
    ) -> ProxyDeployment:
        """
        Deploy one implementation and its proxy at a vanity address.

        Raises:
            SearchExhausted: If no salt matches within the configured budget
            DeploymentMismatch: If the factory deployed somewhere else
        """
        deployed = deployed or {}
        prefix = normalize_prefix(spec.prefix)

        logger.info("Deploying %s implementation...", spec.implementation)
        implementation = self.client.deploy_contract(spec.implementation)
        logger.info("  Implementation deployed at: %s", to_hex(implementation))

        init_data = encode_call(spec.init_signature, self._resolve_args(spec.init_args, deployed))
        init_code = build_proxy_init_code(self.proxy_bytecode, implementation, init_data)
        init_code_hash = keccak256(init_code)

        logger.info("Mining salt for %s proxy with prefix 0x%s...", spec.name, prefix)
        started = time.monotonic()
        result = search_vanity_salt(
            factory, init_code_hash, prefix, self.config, progress=self._log_progress
        )
        if result is None:
            raise SearchExhausted(prefix, self.config.max_iterations)
        logger.info(
            "  Found salt %s after %s attempts (%.1fs)",
            result.salt_hex, f"{result.index - self.config.start + 1:,}",
            time.monotonic() - started,
        )
        logger.info("  Predicted address: %s", result.checksum_address)

        predicted = compute_create2_address(factory, result.salt, init_code)
        if predicted != result.address:
            raise DeploymentMismatch(spec.name, result.address, predicted, deployed=False)

        actual = self.client.deploy_create2(factory, result.salt, init_code)
        if actual != result.address:
            raise DeploymentMismatch(spec.name, result.address, actual)
        logger.info("  Proxy deployed at: %s", to_hex(actual))

        return ProxyDeployment(
            name=spec.name,
            implementation=implementation,
            proxy=actual,
            salt=result.salt,
            init_code_hash=init_code_hash,
            salt_index=result.index,
        )

    def _read(self, name: str, address: bytes, getter: str, types: list[str]) -> tuple:
        try:
            return decode_result(types, self.client.call(address, encode_call(getter)))
        except InvalidInput as e:
            raise VerificationFailed(name, getter, str(e)) from e

    def verify(self, specs: tuple[ProxySpec, ...], summary: DeploymentSummary) -> None:
        """
        Read the deployed proxies back.

        Raises:
            VerificationFailed: If a getter reverts, returns garbage, or
                reports a different address than expected
        """
        logger.info("Verifying deployments...")
        for spec in specs:
            proxy = summary.proxies[spec.name].proxy

            if self.version_signature is not None:
                (version,) = self._read(spec.name, proxy, self.version_signature, ["string"])
                logger.info("  %s version: %s", spec.name, version)

            for getter, expected in spec.checks:
                (expected_address,) = self._resolve_args((expected,), summary.proxies)
                (reported,) = self._read(spec.name, proxy, getter, ["address"])
                actual = to_address(reported)
                if actual != to_address(expected_address):
                    raise VerificationFailed(
                        spec.name,
                        getter,
                        f"returned {to_hex(actual)}, expected {to_hex(to_address(expected_address))}",
                    )
                logger.info("  %s %s: %s", spec.name, getter, to_hex(actual))

    def run(self, specs: tuple[ProxySpec, ...] = ERC8004_PROXIES) -> DeploymentSummary:
        names = [spec.name for spec in specs]
        if len(set(names)) != len(names):
            raise InvalidInput(f"Duplicate proxy names: {names}")

        summary = DeploymentSummary(factory=self.deploy_factory())
        for spec in specs:
            summary.proxies[spec.name] = self.deploy_proxy(
                summary.factory, spec, summary.proxies
            )
        self.verify(specs, summary)

        logger.info("Deployment summary")
        for name, deployment in summary.proxies.items():
            logger.info(
                "  %s proxy: %s (implementation %s)",
                name, to_hex(deployment.proxy), to_hex(deployment.implementation),
            )
        return summary
