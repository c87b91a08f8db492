"""Init code assembly and CREATE2 deployment sequencing."""

from .client import DeployClient
from .encoding import (
    build_init_code,
    build_proxy_init_code,
    decode_result,
    encode_call,
    encode_constructor_args,
    function_selector,
    parse_signature_types,
)
from .orchestrator import (
    ERC8004_PROXIES,
    DeploymentSummary,
    ProxyDeployment,
    ProxySpec,
    Ref,
    VanityDeployer,
)

__all__ = [
    "DeployClient",
    "build_init_code",
    "build_proxy_init_code",
    "decode_result",
    "encode_call",
    "encode_constructor_args",
    "function_selector",
    "parse_signature_types",
    "ERC8004_PROXIES",
    "DeploymentSummary",
    "ProxyDeployment",
    "ProxySpec",
    "Ref",
    "VanityDeployer",
]
