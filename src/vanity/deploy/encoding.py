"""
Init code and call data encoding.

Init code is creation bytecode followed by the ABI-encoded constructor
arguments. For ERC-1967 proxies the constructor takes the implementation
address and the initializer call data:

    init_code = proxy_bytecode ++ abi.encode(address implementation, bytes data)
"""

from __future__ import annotations

from typing import Any, Sequence, Union

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError
from eth_utils import function_signature_to_4byte_selector, remove_0x_prefix

from vanity.core.errors import InvalidInput
from vanity.core.types import to_address


def _to_bytes(value: Union[bytes, str], label: str) -> bytes:
    if isinstance(value, str):
        try:
            return bytes.fromhex(remove_0x_prefix(value))
        except ValueError as e:
            raise InvalidInput(f"{label} is not valid hex: {e}") from e
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidInput(f"{label} must be bytes or hex string, got {type(value).__name__}")
    return bytes(value)


def function_selector(signature: str) -> bytes:
    """First 4 bytes of keccak256 of a canonical signature, e.g. ``initialize()``."""
    return function_signature_to_4byte_selector(signature)


def parse_signature_types(signature: str) -> list[str]:
    """Argument types of a flat signature: ``f(address,uint256)`` -> ``["address", "uint256"]``."""
    open_paren = signature.find("(")
    if open_paren <= 0 or not signature.endswith(")"):
        raise InvalidInput(f"Malformed function signature: {signature!r}")
    inner = signature[open_paren + 1:-1].strip()
    if not inner:
        return []
    if "(" in inner:
        raise InvalidInput(f"Tuple arguments are not supported: {signature!r}")
    return [t.strip() for t in inner.split(",")]


def encode_constructor_args(types: Sequence[str], args: Sequence[Any]) -> bytes:
    if len(types) != len(args):
        raise InvalidInput(f"Expected {len(types)} arguments, got {len(args)}")
    return encode(list(types), list(args))


def encode_call(signature: str, args: Sequence[Any] = ()) -> bytes:
    """Selector followed by the ABI-encoded arguments."""
    types = parse_signature_types(signature)
    return function_selector(signature) + encode_constructor_args(types, args)


def decode_result(types: Sequence[str], data: bytes) -> tuple:
    """Decode ABI-encoded return data; empty or short data raises InvalidInput."""
    try:
        return decode(list(types), data)
    except DecodingError as e:
        raise InvalidInput(f"Cannot decode {list(types)} from 0x{data.hex()}: {e}") from e


def build_init_code(bytecode: Union[bytes, str], constructor_args: Union[bytes, str] = b"") -> bytes:
    return _to_bytes(bytecode, "Bytecode") + _to_bytes(constructor_args, "Constructor args")


def build_proxy_init_code(
    proxy_bytecode: Union[bytes, str],
    implementation: Union[bytes, str],
    init_data: Union[bytes, str] = b"",
) -> bytes:
    """Init code for an ERC1967Proxy(implementation, init_data) deployment."""
    args = encode_constructor_args(
        ["address", "bytes"],
        [to_address(implementation), _to_bytes(init_data, "Init data")],
    )
    return build_init_code(proxy_bytecode, args)
