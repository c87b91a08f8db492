"""Deterministic salt generation and vanity prefix search."""

from .salts import encode_counter, generate_salt, iter_salts
from .searcher import (
    address_matches,
    find_vanity_salt,
    require_vanity_salt,
    search_vanity_salt,
)
from .parallel import find_vanity_salt_parallel

__all__ = [
    "encode_counter",
    "generate_salt",
    "iter_salts",
    "address_matches",
    "find_vanity_salt",
    "require_vanity_salt",
    "search_vanity_salt",
    "find_vanity_salt_parallel",
]
