"""
Salt generation sequence.

Candidate salts are not random: salt_i = keccak256(be(i)), where be(i) is the
minimal big-endian encoding of the counter (0 encodes as a single zero byte).
Re-running a search from the same counter visits the same salts in the same
order, so a search can be resumed or audited without stored state.
"""

from __future__ import annotations

from itertools import count
from typing import Iterator, Optional

from vanity.core.crypto import keccak256
from vanity.core.errors import InvalidInput


def encode_counter(i: int) -> bytes:
    if i < 0:
        raise InvalidInput(f"Salt counter must be non-negative, got {i}")
    return i.to_bytes((i.bit_length() + 7) // 8 or 1, "big")


def generate_salt(i: int) -> bytes:
    """Return the 32-byte salt for counter value ``i``."""
    return keccak256(encode_counter(i))


def iter_salts(start: int = 0, stop: Optional[int] = None) -> Iterator[tuple[int, bytes]]:
    """Yield ``(i, salt_i)`` for ``start <= i < stop``, forever if stop is None."""
    if start < 0:
        raise InvalidInput(f"Salt counter must be non-negative, got {start}")
    counters = count(start) if stop is None else range(start, stop)
    for i in counters:
        yield i, keccak256(encode_counter(i))
