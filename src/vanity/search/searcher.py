"""
Vanity salt search.

For each counter i the searcher derives salt_i, computes the CREATE2 address
for (deployer, salt_i, init_code_hash) and stops at the first address whose
lowercase hex digits start with the wanted prefix. A prefix of k hex digits
takes about 16**k attempts on average; pick max_iterations accordingly.
"""

from __future__ import annotations

from typing import Callable, Optional

from vanity.config import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_PROGRESS_INTERVAL,
    SearchConfig,
)
from vanity.core.constants import CREATE2_PREFIX
from vanity.core.crypto import keccak256
from vanity.core.errors import InvalidInput, SearchExhausted
from vanity.core.types import BytesLike, SearchResult, normalize_prefix, to_address, to_hash32
from vanity.search.parallel import find_vanity_salt_parallel
from vanity.search.salts import encode_counter

ProgressCallback = Callable[[int], None]


def address_matches(address: bytes, prefix: str) -> bool:
    """Case-insensitive literal prefix match on the address hex digits, 0x optional."""
    return address.hex().startswith(normalize_prefix(prefix))


def find_vanity_salt(
    deployer: BytesLike,
    init_code_hash: BytesLike,
    desired_prefix: str,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    *,
    start: int = 0,
    progress: Optional[ProgressCallback] = None,
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
) -> Optional[SearchResult]:
    """
    Find the first salt whose CREATE2 address starts with ``desired_prefix``.

    Args:
        deployer: Address of the contract that will run CREATE2
        init_code_hash: keccak256 of the full init code
        desired_prefix: Hex digits, ``0x`` optional, any case
        max_iterations: Number of counters to try, starting at ``start``
        start: First counter value
        progress: Called with the current counter every ``progress_interval``
            counters (never at 0)
        progress_interval: Progress reporting period

    Returns:
        The match with the lowest counter, or None if the budget ran out.

    Raises:
        InvalidInput: On malformed deployer, hash, prefix or budget
    """
    sender = to_address(deployer)
    code_hash = to_hash32(init_code_hash)
    prefix = normalize_prefix(desired_prefix)
    if max_iterations <= 0:
        raise InvalidInput(f"max_iterations must be positive, got {max_iterations}")
    if start < 0:
        raise InvalidInput(f"start must be non-negative, got {start}")
    if progress_interval <= 0:
        raise InvalidInput(f"progress_interval must be positive, got {progress_interval}")

    # Hoisted out of the loop: only the salt changes per candidate
    head = CREATE2_PREFIX + sender

    for i in range(start, start + max_iterations):
        salt = keccak256(encode_counter(i))
        address = keccak256(head + salt + code_hash)[12:]
        if address.hex().startswith(prefix):
            return SearchResult(salt=salt, address=address, index=i)

        if progress is not None and i > 0 and i % progress_interval == 0:
            progress(i)

    return None


def require_vanity_salt(
    deployer: BytesLike,
    init_code_hash: BytesLike,
    desired_prefix: str,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    **kwargs,
) -> SearchResult:
    """Like find_vanity_salt, but raise SearchExhausted instead of returning None."""
    result = find_vanity_salt(
        deployer, init_code_hash, desired_prefix, max_iterations, **kwargs
    )
    if result is None:
        raise SearchExhausted(normalize_prefix(desired_prefix), max_iterations)
    return result


def search_vanity_salt(
    deployer: BytesLike,
    init_code_hash: BytesLike,
    desired_prefix: str,
    config: SearchConfig,
    progress: Optional[ProgressCallback] = None,
) -> Optional[SearchResult]:
    """Run the serial or parallel search as configured."""
    config.validate()
    if config.parallel:
        return find_vanity_salt_parallel(
            deployer,
            init_code_hash,
            desired_prefix,
            config.max_iterations,
            start=config.start,
            workers=config.workers,
            chunk_size=config.chunk_size,
            progress=progress,
            progress_interval=config.progress_interval,
        )
    return find_vanity_salt(
        deployer,
        init_code_hash,
        desired_prefix,
        config.max_iterations,
        start=config.start,
        progress=progress,
        progress_interval=config.progress_interval,
    )
