"""
Parallel vanity salt search.

The counter range is cut into contiguous chunks which are scanned in waves,
one chunk per worker process. Every chunk is scanned in counter order and
reports its first hit; since a wave covers a contiguous block of counters,
the lowest hit of the first wave that has any is the global first match.
The result is therefore identical to the serial search.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ProcessPoolExecutor
from itertools import repeat
from typing import Callable, Optional

from vanity.config import DEFAULT_CHUNK_SIZE, DEFAULT_MAX_ITERATIONS, DEFAULT_PROGRESS_INTERVAL
from vanity.core.constants import CREATE2_PREFIX
from vanity.core.crypto import keccak256
from vanity.core.errors import InvalidInput
from vanity.core.types import BytesLike, SearchResult, normalize_prefix, to_address, to_hash32
from vanity.search.salts import encode_counter


logger = logging.getLogger(__name__)


def _scan_range(
    head: bytes,
    code_hash: bytes,
    prefix: str,
    start: int,
    stop: int,
) -> Optional[tuple[int, bytes, bytes]]:
    """Scan counters [start, stop) and return (index, salt, address) of the first hit."""
    for i in range(start, stop):
        salt = keccak256(encode_counter(i))
        address = keccak256(head + salt + code_hash)[12:]
        if address.hex().startswith(prefix):
            return i, salt, address
    return None


def _report_progress(
    progress: Callable[[int], None],
    interval: int,
    start: int,
    stop: int,
) -> None:
    """Call progress for every nonzero multiple of interval in [start, stop)."""
    first = -(-max(start, 1) // interval) * interval
    for counter in range(first, stop, interval):
        progress(counter)


def find_vanity_salt_parallel(
    deployer: BytesLike,
    init_code_hash: BytesLike,
    desired_prefix: str,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    *,
    start: int = 0,
    workers: Optional[int] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    progress: Optional[Callable[[int], None]] = None,
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
) -> Optional[SearchResult]:
    """
    Multi-process version of find_vanity_salt with the same result.

    Args:
        workers: Number of processes (default: CPU count)
        chunk_size: Counters per task
        progress: Called with every nonzero counter divisible by
            ``progress_interval`` that was scanned without a match, in order,
            once the wave holding it finishes. Same calls as the serial search.
        progress_interval: Progress reporting period

    Returns:
        The lowest-index match, or None if the budget ran out.
    """
    sender = to_address(deployer)
    code_hash = to_hash32(init_code_hash)
    prefix = normalize_prefix(desired_prefix)
    if max_iterations <= 0:
        raise InvalidInput(f"max_iterations must be positive, got {max_iterations}")
    if start < 0:
        raise InvalidInput(f"start must be non-negative, got {start}")
    if workers is None:
        workers = os.cpu_count() or 1
    if workers <= 0:
        raise InvalidInput(f"workers must be positive, got {workers}")
    if chunk_size <= 0:
        raise InvalidInput(f"chunk_size must be positive, got {chunk_size}")
    if progress_interval <= 0:
        raise InvalidInput(f"progress_interval must be positive, got {progress_interval}")

    head = CREATE2_PREFIX + sender
    end = start + max_iterations
    next_start = start

    logger.debug(
        "Parallel search for 0x%s over [%d, %d) with %d workers",
        prefix, start, end, workers,
    )

    with ProcessPoolExecutor(max_workers=workers) as executor:
        while next_start < end:
            starts, stops = [], []
            while len(starts) < workers and next_start < end:
                starts.append(next_start)
                next_start = min(next_start + chunk_size, end)
                stops.append(next_start)

            results = executor.map(
                _scan_range,
                repeat(head),
                repeat(code_hash),
                repeat(prefix),
                starts,
                stops,
            )
            hits = [hit for hit in results if hit is not None]

            if hits:
                index, salt, address = min(hits, key=lambda hit: hit[0])
                if progress is not None:
                    _report_progress(progress, progress_interval, starts[0], index)
                return SearchResult(salt=salt, address=address, index=index)

            if progress is not None:
                _report_progress(progress, progress_interval, starts[0], stops[-1])

    return None
