"""
Search configuration.

The default budget of 100M candidate salts covers prefixes of up to six hex
digits (about 16**6 = 16.7M attempts on average); progress is reported
every 100k salts.
"""

from __future__ import annotations

from dataclasses import dataclass

from vanity.core.errors import InvalidInput


DEFAULT_MAX_ITERATIONS = 100_000_000
DEFAULT_PROGRESS_INTERVAL = 100_000
DEFAULT_CHUNK_SIZE = 100_000


@dataclass(frozen=True)
class SearchConfig:
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL
    start: int = 0

    # Parallel search only kicks in with more than one worker
    workers: int = 1
    chunk_size: int = DEFAULT_CHUNK_SIZE

    @property
    def parallel(self) -> bool:
        return self.workers > 1

    def validate(self) -> "SearchConfig":
        if self.max_iterations <= 0:
            raise InvalidInput(f"max_iterations must be positive, got {self.max_iterations}")
        if self.progress_interval <= 0:
            raise InvalidInput(
                f"progress_interval must be positive, got {self.progress_interval}"
            )
        if self.start < 0:
            raise InvalidInput(f"start must be non-negative, got {self.start}")
        if self.workers <= 0:
            raise InvalidInput(f"workers must be positive, got {self.workers}")
        if self.chunk_size <= 0:
            raise InvalidInput(f"chunk_size must be positive, got {self.chunk_size}")
        return self


DEFAULT_SEARCH_CONFIG = SearchConfig()
