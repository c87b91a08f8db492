"""Tests for search configuration."""

import pytest

from vanity.config import DEFAULT_SEARCH_CONFIG, SearchConfig
from vanity.core.errors import InvalidInput


class TestSearchConfig:
    def test_defaults(self):
        assert DEFAULT_SEARCH_CONFIG.max_iterations == 100_000_000
        assert DEFAULT_SEARCH_CONFIG.progress_interval == 100_000
        assert DEFAULT_SEARCH_CONFIG.start == 0
        assert not DEFAULT_SEARCH_CONFIG.parallel

    def test_parallel(self):
        assert SearchConfig(workers=4).parallel

    def test_validate_returns_self(self):
        config = SearchConfig(max_iterations=10)
        assert config.validate() is config

    @pytest.mark.parametrize("kwargs", [
        {"max_iterations": 0},
        {"progress_interval": 0},
        {"start": -1},
        {"workers": 0},
        {"chunk_size": -10},
    ])
    def test_validate_rejects(self, kwargs):
        with pytest.raises(InvalidInput):
            SearchConfig(**kwargs).validate()
