"""Tests for the deterministic salt sequence."""

import pytest

from vanity.core.crypto import keccak256
from vanity.core.errors import InvalidInput
from vanity.search.salts import encode_counter, generate_salt, iter_salts


class TestEncodeCounter:
    """Minimal big-endian counter encoding."""

    @pytest.mark.parametrize("value,expected", [
        (0, b"\x00"),
        (1, b"\x01"),
        (255, b"\xff"),
        (256, b"\x01\x00"),
        (100_000, b"\x01\x86\xa0"),
        (2**64, b"\x01" + bytes(8)),
    ])
    def test_encoding(self, value, expected):
        assert encode_counter(value) == expected

    def test_negative_rejected(self):
        with pytest.raises(InvalidInput):
            encode_counter(-1)


class TestGenerateSalt:
    """Salt derivation from counter values."""

    def test_salt_zero(self):
        """salt_0 is keccak256 of the single byte 0x00."""
        assert generate_salt(0).hex() == (
            "bc36789e7a1e281436464229828f817d6612f7b477d66591ff96a9e064bcc98a"
        )

    def test_salt_matches_hash_of_encoding(self):
        for i in (1, 42, 255, 256, 99_999_999):
            assert generate_salt(i) == keccak256(encode_counter(i))

    def test_salt_is_stable(self):
        """The same counter always gives the same salt."""
        assert generate_salt(42) == generate_salt(42)
        assert len(generate_salt(42)) == 32

    def test_salts_differ(self):
        salts = {generate_salt(i) for i in range(1000)}
        assert len(salts) == 1000


class TestIterSalts:
    """Enumeration of the salt sequence."""

    def test_bounded_range(self):
        pairs = list(iter_salts(5, 10))
        assert [i for i, _ in pairs] == [5, 6, 7, 8, 9]
        assert all(salt == generate_salt(i) for i, salt in pairs)

    def test_empty_range(self):
        assert list(iter_salts(3, 3)) == []

    def test_unbounded(self):
        """Without stop the sequence keeps going."""
        salts = iter_salts()
        first = [next(salts) for _ in range(3)]
        assert first == [(0, generate_salt(0)), (1, generate_salt(1)), (2, generate_salt(2))]

    def test_resume_visits_same_salts(self):
        """Resuming from a counter continues the same sequence."""
        full = list(iter_salts(0, 20))
        resumed = list(iter_salts(10, 20))
        assert full[10:] == resumed

    def test_negative_start_rejected(self):
        with pytest.raises(InvalidInput):
            list(iter_salts(-1, 5))
