"""
Unit tests for the Luhn checksum engine.
"""

import pytest

from organisationsnummer.checksum import checksum_valid, luhn_checksum


class TestLuhnChecksum:
    """Tests for Luhn checksum calculation."""

    def test_known_checksums(self):
        """Test with known valid checksums."""
        # Spotify AB: 556703-7485
        assert luhn_checksum("556703748") == 5
        assert luhn_checksum("202100548") == 9

    def test_personnummer_checksum(self):
        """Same algorithm applies to personnummer digits."""
        # Test case from Skatteverket documentation
        assert luhn_checksum("811218987") == 6

    def test_all_zeros(self):
        """Test checksum of all zeros."""
        assert luhn_checksum("000000000") == 0

    def test_products_above_nine_are_reduced(self):
        """9 doubled is 18, which counts as 9."""
        assert luhn_checksum("900000000") == 1

    def test_wrong_length_is_contract_violation(self):
        """Only nine digits may be passed in."""
        with pytest.raises(ValueError):
            luhn_checksum("55670374")

        with pytest.raises(ValueError):
            luhn_checksum("5567037485")

    def test_non_digits_rejected(self):
        with pytest.raises(ValueError):
            luhn_checksum("55670A748")


class TestChecksumValid:
    """Tests for check digit verification."""

    def test_matching_check_digit(self):
        assert checksum_valid("556703748", 5)

    def test_mismatching_check_digit(self):
        assert not checksum_valid("556703748", 0)
        assert not checksum_valid("123456789", 0)
