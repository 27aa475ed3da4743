"""
Unit tests for field decomposition.
"""

import pytest

from organisationsnummer.errors import StructureError, StructureErrorKind
from organisationsnummer.normalize import normalize
from organisationsnummer.structure import ValidationMode, decompose


class TestDecomposeOrganisation:
    """Tests for organisation-mode field rules."""

    def test_fields(self):
        fields = decompose(normalize("202100-5489"), ValidationMode.ORGANISATION)
        assert fields.group_number == 20
        assert fields.individual_number == "2100"
        assert fields.birth_number == "548"
        assert fields.check_digit == 9
        assert fields.payload == "202100548"
        assert fields.mode is ValidationMode.ORGANISATION
        assert fields.personnummer is None

    def test_group_number_too_low(self):
        """Test rejection when group number < 20."""
        with pytest.raises(StructureError) as exc_info:
            decompose(normalize("121212-1212"), ValidationMode.ORGANISATION)
        assert exc_info.value.kind == StructureErrorKind.GROUP_TOO_LOW

    def test_accepted_prefix(self):
        fields = decompose(normalize("16556703-7485"), ValidationMode.ORGANISATION)
        assert fields.group_number == 55

    def test_invalid_prefix(self):
        with pytest.raises(StructureError) as exc_info:
            decompose(normalize("19556703-7485"), ValidationMode.ORGANISATION)
        assert exc_info.value.kind == StructureErrorKind.INVALID_PREFIX

    def test_custom_accepted_prefixes(self):
        fields = decompose(
            normalize("19556703-7485"),
            ValidationMode.ORGANISATION,
            accepted_prefixes=["16", "19"],
        )
        assert fields.digits == "5567037485"

    def test_checksum_not_checked(self):
        """Decomposition only looks at field constraints."""
        fields = decompose(normalize("5567037480"), ValidationMode.ORGANISATION)
        assert fields.check_digit == 0


class TestDecomposePersonnummer:
    """Tests for personnummer-mode field rules."""

    def test_valid_date_digits(self):
        fields = decompose(normalize("121212-1212"), ValidationMode.PERSONNUMMER)
        assert fields.mode is ValidationMode.PERSONNUMMER
        assert fields.group_number == 12
        assert fields.personnummer is not None
        assert fields.personnummer.normalized == "201212121212"

    def test_no_group_number_floor(self):
        fields = decompose(normalize("0101011234"), ValidationMode.PERSONNUMMER)
        assert fields.group_number == 1

    def test_invalid_month(self):
        with pytest.raises(StructureError) as exc_info:
            decompose(normalize("123456-7890"), ValidationMode.PERSONNUMMER)
        assert exc_info.value.kind == StructureErrorKind.INVALID_DATE_DIGITS

    def test_prefix_is_used_as_century(self):
        fields = decompose(normalize("19121212-1212"), ValidationMode.PERSONNUMMER)
        assert fields.personnummer.century == "19"
