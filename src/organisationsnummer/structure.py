"""
Decomposition of normalized digits into organisationsnummer fields.

Layout: GGIIII-BBBC
- GG: group number, >= 20 for a genuine organisation
- IIII: individual number
- BBB: birth number slot (shared with the personnummer layout)
- C: Luhn check digit

The same ten digits are read under one of two rule sets. Organisation mode
only constrains the group number and the century prefix; personnummer mode
requires the first six digits to be a birth date.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from organisationsnummer.errors import StructureError, StructureErrorKind
from organisationsnummer.normalize import NormalizedInput
from organisationsnummer.personnummer import PersonnummerInfo, parse_personnummer

MIN_GROUP_NUMBER = 20

DEFAULT_ACCEPTED_PREFIXES = ("16", "20")


class ValidationMode(str, Enum):
    """Rule set that validated an identifier."""

    ORGANISATION = "organisationsnummer"
    PERSONNUMMER = "personnummer"


@dataclass(frozen=True)
class IdentifierFields:
    """Semantic fields of a 10-digit identifier."""

    digits: str
    group_number: int
    individual_number: str
    birth_number: str
    check_digit: int
    mode: ValidationMode
    personnummer: Optional[PersonnummerInfo] = None

    @property
    def payload(self) -> str:
        """The nine digits covered by the checksum."""
        return self.digits[:9]


def decompose(
    normalized: NormalizedInput,
    mode: ValidationMode,
    accepted_prefixes: Iterable[str] = DEFAULT_ACCEPTED_PREFIXES,
) -> IdentifierFields:
    """
    Split normalized digits into fields and check the mode's constraints.

    Raises:
        StructureError: GROUP_TOO_LOW or INVALID_PREFIX in organisation mode,
            INVALID_DATE_DIGITS in personnummer mode
    """
    digits = normalized.digits
    personnummer = None

    if mode is ValidationMode.ORGANISATION:
        group_number = int(digits[:2])
        if group_number < MIN_GROUP_NUMBER:
            raise StructureError(
                StructureErrorKind.GROUP_TOO_LOW,
                f"Group number must be >= {MIN_GROUP_NUMBER}, got {group_number:02d}",
            )
        if normalized.century is not None and normalized.century not in tuple(
            accepted_prefixes
        ):
            raise StructureError(
                StructureErrorKind.INVALID_PREFIX,
                f"Prefix {normalized.century} is not used for organisation numbers",
            )
    else:
        personnummer = parse_personnummer(
            digits, century=normalized.century, separator=normalized.separator
        )

    return IdentifierFields(
        digits=digits,
        group_number=int(digits[:2]),
        individual_number=digits[2:6],
        birth_number=digits[6:9],
        check_digit=int(digits[9]),
        mode=mode,
        personnummer=personnummer,
    )
