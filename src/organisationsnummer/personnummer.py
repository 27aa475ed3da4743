"""
Swedish personnummer (personal identity number) field rules.

Format: YYMMDD-XXXX or YYYYMMDD-XXXX
- First 6/8 digits: birth date
- 7th-9th digits: birth number (odd for male, even for female)
- 10th digit: Luhn checksum

Coordination numbers (samordningsnummer) add 60 to the day.

Sole proprietors (enskild firma) use the owner's personnummer as their
organisationsnummer, which is why these rules are needed here.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from organisationsnummer.errors import StructureError, StructureErrorKind

# Earliest birth century of anyone holding a personnummer
MIN_CENTURY = 18


@dataclass(frozen=True)
class PersonnummerInfo:
    """Parsed personnummer information."""

    normalized: str  # 12-digit format: YYYYMMDDXXXX
    birth_date: date
    gender: str  # 'M' or 'F'
    is_coordination: bool  # True if samordningsnummer

    @property
    def century(self) -> str:
        return self.normalized[:2]

    def get_age(self, today: Optional[date] = None) -> int:
        """Age in whole years at ``today`` (defaults to the current date)."""
        today = today or date.today()
        had_birthday = (today.month, today.day) >= (
            self.birth_date.month,
            self.birth_date.day,
        )
        return today.year - self.birth_date.year - (0 if had_birthday else 1)


def infer_century(
    year_short: int, separator: Optional[str] = None, today: Optional[date] = None
) -> str:
    """
    Infer the birth century for a 10-digit personnummer.

    Standard rule: 00-current = 2000s, otherwise 1900s. A '+' separator means
    the person is 100 years or older, which moves the century back by one.
    """
    today = today or date.today()
    current_year = today.year % 100
    base = today.year // 100

    century = base if year_short <= current_year else base - 1
    if separator == "+":
        century -= 1
    return f"{century:02d}"


def parse_personnummer(
    digits: str,
    century: Optional[str] = None,
    separator: Optional[str] = None,
    today: Optional[date] = None,
) -> PersonnummerInfo:
    """
    Validate the date digits of a 10-digit number under personnummer rules.

    The checksum is not checked here; it is shared with organisationsnummer
    and handled by the caller.

    Raises:
        StructureError: INVALID_DATE_DIGITS if the digits do not form a
            plausible birth date
    """
    today = today or date.today()
    if century is None:
        century = infer_century(int(digits[:2]), separator, today)

    if int(century) < MIN_CENTURY:
        raise StructureError(
            StructureErrorKind.INVALID_DATE_DIGITS,
            f"Century {century} is not a plausible birth century",
        )

    pnr = century + digits
    year = int(pnr[:4])
    month = int(pnr[4:6])
    day = int(pnr[6:8])
    birth_number = pnr[8:11]

    # Check for coordination number (day + 60)
    is_coordination = day > 60
    if is_coordination:
        day -= 60

    try:
        birth_date = date(year, month, day)
    except ValueError:
        raise StructureError(
            StructureErrorKind.INVALID_DATE_DIGITS,
            "Date digits are not a valid birth date",
        )

    if birth_date > today:
        raise StructureError(
            StructureErrorKind.INVALID_DATE_DIGITS,
            "Birth date is in the future",
        )

    # Determine gender (9th digit: odd = male, even = female)
    gender = "M" if int(birth_number[2]) % 2 == 1 else "F"

    return PersonnummerInfo(
        normalized=pnr,
        birth_date=birth_date,
        gender=gender,
        is_coordination=is_coordination,
    )
