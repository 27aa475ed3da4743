"""
The validated organisationsnummer type.

Instances are only created by the validation policy; use
``organisationsnummer.parse`` or ``Organisationsnummer.parse`` to get one.
"""

from dataclasses import dataclass, field
from typing import Optional

from organisationsnummer.formatting import FormattedOrganisationsnummer, format_identifier
from organisationsnummer.personnummer import PersonnummerInfo
from organisationsnummer.structure import ValidationMode

# Organisation type by first digit. Sole proprietors use the owner's
# personnummer and are reported under "0".
ORGANIZATION_TYPES = {
    "0": "Enskild firma",
    "1": "Dödsbon",
    "2": "Stat, landsting, kommun eller församling",
    "3": "Utländska företag som bedriver näringsverksamhet eller äger fastigheter i Sverige",
    "5": "Aktiebolag",
    "6": "Enkelt bolag",
    "7": "Ekonomisk förening eller bostadsrättsförening",
    "8": "Ideella förening och stiftelse",
    "9": "Handelsbolag, kommanditbolag och enkelt bolag",
}

UNKNOWN_ORGANIZATION_TYPE = "Okänt"


@dataclass(frozen=True)
class Organisationsnummer:
    """A parsed, checksum-valid organisationsnummer."""

    digits: str  # 10 digits, no century, no separator
    mode: ValidationMode
    personnummer_info: Optional[PersonnummerInfo] = None
    century: str = field(default="20", compare=False)
    separator: Optional[str] = field(default=None, compare=False)

    @classmethod
    def parse(cls, raw: str) -> "Organisationsnummer":
        """Parse ``raw``, raising ValidationError if it is not valid."""
        from organisationsnummer.parser import parse

        return parse(raw)

    def group_number(self) -> int:
        return int(self.digits[:2])

    def individual_number(self) -> str:
        return self.digits[2:6]

    def birth_number(self) -> str:
        return self.digits[6:9]

    def check_digit(self) -> int:
        return int(self.digits[9])

    def is_personnummer_compatible(self) -> bool:
        """True when the number was accepted under personnummer rules (enskild firma)."""
        return self.mode is ValidationMode.PERSONNUMMER

    def is_personnummer(self) -> bool:
        """Same as is_personnummer_compatible()."""
        return self.is_personnummer_compatible()

    def personnummer(self) -> Optional[PersonnummerInfo]:
        """Return the owner's personnummer for a sole proprietor, else None."""
        return self.personnummer_info

    def format(self, separator: str = "-") -> FormattedOrganisationsnummer:
        """Format organisationsnummer in short and long form."""
        return format_identifier(self, separator)

    def type(self) -> str:
        """Get the organisation type from the first digit."""
        code = "0" if self.is_personnummer_compatible() else self.digits[0]
        return ORGANIZATION_TYPES.get(code, UNKNOWN_ORGANIZATION_TYPE)

    def vat_number(self) -> str:
        """Get the Swedish VAT number: SE + 10 digits + 01."""
        return f"SE{self.digits}01"

    def __str__(self) -> str:
        return self.format().short()
