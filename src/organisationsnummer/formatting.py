"""
Rendering of validated identifiers.

Short format: NNNNNN-NNNN
Long format:  CCNNNNNN-NNNN (century-qualified)
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from organisationsnummer.identifier import Organisationsnummer


@dataclass(frozen=True)
class FormattedOrganisationsnummer:
    """Short and long format of a validated organisationsnummer."""

    short_format: str
    long_format: str

    def short(self) -> str:
        """Return the 10-digit format with separator."""
        return self.short_format

    def long(self) -> str:
        """Return the century-qualified 12-digit format with separator."""
        return self.long_format


def format_short(identifier: "Organisationsnummer", separator: str = "-") -> str:
    """
    Format as NNNNNN-NNNN.

    Personnummer of people aged 100 or more are written with '+' instead of
    the default '-', since the short form drops the century.
    """
    info = identifier.personnummer()
    if separator == "-" and info is not None and info.get_age() >= 100:
        separator = "+"
    return f"{identifier.digits[:6]}{separator}{identifier.digits[6:]}"


def format_long(identifier: "Organisationsnummer", separator: str = "-") -> str:
    """Format as CCNNNNNN-NNNN using the identifier's century."""
    return f"{identifier.century}{identifier.digits[:6]}{separator}{identifier.digits[6:]}"


def format_identifier(
    identifier: "Organisationsnummer", separator: str = "-"
) -> FormattedOrganisationsnummer:
    return FormattedOrganisationsnummer(
        short_format=format_short(identifier, separator),
        long_format=format_long(identifier, separator),
    )
