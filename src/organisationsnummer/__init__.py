"""
Organisationsnummer - validation, parsing and formatting of Swedish
organization numbers.

Sole proprietors (enskild firma) are accepted through their owner's
personnummer.
"""

from organisationsnummer.checksum import checksum_valid, luhn_checksum
from organisationsnummer.errors import (
    ChecksumError,
    FormatError,
    FormatErrorKind,
    StructureError,
    StructureErrorKind,
    ValidationError,
)
from organisationsnummer.formatting import FormattedOrganisationsnummer
from organisationsnummer.identifier import ORGANIZATION_TYPES, Organisationsnummer
from organisationsnummer.parser import (
    format_organisationsnummer,
    format_with_prefix,
    generate_organisationsnummer,
    parse,
    valid,
)
from organisationsnummer.personnummer import PersonnummerInfo
from organisationsnummer.structure import ValidationMode
from organisationsnummer.validation import ValidationOutcome, validate

__version__ = "1.1.0"

__all__ = [
    # Parsing
    "parse",
    "valid",
    "validate",
    "ValidationOutcome",
    "Organisationsnummer",
    "ValidationMode",
    "PersonnummerInfo",
    "ORGANIZATION_TYPES",
    # Formatting
    "FormattedOrganisationsnummer",
    "format_organisationsnummer",
    "format_with_prefix",
    # Checksum
    "luhn_checksum",
    "checksum_valid",
    "generate_organisationsnummer",
    # Errors
    "ValidationError",
    "FormatError",
    "FormatErrorKind",
    "StructureError",
    "StructureErrorKind",
    "ChecksumError",
]
