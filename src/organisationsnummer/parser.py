"""
Swedish organisationsnummer (organization number) parsing.

Format: NNNNNN-NNNN (10 digits)
- First digit: Organization type
- Digits 1-2: group number, >= 20 (to distinguish from personnummer)
- Last digit: Luhn checksum

Numbers with a group number below 20 are accepted when they are a valid
personnummer, since sole proprietors (enskild firma) are registered under
the owner's personnummer.
"""

import random
from typing import Optional

from organisationsnummer.checksum import luhn_checksum
from organisationsnummer.identifier import Organisationsnummer
from organisationsnummer.structure import MIN_GROUP_NUMBER
from organisationsnummer.validation import validate


def parse(raw: str) -> Organisationsnummer:
    """
    Parse a Swedish organisationsnummer.

    Accepts formats:
    - NNNNNN-NNNN
    - NNNNNNNNNN
    - 16NNNNNN-NNNN (with prefix)
    - 16NNNNNNNNNN (with prefix)

    Raises:
        FormatError: Wrong length or non-digit characters
        StructureError: Digit groups invalid for both organisation and
            personnummer rules
        ChecksumError: Check digit mismatch
    """
    outcome = validate(raw)
    if not outcome.is_valid:
        raise outcome.error
    return outcome.identifier


def valid(raw: str) -> bool:
    """Check whether ``raw`` is a valid organisationsnummer."""
    return validate(raw).is_valid


def format_organisationsnummer(raw: str, separator: str = "-") -> Optional[str]:
    """
    Format organisationsnummer as NNNNNN-NNNN.

    Args:
        raw: The organisationsnummer to format
        separator: The separator to use (default: '-')

    Returns:
        Formatted organisationsnummer or None if invalid
    """
    outcome = validate(raw)
    if not outcome.is_valid:
        return None
    return outcome.identifier.format(separator).short()


def format_with_prefix(raw: str, separator: str = "-") -> Optional[str]:
    """
    Format organisationsnummer with its century prefix as CCNNNNNN-NNNN.

    Args:
        raw: The organisationsnummer to format
        separator: The separator to use (default: '-')

    Returns:
        Formatted organisationsnummer with prefix or None if invalid
    """
    outcome = validate(raw)
    if not outcome.is_valid:
        return None
    return outcome.identifier.format(separator).long()


def generate_organisationsnummer(org_type: str = "5") -> str:
    """
    Generate a valid organisationsnummer for testing purposes.

    Args:
        org_type: Organization type digit (default: '5' for Aktiebolag).
            Must be 2-9 so that the group number is at least 20.

    Returns:
        A valid organisationsnummer in NNNNNNNNNN format
    """
    if len(org_type) != 1 or not org_type.isdigit():
        raise ValueError("Organization type must be a single digit")
    if int(org_type) * 10 < MIN_GROUP_NUMBER:
        raise ValueError("Organization type must be a single digit between 2 and 9")

    first_nine = f"{org_type}{random.randint(0, 99999999):08d}"

    return f"{first_nine}{luhn_checksum(first_nine)}"
