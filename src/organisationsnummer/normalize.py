"""
Input normalization for organisationsnummer strings.

Accepts formats:
- NNNNNN-NNNN / NNNNNNNNNN
- CCNNNNNN-NNNN / CCNNNNNNNNNN (with a 2-digit century prefix)

The separator ('-', '+' or a space) is only recognised immediately before the
last four digits.
"""

import re
from dataclasses import dataclass
from typing import Optional

from organisationsnummer.errors import FormatError, FormatErrorKind

SEPARATORS = ("-", "+", " ")


@dataclass(frozen=True)
class NormalizedInput:
    """Digits of an identifier with formatting removed."""

    digits: str  # exactly 10 digits
    century: Optional[str] = None
    separator: Optional[str] = None


def normalize(raw: str) -> NormalizedInput:
    """
    Strip formatting from ``raw`` and split off an optional century prefix.

    Raises:
        FormatError: NON_NUMERIC if anything but digits remains after the
            separator is removed, INVALID_LENGTH if the digit count is not
            10 or 12
    """
    value = raw.strip()

    separator = None
    if len(value) > 4 and value[-5] in SEPARATORS:
        separator = value[-5]
        value = value[:-5] + value[-4:]

    if not re.fullmatch(r"[0-9]*", value):
        raise FormatError(
            FormatErrorKind.NON_NUMERIC,
            "Organisationsnummer may only contain digits and one separator",
        )

    if len(value) == 12:
        return NormalizedInput(digits=value[2:], century=value[:2], separator=separator)
    if len(value) == 10:
        return NormalizedInput(digits=value, separator=separator)

    raise FormatError(
        FormatErrorKind.INVALID_LENGTH,
        f"Organisationsnummer must be 10 or 12 digits, got {len(value)}",
    )
