"""
Validation policy for organisationsnummer.

Steps:
1. Normalize the raw string (terminal on failure)
2. Decompose under organisation rules
3. If the group number is below 20, decompose again under personnummer
   rules; every other structural error is terminal
4. Verify the Luhn check digit (terminal on failure, in either mode)

Invalid input is an ordinary outcome here, reported through
ValidationOutcome rather than raised.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from organisationsnummer.checksum import checksum_valid, luhn_checksum
from organisationsnummer.config import Settings, settings as default_settings
from organisationsnummer.errors import (
    ChecksumError,
    StructureError,
    StructureErrorKind,
    ValidationError,
)
from organisationsnummer.identifier import Organisationsnummer
from organisationsnummer.normalize import NormalizedInput, normalize
from organisationsnummer.structure import IdentifierFields, ValidationMode, decompose

logger = logging.getLogger(__name__)

# Organisation-mode failure meaning "these digits follow the personnummer layout"
FALLBACK_KINDS = frozenset({StructureErrorKind.GROUP_TOO_LOW})


@dataclass
class ValidationOutcome:
    """Result of validating one raw string."""

    raw: str
    is_valid: bool
    identifier: Optional[Organisationsnummer] = None
    error: Optional[ValidationError] = None

    @property
    def mode(self) -> Optional[ValidationMode]:
        return self.identifier.mode if self.identifier else None


def mask(digits: str) -> str:
    """Hide the last four digits so identifiers can be logged."""
    return f"{digits[:6]}****"


def _check_digits(fields: IdentifierFields) -> None:
    if not checksum_valid(fields.payload, fields.check_digit):
        raise ChecksumError(
            expected=luhn_checksum(fields.payload), actual=fields.check_digit
        )


def _decompose(normalized: NormalizedInput, config: Settings) -> IdentifierFields:
    try:
        return decompose(
            normalized, ValidationMode.ORGANISATION, config.accepted_prefixes
        )
    except StructureError as e:
        if e.kind not in FALLBACK_KINDS:
            raise
        logger.debug(
            "%s rejected as organisationsnummer (%s), trying personnummer rules",
            mask(normalized.digits),
            e.kind.value,
        )

    try:
        return decompose(normalized, ValidationMode.PERSONNUMMER)
    except StructureError as e:
        # Digits failing the shared checksum are reported as such, whatever
        # the date digits look like.
        payload, check = normalized.digits[:9], int(normalized.digits[9])
        if not checksum_valid(payload, check):
            raise ChecksumError(expected=luhn_checksum(payload), actual=check) from e
        raise


def _resolve_century(
    normalized: NormalizedInput, fields: IdentifierFields, config: Settings
) -> str:
    if normalized.century is not None:
        return normalized.century
    if fields.personnummer is not None:
        return fields.personnummer.century
    return config.default_century


def validate(raw: str, settings: Optional[Settings] = None) -> ValidationOutcome:
    """
    Validate ``raw`` as an organisationsnummer.

    Args:
        raw: Candidate string in short or long format, with or without separator
        settings: Settings to use instead of the global ones

    Returns:
        ValidationOutcome with the parsed identifier, or the error describing
        why the input was rejected
    """
    config = settings or default_settings

    try:
        normalized = normalize(raw)
        fields = _decompose(normalized, config)
        _check_digits(fields)
    except ValidationError as e:
        logger.debug("Invalid organisationsnummer input: %s", e)
        return ValidationOutcome(raw=raw, is_valid=False, error=e)

    identifier = Organisationsnummer(
        digits=fields.digits,
        mode=fields.mode,
        personnummer_info=fields.personnummer,
        century=_resolve_century(normalized, fields, config),
        separator=normalized.separator,
    )
    logger.debug("%s valid as %s", mask(fields.digits), fields.mode.value)

    return ValidationOutcome(raw=raw, is_valid=True, identifier=identifier)
