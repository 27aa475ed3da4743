"""
Errors raised for invalid organisationsnummer input.

Every invalid-input outcome is a ValidationError subclass carrying a
``kind`` so callers can tell why a number was rejected. Contract violations
inside the library (e.g. the checksum engine fed the wrong number of digits)
raise ValueError instead.
"""

from enum import Enum
from typing import Optional


class FormatErrorKind(str, Enum):
    """Why the raw input could not be normalized."""

    INVALID_LENGTH = "invalid_length"
    NON_NUMERIC = "non_numeric"


class StructureErrorKind(str, Enum):
    """Which field-level constraint the digits violated."""

    GROUP_TOO_LOW = "group_too_low"
    INVALID_PREFIX = "invalid_prefix"
    INVALID_DATE_DIGITS = "invalid_date_digits"


class ValidationError(Exception):
    """Raised when a string is not a valid organisationsnummer."""

    pass


class FormatError(ValidationError):
    """Raised when input has the wrong length or contains non-digits."""

    def __init__(self, kind: FormatErrorKind, message: Optional[str] = None):
        self.kind = kind
        super().__init__(message or kind.value)


class StructureError(ValidationError):
    """Raised when digit groups violate the constraints of a validation mode."""

    def __init__(self, kind: StructureErrorKind, message: Optional[str] = None):
        self.kind = kind
        super().__init__(message or kind.value)


class ChecksumError(ValidationError):
    """Raised when the check digit does not match the Luhn checksum."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid check digit (expected {expected}, got {actual})")
