"""
Luhn (mod 10) checksum shared by organisationsnummer and personnummer.

Both identifiers use the same 10-digit layout, so the check digit is computed
over the first nine digits regardless of which rule set is being applied.
"""


def luhn_checksum(digits: str) -> int:
    """
    Calculate the Luhn check digit for nine digits.

    The Luhn algorithm:
    1. Double every digit at an even position (0-indexed from the left)
    2. If doubling results in > 9, subtract 9
    3. Sum all digits
    4. Checksum is (10 - (sum % 10)) % 10

    Raises:
        ValueError: If ``digits`` is not exactly nine decimal digits
    """
    if len(digits) != 9 or not digits.isdigit():
        raise ValueError(f"Luhn checksum needs exactly 9 digits, got {digits!r}")

    total = 0
    for i, digit in enumerate(digits):
        d = int(digit)
        if i % 2 == 0:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return (10 - (total % 10)) % 10


def checksum_valid(digits: str, expected: int) -> bool:
    """Check that ``expected`` is the Luhn check digit of the nine ``digits``."""
    return luhn_checksum(digits) == expected
