"""
Checksum and format algorithms for bank identifiers.

  - ABA routing number: 9 digits, weights 3-7-1 repeating, sum mod 10 == 0.
    Numbers starting with 5 are reserved and never valid ABA numbers.
  - IBAN: ISO 13616 mod-97 check after rotating the country code and check
    digits to the end and expanding letters (A=10 ... Z=35).
  - SWIFT/BIC: 4 bank letters, 2 country letters, 2 location chars,
    optional 3 branch chars.

These functions never raise on malformed input; they report.
"""

import re
from typing import Optional

ROUTING_CODE_LENGTH = 9
ROUTING_WEIGHTS = (3, 7, 1, 3, 7, 1, 3, 7, 1)
RESERVED_ROUTING_PREFIX = "5"

IBAN_MIN_LENGTH = 15
IBAN_MAX_LENGTH = 34

SWIFT_PATTERN = re.compile(r"[A-Z]{4}[A-Z]{2}[A-Z0-9]{2}([A-Z0-9]{3})?")
_IBAN_PREFIX = re.compile(r"^[A-Z]{2}[0-9]{2}")
_IBAN_BODY = re.compile(r"[A-Z0-9]+")


def routing_checksum(digits: str) -> int:
    """Weighted digit sum of a routing number (or its 8-digit prefix)."""
    return sum(int(d) * w for d, w in zip(digits, ROUTING_WEIGHTS))


def routing_check_digit(prefix: str) -> str:
    """Check digit that completes an 8-digit routing prefix."""
    return str((10 - routing_checksum(prefix[:8]) % 10) % 10)


def validate_routing_code(code: Optional[str]) -> list[str]:
    """
    Validate an ABA routing number.

    Returns:
        Distinct human-readable errors; empty means valid.
    """
    value = "" if code is None else str(code)
    errors: list[str] = []

    if len(value) != ROUTING_CODE_LENGTH:
        errors.append("Routing number must be exactly 9 digits.")
    if not value.isdigit() or not value.isascii():
        errors.append("Routing number must contain only digits.")
    if errors:
        return errors

    if routing_checksum(value) % 10 != 0:
        errors.append("Routing number checksum is invalid.")

    if value.startswith(RESERVED_ROUTING_PREFIX):
        errors.append("Routing numbers starting with 5 are not valid ABA numbers.")

    return errors


def is_valid_swift_code(code: Optional[str]) -> bool:
    if not code:
        return False
    return SWIFT_PATTERN.fullmatch(str(code).upper()) is not None


def normalize_iban(code: str) -> str:
    return str(code).replace(" ", "").upper()


def is_valid_iban(code: Optional[str]) -> bool:
    if not code:
        return False

    iban = normalize_iban(code)

    if not IBAN_MIN_LENGTH <= len(iban) <= IBAN_MAX_LENGTH:
        return False
    if not _IBAN_PREFIX.match(iban) or not _IBAN_BODY.fullmatch(iban) or not iban.isascii():
        return False

    rearranged = iban[4:] + iban[:4]
    numeric = "".join(str(ord(ch) - 55) if ch.isalpha() else ch for ch in rearranged)

    return int(numeric) % 97 == 1
