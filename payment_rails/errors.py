"""
Exception hierarchy for payment rail operations.

Every error carries structured context (the full error list, the criteria
that failed selection, a masked routing code) so callers can report
without re-parsing messages:

    PaymentRailsError
    ├── InvalidRoutingCodeError   : routing code failed format/checksum
    ├── ValidationFailedError     : transaction failed business rules
    ├── WireValidationError       : wire instruction is incomplete
    ├── NoEligibleRailError       : no rail passed eligibility
    ├── AchParseError             : ACH file is structurally broken
    └── FieldOverflowError        : numeric value does not fit its field

Routing codes never appear unmasked in any message.
"""

from typing import Any


def mask_routing_code(code: str) -> str:
    """Mask all but the last four characters ('*****6789')."""
    code = code or ""
    if len(code) <= 4:
        return "*" * len(code)
    return "*" * (len(code) - 4) + code[-4:]


class PaymentRailsError(Exception):
    """Base exception for payment rail errors."""


class InvalidRoutingCodeError(PaymentRailsError, ValueError):
    """A routing code failed validation."""

    def __init__(self, code: str, reason: str):
        self.masked_code = mask_routing_code(code)
        self.reason = reason
        super().__init__(f"Invalid routing number '{self.masked_code}': {reason}")


class ValidationFailedError(PaymentRailsError):
    """A transaction request violated one or more rail rules."""

    def __init__(self, errors: list[str], rail_type: str | None = None):
        self.errors = list(errors)
        self.rail_type = rail_type
        label = f"{rail_type.upper()} validation" if rail_type else "Validation"
        super().__init__(f"{label} failed with {len(self.errors)} error(s)")


class WireValidationError(PaymentRailsError):
    """A wire instruction is missing required beneficiary details."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(f"Wire transfer validation failed with {len(self.errors)} error(s)")


class NoEligibleRailError(PaymentRailsError):
    """No injected rail can carry the transaction described by ``criteria``."""

    def __init__(self, criteria: Any, reasons: dict[str, str] | None = None):
        self.criteria = criteria
        self.reasons = reasons or {}
        super().__init__(
            f"No eligible payment rail for {criteria.currency} {criteria.amount_cents} "
            f"(urgency={criteria.urgency.value}, international={criteria.is_international})"
        )


class AchParseError(PaymentRailsError, ValueError):
    """ACH content cannot be decoded."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"Record {line_number}: {message}"
        super().__init__(message)


class FieldOverflowError(PaymentRailsError, ValueError):
    """A numeric value has more digits than its fixed-width field allows."""

    def __init__(self, field_name: str, width: int, value: str):
        self.field_name = field_name
        self.width = width
        super().__init__(f"Field '{field_name}' holds {width} digits, got {len(value)}")
