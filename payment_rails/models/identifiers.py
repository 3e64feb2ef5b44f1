"""
Fixed-format bank identifiers: ABA routing code, IBAN and SWIFT/BIC.

Each type validates on construction and is immutable. ``parse()`` is the
non-raising factory: it returns a ``Parsed`` holding either the value or
the list of errors, so batch construction can short-circuit without
exception handling. ``of()`` raises instead.
"""

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from payment_rails.engine.checksums import (
    is_valid_iban,
    is_valid_swift_code,
    normalize_iban,
    validate_routing_code,
)
from payment_rails.errors import InvalidRoutingCodeError, mask_routing_code

T = TypeVar("T")


@dataclass(frozen=True)
class Parsed(Generic[T]):
    """Outcome of a validating factory."""

    value: Optional[T] = None
    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors


@dataclass(frozen=True)
class RoutingCode:
    """9-digit ABA routing number with a valid weighted checksum."""

    value: str

    def __post_init__(self):
        errors = validate_routing_code(self.value)
        if errors:
            raise InvalidRoutingCodeError(str(self.value or ""), errors[0].rstrip("."))

    @classmethod
    def parse(cls, raw: Optional[str]) -> Parsed["RoutingCode"]:
        value = (raw or "").strip()
        errors = validate_routing_code(value)
        if errors:
            return Parsed(errors=tuple(errors))
        return Parsed(value=cls(value))

    @classmethod
    def of(cls, raw: str) -> "RoutingCode":
        return cls((raw or "").strip())

    @property
    def prefix(self) -> str:
        """First 8 digits (the DFI identification)."""
        return self.value[:8]

    @property
    def check_digit(self) -> str:
        return self.value[8]

    @property
    def masked(self) -> str:
        return mask_routing_code(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"RoutingCode('{self.masked}')"


@dataclass(frozen=True)
class Iban:
    """International Bank Account Number, stored without spaces."""

    value: str

    def __post_init__(self):
        normalized = normalize_iban(self.value)
        if not is_valid_iban(normalized):
            raise ValueError("Invalid IBAN format.")
        object.__setattr__(self, "value", normalized)

    @classmethod
    def parse(cls, raw: Optional[str]) -> Parsed["Iban"]:
        if not is_valid_iban(raw):
            return Parsed(errors=("Invalid IBAN format.",))
        return Parsed(value=cls(raw))

    @property
    def country_code(self) -> str:
        return self.value[:2]

    @property
    def check_digits(self) -> str:
        return self.value[2:4]

    @property
    def formatted(self) -> str:
        """Print format: groups of four separated by spaces."""
        return " ".join(self.value[i:i + 4] for i in range(0, len(self.value), 4))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SwiftCode:
    """SWIFT/BIC code, 8 or 11 characters."""

    value: str

    def __post_init__(self):
        normalized = str(self.value or "").strip().upper()
        if not is_valid_swift_code(normalized):
            raise ValueError("Invalid SWIFT/BIC code format.")
        object.__setattr__(self, "value", normalized)

    @classmethod
    def parse(cls, raw: Optional[str]) -> Parsed["SwiftCode"]:
        if not is_valid_swift_code((raw or "").strip()):
            return Parsed(errors=("Invalid SWIFT/BIC code format.",))
        return Parsed(value=cls(raw))

    @property
    def bank_code(self) -> str:
        return self.value[:4]

    @property
    def country_code(self) -> str:
        return self.value[4:6]

    @property
    def location_code(self) -> str:
        return self.value[6:8]

    @property
    def branch_code(self) -> str:
        """Branch code; 'XXX' (primary office) when the 8-char form is used."""
        return self.value[8:] or "XXX"

    def __str__(self) -> str:
        return self.value
