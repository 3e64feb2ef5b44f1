"""
Static per-rail capability descriptors.

A RailCapabilities value describes what a rail can carry: currencies,
amount limits (integer minor units), how long settlement usually takes and
which optional features it supports. The ``for_*`` presets describe the
stock US rails.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class RailCapabilities:
    """Capabilities and limits of a payment rail."""

    supported_currencies: frozenset[str]
    minimum_amount: int = 0  # minor units
    maximum_amount: Optional[int] = None  # None = no practical limit
    typical_settlement_days: int = 1
    real_time: bool = False
    supports_recurring: bool = True
    flags: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self,
            "supported_currencies",
            frozenset(c.upper() for c in self.supported_currencies),
        )

    def supports_currency(self, currency: str) -> bool:
        return (currency or "").upper() in self.supported_currencies

    def is_amount_within_limits(self, amount_cents: int) -> bool:
        if amount_cents < self.minimum_amount:
            return False
        if self.maximum_amount is not None and amount_cents > self.maximum_amount:
            return False
        return True

    @property
    def is_real_time(self) -> bool:
        return self.real_time or self.typical_settlement_days == 0

    def has_capability(self, name: str) -> bool:
        return self.flags.get(name) is True

    def get_capability(self, name: str, default: Any = None) -> Any:
        return self.flags.get(name, default)

    # ─── Stock presets ──────────────────────────────────────────────────

    @classmethod
    def for_ach(cls) -> "RailCapabilities":
        return cls(
            supported_currencies=frozenset({"USD"}),
            minimum_amount=1,
            maximum_amount=9_999_999_999,  # fits the 10-digit entry amount field
            typical_settlement_days=2,
            supports_recurring=True,
            flags={
                "supports_refunds": True,
                "supports_addenda": True,
                "supports_same_day": True,
            },
        )

    @classmethod
    def for_domestic_wire(cls) -> "RailCapabilities":
        return cls(
            supported_currencies=frozenset({"USD"}),
            minimum_amount=100,
            maximum_amount=None,
            typical_settlement_days=0,
            real_time=True,
            supports_recurring=False,
            flags={"supports_refunds": False, "supports_intermediary_bank": True},
        )

    @classmethod
    def for_international_wire(cls) -> "RailCapabilities":
        return cls(
            supported_currencies=frozenset({"USD", "EUR", "GBP", "MYR", "SGD", "CAD", "AUD", "JPY", "CHF"}),
            minimum_amount=100,
            maximum_amount=None,
            typical_settlement_days=2,
            supports_recurring=False,
            flags={
                "supports_iban": True,
                "supports_intermediary_bank": True,
                "requires_purpose_of_payment": True,
            },
        )

    @classmethod
    def for_check(cls) -> "RailCapabilities":
        return cls(
            supported_currencies=frozenset({"USD"}),
            minimum_amount=1,
            maximum_amount=999_999_999,
            typical_settlement_days=5,
            supports_recurring=True,
            flags={"supports_refunds": False, "supports_positive_pay": True},
        )

    @classmethod
    def for_rtgs(cls) -> "RailCapabilities":
        return cls(
            supported_currencies=frozenset({"USD"}),
            minimum_amount=2_500_000,
            maximum_amount=None,
            typical_settlement_days=0,
            real_time=True,
            supports_recurring=False,
            flags={"supports_refunds": False, "is_irrevocable": True},
        )

    @classmethod
    def for_virtual_card(cls) -> "RailCapabilities":
        return cls(
            supported_currencies=frozenset({"USD", "EUR", "GBP", "CAD"}),
            minimum_amount=1,
            maximum_amount=25_000_000,
            typical_settlement_days=2,
            supports_recurring=True,
            flags={"supports_refunds": True, "supports_single_use": True},
        )
