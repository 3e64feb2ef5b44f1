"""
Money as integer minor units.

Amounts are never floats: capability limits, criteria, entries and control
totals all carry integer cents so sums are exact. ``from_decimal`` and
``to_decimal`` are the only conversions to and from major units.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from functools import total_ordering
from typing import Union

MINOR_UNITS = Decimal("0.01")


@total_ordering
@dataclass(frozen=True)
class Money:
    amount: int  # minor units
    currency: str

    def __post_init__(self):
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise TypeError(f"Money amount must be int minor units, got {type(self.amount).__name__}")
        object.__setattr__(self, "currency", self.currency.strip().upper())

    @classmethod
    def zero(cls, currency: str) -> "Money":
        return cls(0, currency)

    @classmethod
    def from_decimal(cls, value: Union[Decimal, str, int], currency: str) -> "Money":
        """Convert a major-unit amount ('1234.56') to minor units."""
        quantized = Decimal(str(value)).quantize(MINOR_UNITS, rounding=ROUND_HALF_EVEN)
        return cls(int(quantized * 100), currency)

    def to_decimal(self) -> Decimal:
        return (Decimal(self.amount) / 100).quantize(MINOR_UNITS)

    def _check_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValueError(f"Currency mismatch: {self.currency} vs {other.currency}")

    def __add__(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __lt__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount < other.amount

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    @property
    def is_negative(self) -> bool:
        return self.amount < 0

    def __str__(self) -> str:
        return f"{self.currency} {self.to_decimal():,.2f}"
