"""Inputs to rail selection and transaction validation."""

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

from payment_rails.models.enums import BeneficiaryType, RailType, Urgency, WireType
from payment_rails.models.identifiers import Iban, RoutingCode, SwiftCode
from payment_rails.models.money import Money


@dataclass(frozen=True)
class RailSelectionCriteria:
    """What the caller needs from a rail for one transaction."""

    amount_cents: int
    currency: str
    destination_country: str = "US"
    urgency: Urgency = Urgency.STANDARD
    prefer_low_cost: bool = False
    is_international: bool = False
    requires_recurring: bool = False
    beneficiary_type: Optional[BeneficiaryType] = None
    preferred_rail: Optional[RailType] = None

    def __post_init__(self):
        object.__setattr__(self, "currency", self.currency.strip().upper())
        object.__setattr__(self, "destination_country", (self.destination_country or "").strip().upper())
        object.__setattr__(self, "urgency", Urgency(self.urgency))
        if self.beneficiary_type is not None:
            object.__setattr__(self, "beneficiary_type", BeneficiaryType(self.beneficiary_type))
        if self.preferred_rail is not None:
            object.__setattr__(self, "preferred_rail", RailType(self.preferred_rail))

    def with_urgency(self, urgency: Urgency, prefer_low_cost: bool) -> "RailSelectionCriteria":
        return replace(self, urgency=urgency, prefer_low_cost=prefer_low_cost)

    def as_dict(self) -> dict[str, Any]:
        return {
            "amount_cents": self.amount_cents,
            "currency": self.currency,
            "destination_country": self.destination_country,
            "urgency": self.urgency.value,
            "prefer_low_cost": self.prefer_low_cost,
            "is_international": self.is_international,
            "requires_recurring": self.requires_recurring,
            "beneficiary_type": self.beneficiary_type.value if self.beneficiary_type else None,
            "preferred_rail": self.preferred_rail.value if self.preferred_rail else None,
        }


@dataclass(frozen=True)
class BankAccount:
    """Beneficiary bank details as supplied by the caller (unvalidated)."""

    account_number: str
    routing_code: Optional[str] = None
    swift_code: Optional[str] = None
    iban: Optional[str] = None


@dataclass(frozen=True)
class TransferRequest:
    """A transaction to be validated against a specific rail."""

    amount: Money
    beneficiary_name: str
    beneficiary_country: Optional[str] = None
    beneficiary_address: Optional[str] = None
    beneficiary_account: Optional[BankAccount] = None
    routing_code: Optional[str] = None
    is_international: bool = False
    purpose_of_payment: Optional[str] = None
    memo: Optional[str] = None
    metadata: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class WireInstruction:
    """Beneficiary and routing details of a single wire transfer."""

    wire_type: WireType
    amount: Money
    beneficiary_name: str
    beneficiary_account_number: str
    beneficiary_bank_name: str
    beneficiary_address: Optional[str] = None
    beneficiary_routing: Optional[RoutingCode] = None
    beneficiary_swift: Optional[SwiftCode] = None
    beneficiary_iban: Optional[Iban] = None
    intermediary_bank_name: Optional[str] = None
    intermediary_swift: Optional[SwiftCode] = None
    purpose_of_payment: Optional[str] = None

    @classmethod
    def domestic(
        cls,
        amount: Money,
        beneficiary_name: str,
        beneficiary_account_number: str,
        beneficiary_routing: RoutingCode,
        beneficiary_bank_name: str,
        purpose_of_payment: Optional[str] = None,
    ) -> "WireInstruction":
        return cls(
            wire_type=WireType.DOMESTIC,
            amount=amount,
            beneficiary_name=beneficiary_name,
            beneficiary_account_number=beneficiary_account_number,
            beneficiary_bank_name=beneficiary_bank_name,
            beneficiary_routing=beneficiary_routing,
            purpose_of_payment=purpose_of_payment,
        )

    @classmethod
    def international(
        cls,
        amount: Money,
        beneficiary_name: str,
        beneficiary_account_number: str,
        beneficiary_swift: SwiftCode,
        beneficiary_bank_name: str,
        beneficiary_iban: Optional[Iban] = None,
        beneficiary_address: Optional[str] = None,
        purpose_of_payment: Optional[str] = None,
    ) -> "WireInstruction":
        return cls(
            wire_type=WireType.INTERNATIONAL,
            amount=amount,
            beneficiary_name=beneficiary_name,
            beneficiary_account_number=beneficiary_account_number,
            beneficiary_bank_name=beneficiary_bank_name,
            beneficiary_address=beneficiary_address,
            beneficiary_swift=beneficiary_swift,
            beneficiary_iban=beneficiary_iban,
            purpose_of_payment=purpose_of_payment,
        )

    @classmethod
    def book_transfer(
        cls,
        amount: Money,
        beneficiary_name: str,
        beneficiary_account_number: str,
        purpose_of_payment: Optional[str] = None,
    ) -> "WireInstruction":
        return cls(
            wire_type=WireType.BOOK_TRANSFER,
            amount=amount,
            beneficiary_name=beneficiary_name,
            beneficiary_account_number=beneficiary_account_number,
            beneficiary_bank_name="Internal",
            purpose_of_payment=purpose_of_payment,
        )

    def with_intermediary_bank(self, bank_name: str, swift: SwiftCode) -> "WireInstruction":
        return replace(self, intermediary_bank_name=bank_name, intermediary_swift=swift)

    @property
    def has_intermediary_bank(self) -> bool:
        return self.intermediary_swift is not None or bool(self.intermediary_bank_name)

    @property
    def effective_account_number(self) -> str:
        if self.beneficiary_iban is not None:
            return self.beneficiary_iban.value
        return self.beneficiary_account_number

    def missing_fields(self) -> list[str]:
        missing = []
        if self.wire_type == WireType.DOMESTIC and self.beneficiary_routing is None:
            missing.append("beneficiary_routing")
        if self.wire_type == WireType.INTERNATIONAL and self.beneficiary_swift is None:
            missing.append("beneficiary_swift")
        if not self.beneficiary_name:
            missing.append("beneficiary_name")
        if not self.beneficiary_account_number and self.beneficiary_iban is None:
            missing.append("beneficiary_account_number")
        return missing
