"""Enumerations for the payment rails domain model."""

from enum import Enum


class RailType(str, Enum):
    """Supported payment rails."""

    ACH = "ach"
    WIRE = "wire"
    CHECK = "check"
    RTGS = "rtgs"
    VIRTUAL_CARD = "virtual_card"


class Urgency(str, Enum):
    """How quickly the beneficiary must receive funds."""

    STANDARD = "standard"
    URGENT = "urgent"
    REAL_TIME = "real-time"


class BeneficiaryType(str, Enum):
    INDIVIDUAL = "individual"
    BUSINESS = "business"
    VENDOR = "vendor"
    EMPLOYEE = "employee"


class WireType(str, Enum):
    DOMESTIC = "domestic"
    INTERNATIONAL = "international"
    BOOK_TRANSFER = "book_transfer"


class AccountType(str, Enum):
    CHECKING = "checking"
    SAVINGS = "savings"


class SecCode(str, Enum):
    """NACHA Standard Entry Class codes (batch transfer category)."""

    PPD = "PPD"  # Prearranged payment and deposit (consumer)
    CCD = "CCD"  # Corporate credit or debit
    CTX = "CTX"  # Corporate trade exchange
    WEB = "WEB"  # Internet-initiated consumer entry
    TEL = "TEL"  # Telephone-initiated consumer entry
    IAT = "IAT"  # International ACH transaction


class ServiceClassCode(str, Enum):
    """Batch service class, derived from the mix of entry directions."""

    MIXED = "200"
    CREDITS_ONLY = "220"
    DEBITS_ONLY = "225"


class TransactionCode(str, Enum):
    """NACHA entry-detail transaction codes."""

    CHECKING_CREDIT = "22"
    CHECKING_CREDIT_PRENOTE = "23"
    CHECKING_DEBIT = "27"
    CHECKING_DEBIT_PRENOTE = "28"
    SAVINGS_CREDIT = "32"
    SAVINGS_CREDIT_PRENOTE = "33"
    SAVINGS_DEBIT = "37"
    SAVINGS_DEBIT_PRENOTE = "38"

    @classmethod
    def for_entry(cls, account_type: AccountType, is_debit: bool, is_prenote: bool = False) -> "TransactionCode":
        base = 20 if account_type == AccountType.CHECKING else 30
        offset = 7 if is_debit else 2
        if is_prenote:
            offset += 1
        return cls(str(base + offset))

    @property
    def account_type(self) -> AccountType:
        return AccountType.SAVINGS if self.value.startswith("3") else AccountType.CHECKING

    @property
    def is_debit(self) -> bool:
        return self.value[1] in ("7", "8")

    @property
    def is_prenote(self) -> bool:
        return self.value[1] in ("3", "8")


class IneligibilityReason(str, Enum):
    """Categorized reasons a rail was filtered out during selection."""

    UNAVAILABLE = "unavailable"
    UNSUPPORTED_CURRENCY = "unsupported_currency"
    AMOUNT_OUT_OF_BOUNDS = "amount_out_of_bounds"
    TOO_SLOW = "too_slow"
    NOT_REAL_TIME = "not_real_time"
    RECURRING_UNSUPPORTED = "recurring_unsupported"
    RAIL_RULE = "rail_rule"
