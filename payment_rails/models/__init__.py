from payment_rails.models.capabilities import RailCapabilities
from payment_rails.models.enums import (
    AccountType,
    BeneficiaryType,
    IneligibilityReason,
    RailType,
    SecCode,
    ServiceClassCode,
    TransactionCode,
    Urgency,
    WireType,
)
from payment_rails.models.identifiers import Iban, Parsed, RoutingCode, SwiftCode
from payment_rails.models.money import Money
from payment_rails.models.requests import (
    BankAccount,
    RailSelectionCriteria,
    TransferRequest,
    WireInstruction,
)
from payment_rails.models.transfer import (
    TransferBatch,
    TransferEntry,
    TransferFile,
    compute_entry_hash,
)

__all__ = [
    "AccountType",
    "BankAccount",
    "BeneficiaryType",
    "Iban",
    "IneligibilityReason",
    "Money",
    "Parsed",
    "RailCapabilities",
    "RailSelectionCriteria",
    "RailType",
    "RoutingCode",
    "SecCode",
    "ServiceClassCode",
    "SwiftCode",
    "TransactionCode",
    "TransferBatch",
    "TransferEntry",
    "TransferFile",
    "TransferRequest",
    "Urgency",
    "WireInstruction",
    "WireType",
    "compute_entry_hash",
]
