"""
Transfer entries, batches and files.

These are the structured form of an ACH file. They are immutable: every
aggregate (counts, entry hash, debit/credit totals) is derived from the
entries on demand, so a batch can never disagree with its own control
record. To change anything, build a new value (``dataclasses.replace`` or
the ``with_*`` helpers).
"""

import math
import re
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Iterable, Optional

from payment_rails.models.enums import AccountType, SecCode, ServiceClassCode, TransactionCode
from payment_rails.models.identifiers import RoutingCode

ENTRY_HASH_MODULUS = 10_000_000_000
BLOCKING_FACTOR = 10
_FILE_ID_MODIFIER = re.compile(r"[A-Z0-9]")


def compute_entry_hash(routing_codes: Iterable[str]) -> str:
    """
    Sum the 8-digit DFI prefix of every routing code, modulo 10^10.

    Returns:
        The hash as a zero-padded 10-digit string.
    """
    total = sum(int(str(code)[:8]) for code in routing_codes)
    return str(total % ENTRY_HASH_MODULUS).zfill(10)


@dataclass(frozen=True)
class TransferEntry:
    """One transfer instruction (a single entry-detail record)."""

    routing_code: RoutingCode
    account_number: str
    amount: int  # minor units
    receiver_name: str
    account_type: AccountType = AccountType.CHECKING
    is_debit: bool = False
    receiver_id: str = ""
    addenda: Optional[str] = None
    trace_number: Optional[str] = None
    discretionary_data: str = ""
    is_prenote: bool = False

    def __post_init__(self):
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise TypeError("Entry amount must be int minor units")
        if self.amount < 0:
            raise ValueError("Entry amount cannot be negative")
        if self.is_prenote and self.amount != 0:
            raise ValueError("Prenote entries must carry a zero amount")
        if not self.is_prenote and self.amount == 0:
            raise ValueError("Zero-amount entries are only allowed for prenotes")
        if not self.account_number or not self.account_number.strip():
            raise ValueError("Entry account number is required")

    @classmethod
    def prenote(
        cls,
        routing_code: RoutingCode,
        account_number: str,
        receiver_name: str,
        account_type: AccountType = AccountType.CHECKING,
        is_debit: bool = False,
        receiver_id: str = "",
    ) -> "TransferEntry":
        """Zero-amount probe that verifies an account before live entries."""
        return cls(
            routing_code=routing_code,
            account_number=account_number,
            amount=0,
            receiver_name=receiver_name,
            account_type=account_type,
            is_debit=is_debit,
            receiver_id=receiver_id,
            is_prenote=True,
        )

    @property
    def transaction_code(self) -> TransactionCode:
        return TransactionCode.for_entry(self.account_type, self.is_debit, self.is_prenote)

    @property
    def has_addenda(self) -> bool:
        return bool(self.addenda)

    @property
    def addenda_indicator(self) -> str:
        return "1" if self.has_addenda else "0"

    def with_addenda(self, text: str) -> "TransferEntry":
        return replace(self, addenda=text)


@dataclass(frozen=True)
class TransferBatch:
    """Entries sharing originator, description, effective date and SEC code."""

    originator_name: str
    originator_id: str
    entry_description: str
    effective_date: date
    sec_code: SecCode
    originating_routing: RoutingCode
    entries: tuple[TransferEntry, ...] = field(default_factory=tuple)
    discretionary_data: str = ""
    descriptive_date: Optional[date] = None
    batch_number: int = 0  # 0 = assign from position in file

    def __post_init__(self):
        object.__setattr__(self, "entries", tuple(self.entries))

    def with_entry(self, entry: TransferEntry) -> "TransferBatch":
        return replace(self, entries=self.entries + (entry,))

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    @property
    def addenda_count(self) -> int:
        return sum(1 for e in self.entries if e.has_addenda)

    @property
    def record_count(self) -> int:
        """Records emitted for this batch: header, entries, addenda, control."""
        return 2 + self.entry_count + self.addenda_count

    @property
    def entry_hash(self) -> str:
        return compute_entry_hash(e.routing_code.value for e in self.entries)

    @property
    def total_debits(self) -> int:
        return sum(e.amount for e in self.entries if e.is_debit)

    @property
    def total_credits(self) -> int:
        return sum(e.amount for e in self.entries if not e.is_debit)

    @property
    def service_class_code(self) -> ServiceClassCode:
        has_debits = any(e.is_debit for e in self.entries)
        has_credits = any(not e.is_debit for e in self.entries)
        if has_debits and not has_credits:
            return ServiceClassCode.DEBITS_ONLY
        if has_credits and not has_debits:
            return ServiceClassCode.CREDITS_ONLY
        return ServiceClassCode.MIXED


@dataclass(frozen=True)
class TransferFile:
    """An ACH file: ordered batches plus file-level identity."""

    origin_routing: RoutingCode
    destination_routing: RoutingCode
    created_at: datetime
    batches: tuple[TransferBatch, ...] = field(default_factory=tuple)
    file_id_modifier: str = "A"
    origin_name: str = ""
    destination_name: str = ""
    reference_code: str = ""

    def __post_init__(self):
        object.__setattr__(self, "batches", tuple(self.batches))
        if not _FILE_ID_MODIFIER.fullmatch(self.file_id_modifier or ""):
            raise ValueError(f"File ID modifier must be A-Z or 0-9, got {self.file_id_modifier!r}")

    def with_batch(self, batch: TransferBatch) -> "TransferFile":
        return replace(self, batches=self.batches + (batch,))

    @property
    def batch_count(self) -> int:
        return len(self.batches)

    @property
    def entry_count(self) -> int:
        return sum(b.entry_count for b in self.batches)

    @property
    def addenda_count(self) -> int:
        return sum(b.addenda_count for b in self.batches)

    @property
    def entry_hash(self) -> str:
        return compute_entry_hash(e.routing_code.value for b in self.batches for e in b.entries)

    @property
    def total_debits(self) -> int:
        return sum(b.total_debits for b in self.batches)

    @property
    def total_credits(self) -> int:
        return sum(b.total_credits for b in self.batches)

    @property
    def record_count(self) -> int:
        """Records before blocking: file header and control plus every batch."""
        return 2 + sum(b.record_count for b in self.batches)

    @property
    def block_count(self) -> int:
        return math.ceil(self.record_count / BLOCKING_FACTOR)
