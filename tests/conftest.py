"""Shared test fixtures."""

from datetime import date, datetime

import pytest

from payment_rails.ach.codec import AchCodec
from payment_rails.audit.logger import EventSink, RailSelected
from payment_rails.config import Settings
from payment_rails.models.enums import AccountType, SecCode
from payment_rails.models.identifiers import RoutingCode
from payment_rails.models.transfer import TransferBatch, TransferEntry, TransferFile
from payment_rails.rails.stock import default_rails


class CapturingEventSink(EventSink):
    """Keeps every published event for assertions."""

    def __init__(self):
        self.events: list[RailSelected] = []

    def publish(self, event: RailSelected) -> None:
        self.events.append(event)


@pytest.fixture
def test_settings() -> Settings:
    """Defaults only; ignores any .env in the working directory."""
    return Settings(_env_file=None)


@pytest.fixture
def capturing_sink() -> CapturingEventSink:
    return CapturingEventSink()


@pytest.fixture
def rails():
    return default_rails()


@pytest.fixture
def international_rails():
    return default_rails(international_wire=True)


@pytest.fixture
def codec() -> AchCodec:
    return AchCodec()


@pytest.fixture
def payroll_batch() -> TransferBatch:
    """Two credits, the first with an addenda record."""
    return TransferBatch(
        originator_name="ACME CORP",
        originator_id="1234567890",
        entry_description="PAYROLL",
        effective_date=date(2025, 9, 16),
        sec_code=SecCode.PPD,
        originating_routing=RoutingCode.of("021000021"),
        entries=(
            TransferEntry(
                routing_code=RoutingCode.of("121000248"),
                account_number="123456789",
                amount=60_000,
                receiver_name="JANE DOE",
                receiver_id="EMP001",
                addenda="Invoice 1001",
            ),
            TransferEntry(
                routing_code=RoutingCode.of("091000019"),
                account_number="987654321",
                amount=40_000,
                receiver_name="JOHN ROE",
                account_type=AccountType.SAVINGS,
            ),
        ),
    )


@pytest.fixture
def payroll_file(payroll_batch) -> TransferFile:
    return TransferFile(
        origin_routing=RoutingCode.of("021000021"),
        destination_routing=RoutingCode.of("026009593"),
        created_at=datetime(2025, 9, 15, 14, 30),
        batches=(payroll_batch,),
        origin_name="ACME CORP",
        destination_name="FIRST NATIONAL BANK",
        reference_code="REF00001",
    )


@pytest.fixture
def encoded_lines(codec, payroll_file) -> list[str]:
    return codec.encode(payroll_file).split("\n")
