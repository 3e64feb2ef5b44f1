"""Tests for audit events, configuration and error messages."""

import json
import logging

from payment_rails.audit.logger import AuditEventSink, NullEventSink, RailSelected, log_event
from payment_rails.config import Settings
from payment_rails.errors import NoEligibleRailError, ValidationFailedError, mask_routing_code
from payment_rails.models.enums import RailType, Urgency
from payment_rails.models.requests import RailSelectionCriteria


def _event():
    criteria = RailSelectionCriteria(amount_cents=15_000_000, currency="USD", urgency=Urgency.URGENT)
    return RailSelected(rail_type=RailType.WIRE, criteria=criteria, score=100.0)


class TestAuditSink:
    def test_writes_audit_line(self, caplog):
        with caplog.at_level(logging.INFO, logger="payment_rails.audit"):
            AuditEventSink(max_detail_length=2000).publish(_event())

        assert len(caplog.records) == 1
        message = caplog.records[0].getMessage()
        assert message.startswith("AUDIT | action=rail_selected | ")
        details = json.loads(message.split(" | ", 2)[2])
        assert details["rail"] == "wire"
        assert details["criteria"]["urgency"] == "urgent"

    def test_details_truncated(self, caplog):
        with caplog.at_level(logging.INFO, logger="payment_rails.audit"):
            log_event("rail_selected", {"note": "x" * 1000}, max_length=50)
        assert len(caplog.records[0].getMessage().split(" | ", 2)[2]) == 50

    def test_null_sink_discards(self):
        assert NullEventSink().publish(_event()) is None


class TestSettings:
    def test_defaults(self, test_settings):
        assert test_settings.domestic_currency == "USD"
        assert test_settings.medium_value_threshold_cents == 1_000_000
        assert test_settings.high_value_threshold_cents == 10_000_000
        assert "KP" in test_settings.sanctioned_countries

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PAYMENT_RAILS_RTGS_MINIMUM_CENTS", "500000")
        assert Settings(_env_file=None).rtgs_minimum_cents == 500_000


class TestErrors:
    def test_mask_routing_code(self):
        assert mask_routing_code("123456789") == "*****6789"
        assert mask_routing_code("1234") == "****"
        assert mask_routing_code("") == ""

    def test_validation_failed_message(self):
        assert str(ValidationFailedError(["a"])) == "Validation failed with 1 error(s)"
        assert str(ValidationFailedError(["a", "b"], rail_type="wire")) == "WIRE validation failed with 2 error(s)"

    def test_no_eligible_rail_carries_criteria(self):
        criteria = RailSelectionCriteria(amount_cents=100, currency="XYZ")
        error = NoEligibleRailError(criteria)
        assert error.criteria is criteria
        assert "XYZ" in str(error)
