"""Tests for rail eligibility checks."""

from payment_rails.models.capabilities import RailCapabilities
from payment_rails.models.enums import BeneficiaryType, IneligibilityReason, RailType, Urgency
from payment_rails.models.requests import RailSelectionCriteria
from payment_rails.rails.stock import StaticRail
from payment_rails.routing.eligibility import check_eligibility

ACH = StaticRail(RailType.ACH, RailCapabilities.for_ach())
WIRE = StaticRail(RailType.WIRE, RailCapabilities.for_domestic_wire())
INTL_WIRE = StaticRail(RailType.WIRE, RailCapabilities.for_international_wire())
CHECK = StaticRail(RailType.CHECK, RailCapabilities.for_check())
RTGS = StaticRail(RailType.RTGS, RailCapabilities.for_rtgs())
VCARD = StaticRail(RailType.VIRTUAL_CARD, RailCapabilities.for_virtual_card())


def _criteria(amount_cents=50_000, currency="USD", **kwargs):
    return RailSelectionCriteria(amount_cents=amount_cents, currency=currency, **kwargs)


class TestEligibility:
    def test_ach_low_value(self, test_settings):
        assert check_eligibility(ACH, _criteria(), test_settings).eligible is True

    def test_domestic_wire_medium_value(self, test_settings):
        assert check_eligibility(WIRE, _criteria(1_000_000), test_settings).eligible is True

    def test_international_wire_any_value(self, test_settings):
        criteria = _criteria(10_000, currency="EUR", is_international=True)
        assert check_eligibility(INTL_WIRE, criteria, test_settings).eligible is True

    def test_vendor_virtual_card(self, test_settings):
        criteria = _criteria(beneficiary_type=BeneficiaryType.VENDOR)
        assert check_eligibility(VCARD, criteria, test_settings).eligible is True

    def test_criteria_accepts_plain_strings(self, test_settings):
        criteria = _criteria(beneficiary_type="vendor", urgency="standard", currency="usd")
        assert check_eligibility(VCARD, criteria, test_settings).eligible is True


class TestIneligibilityReasons:
    def test_unavailable(self, test_settings):
        rail = StaticRail(RailType.ACH, RailCapabilities.for_ach(), available=False)
        result = check_eligibility(rail, _criteria(), test_settings)
        assert not result.eligible
        assert result.reason == IneligibilityReason.UNAVAILABLE

    def test_unsupported_currency(self, test_settings):
        result = check_eligibility(ACH, _criteria(currency="EUR"), test_settings)
        assert result.reason == IneligibilityReason.UNSUPPORTED_CURRENCY

    def test_below_minimum(self, test_settings):
        result = check_eligibility(RTGS, _criteria(2_000_000), test_settings)
        assert result.reason == IneligibilityReason.AMOUNT_OUT_OF_BOUNDS

    def test_above_maximum(self, test_settings):
        criteria = _criteria(30_000_000, beneficiary_type=BeneficiaryType.VENDOR)
        result = check_eligibility(VCARD, criteria, test_settings)
        assert result.reason == IneligibilityReason.AMOUNT_OUT_OF_BOUNDS

    def test_urgent_too_slow(self, test_settings):
        result = check_eligibility(ACH, _criteria(urgency=Urgency.URGENT), test_settings)
        assert result.reason == IneligibilityReason.TOO_SLOW

    def test_one_day_rail_meets_urgent(self, test_settings):
        next_day = StaticRail(
            RailType.ACH,
            RailCapabilities(supported_currencies=frozenset({"USD"}), minimum_amount=1, typical_settlement_days=1),
        )
        assert check_eligibility(next_day, _criteria(urgency=Urgency.URGENT), test_settings).eligible

    def test_real_time_needs_real_time_rail(self, test_settings):
        result = check_eligibility(ACH, _criteria(urgency=Urgency.REAL_TIME), test_settings)
        assert result.reason == IneligibilityReason.NOT_REAL_TIME

    def test_recurring_unsupported(self, test_settings):
        result = check_eligibility(WIRE, _criteria(5_000_000, requires_recurring=True), test_settings)
        assert result.reason == IneligibilityReason.RECURRING_UNSUPPORTED


class TestRailRules:
    def test_ach_not_international(self, test_settings):
        result = check_eligibility(ACH, _criteria(is_international=True), test_settings)
        assert result.reason == IneligibilityReason.RAIL_RULE
        assert result.message == "ACH is domestic only"

    def test_domestic_wire_below_medium(self, test_settings):
        result = check_eligibility(WIRE, _criteria(999_999), test_settings)
        assert result.reason == IneligibilityReason.RAIL_RULE

    def test_check_not_urgent(self, test_settings):
        urgent_check = StaticRail(
            RailType.CHECK,
            RailCapabilities(supported_currencies=frozenset({"USD"}), typical_settlement_days=1),
        )
        result = check_eligibility(urgent_check, _criteria(urgency=Urgency.URGENT), test_settings)
        assert result.reason == IneligibilityReason.RAIL_RULE

    def test_check_not_high_value(self, test_settings):
        result = check_eligibility(CHECK, _criteria(10_000_001), test_settings)
        assert result.reason == IneligibilityReason.RAIL_RULE

    def test_check_at_high_threshold(self, test_settings):
        assert check_eligibility(CHECK, _criteria(10_000_000), test_settings).eligible

    def test_rtgs_not_international(self, test_settings):
        result = check_eligibility(RTGS, _criteria(5_000_000, is_international=True), test_settings)
        assert result.reason == IneligibilityReason.RAIL_RULE

    def test_virtual_card_needs_vendor(self, test_settings):
        criteria = _criteria(beneficiary_type=BeneficiaryType.EMPLOYEE)
        result = check_eligibility(VCARD, criteria, test_settings)
        assert result.reason == IneligibilityReason.RAIL_RULE
