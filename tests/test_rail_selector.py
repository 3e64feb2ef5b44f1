"""Tests for the multi-rail routing engine."""

import pytest

from payment_rails.audit.logger import EventSink
from payment_rails.config import Settings
from payment_rails.errors import NoEligibleRailError
from payment_rails.models.enums import BeneficiaryType, RailType, Urgency
from payment_rails.models.money import Money
from payment_rails.models.capabilities import RailCapabilities
from payment_rails.models.requests import RailSelectionCriteria
from payment_rails.rails.stock import StaticRail
from payment_rails.routing.rail_selector import RailSelector, country_for_currency


def _criteria(amount_cents, **kwargs):
    kwargs.setdefault("currency", "USD")
    return RailSelectionCriteria(amount_cents=amount_cents, **kwargs)


@pytest.fixture
def selector(rails, capturing_sink, test_settings):
    return RailSelector(rails, event_sink=capturing_sink, settings=test_settings)


class TestDomesticSelection:
    def test_low_value_standard_goes_ach(self, selector):
        assert selector.select(_criteria(50_000)).rail_type == RailType.ACH

    def test_urgent_high_value_goes_wire(self, selector):
        """Wire and RTGS both cap at 100; wire is injected first."""
        rail = selector.select(_criteria(15_000_000, urgency=Urgency.URGENT))
        assert rail.rail_type == RailType.WIRE

    def test_tie_follows_injected_order(self, rails, test_settings):
        selector = RailSelector(list(reversed(rails)), settings=test_settings)
        rail = selector.select(_criteria(15_000_000, urgency=Urgency.URGENT))
        assert rail.rail_type == RailType.RTGS

    def test_real_time_medium_value_goes_wire(self, selector):
        rail = selector.select(_criteria(5_000_000, urgency=Urgency.REAL_TIME))
        assert rail.rail_type == RailType.WIRE

    def test_unavailable_ach_falls_back_to_check(self, rails, test_settings):
        rails = [StaticRail(RailType.ACH, RailCapabilities.for_ach(), available=False)] + rails[1:]
        selector = RailSelector(rails, settings=test_settings)
        assert selector.select(_criteria(50_000)).rail_type == RailType.CHECK


class TestEligibleRails:
    def test_low_value_excludes_wire_and_rtgs(self, selector):
        types = {r.rail_type for r in selector.eligible_rails(_criteria(50_000))}
        assert types == {RailType.ACH, RailType.CHECK}

    def test_vendor_adds_virtual_card(self, selector):
        criteria = _criteria(50_000, beneficiary_type=BeneficiaryType.VENDOR)
        types = {r.rail_type for r in selector.eligible_rails(criteria)}
        assert RailType.VIRTUAL_CARD in types

    def test_threshold_comes_from_settings(self, rails):
        settings = Settings(_env_file=None, medium_value_threshold_cents=10_000)
        selector = RailSelector(rails, settings=settings)
        types = {r.rail_type for r in selector.eligible_rails(_criteria(50_000))}
        assert RailType.WIRE in types


class TestScoring:
    def test_rank_is_best_first(self, selector):
        ranked = selector.rank(_criteria(50_000))
        assert [s.rail_type for s in ranked] == [RailType.ACH, RailType.CHECK]
        assert ranked[0].score == 100.0
        assert ranked[1].score == 97.0

    def test_preferred_rail_bonus(self, selector):
        scores = {s.rail_type: s for s in selector.rank(_criteria(500_000, preferred_rail=RailType.CHECK))}
        assert scores[RailType.CHECK].preference == 15.0
        assert scores[RailType.ACH].preference == 0.0

    def test_low_cost_preference_widens_cost_gap(self, selector):
        cheap = {s.rail_type: s.cost for s in selector.rank(_criteria(50_000, prefer_low_cost=True))}
        normal = {s.rail_type: s.cost for s in selector.rank(_criteria(50_000))}
        assert cheap[RailType.ACH] == normal[RailType.ACH] == 25.0
        assert cheap[RailType.CHECK] == 19.0
        assert normal[RailType.CHECK] == 22.0

    def test_scores_clamped(self, selector):
        for scored in selector.rank(_criteria(15_000_000, urgency=Urgency.URGENT)):
            assert 0.0 <= scored.score <= 100.0


class TestNoEligibleRail:
    def test_unsupported_currency(self, selector):
        with pytest.raises(NoEligibleRailError) as exc_info:
            selector.select(_criteria(50_000, currency="XYZ"))
        assert exc_info.value.criteria.currency == "XYZ"
        assert set(exc_info.value.reasons) == {r.value for r in RailType}

    def test_empty_rail_list(self, test_settings):
        with pytest.raises(NoEligibleRailError) as exc_info:
            RailSelector([], settings=test_settings).select(_criteria(50_000))
        assert exc_info.value.reasons == {}

    def test_recurring_real_time_has_no_rail(self, selector):
        with pytest.raises(NoEligibleRailError) as exc_info:
            selector.select(_criteria(5_000_000, urgency=Urgency.REAL_TIME, requires_recurring=True))
        assert "recurring" in exc_info.value.reasons["wire"]

    def test_no_event_on_failure(self, selector, capturing_sink):
        with pytest.raises(NoEligibleRailError):
            selector.select(_criteria(50_000, currency="XYZ"))
        assert capturing_sink.events == []


class TestConvenienceSelectors:
    def test_optimal_domestic(self, selector):
        assert selector.optimal_domestic_rail(Money(50_000, "USD")).rail_type == RailType.ACH

    def test_optimal_international(self, international_rails, test_settings):
        selector = RailSelector(international_rails, settings=test_settings)
        rail = selector.optimal_international_rail(Money(500_000, "EUR"), "DE")
        assert rail.rail_type == RailType.WIRE

    def test_fastest(self, selector):
        assert selector.fastest_rail(_criteria(15_000_000)).rail_type == RailType.WIRE

    def test_cheapest(self, selector):
        criteria = _criteria(15_000_000, urgency=Urgency.URGENT)
        assert selector.cheapest_rail(criteria).rail_type == RailType.ACH

    def test_country_for_currency(self):
        assert country_for_currency("eur") == "DE"
        assert country_for_currency("XYZ") == "US"


class TestEvents:
    def test_selection_publishes_event(self, selector, capturing_sink):
        criteria = _criteria(50_000)
        selector.select(criteria)
        assert len(capturing_sink.events) == 1
        event = capturing_sink.events[0]
        assert event.rail_type == RailType.ACH
        assert event.criteria == criteria
        assert event.score == 100.0

    def test_broken_sink_does_not_fail_selection(self, rails, test_settings):
        class BrokenSink(EventSink):
            def publish(self, event):
                raise RuntimeError("sink down")

        selector = RailSelector(rails, event_sink=BrokenSink(), settings=test_settings)
        assert selector.select(_criteria(50_000)).rail_type == RailType.ACH
