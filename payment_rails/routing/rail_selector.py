"""
Multi-rail payment routing engine.

Selects the optimal payment rail for a transaction from the rails injected
at construction:

  1. Eligibility filter (availability, currency, limits, urgency,
     recurring support, rail-type rules), see routing.eligibility
  2. Scoring on a 0-100 scale: base 50 plus four independently capped
     components (speed, cost, capability fit, preference)
  3. Highest score wins; ties go to the rail injected first

Routing priority in practice:
  - Low-value domestic USD → ACH (cheapest, refundable)
  - Urgent or high-value domestic → Wire or RTGS
  - International → Wire
  - Vendor payments → Virtual Card competes with ACH

The selector keeps no state between calls; every decision is a pure
function of the injected rails and the criteria.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from payment_rails.audit.logger import EventSink, NullEventSink, RailSelected
from payment_rails.config import Settings, settings as default_settings
from payment_rails.errors import NoEligibleRailError
from payment_rails.models.capabilities import RailCapabilities
from payment_rails.models.enums import RailType, Urgency
from payment_rails.models.money import Money
from payment_rails.models.requests import RailSelectionCriteria
from payment_rails.rails.base import PaymentRail
from payment_rails.routing.eligibility import check_eligibility

logger = logging.getLogger("payment_rails.selector")

BASE_SCORE = 50.0
COMPONENT_MAX = 25.0

# Relative cost per rail (lower is cheaper)
COST_RANKING: dict[RailType, int] = {
    RailType.ACH: 1,
    RailType.CHECK: 2,
    RailType.VIRTUAL_CARD: 3,
    RailType.WIRE: 4,
    RailType.RTGS: 5,
}

CURRENCY_HOME_COUNTRY = {
    "USD": "US",
    "EUR": "DE",
    "GBP": "GB",
    "CAD": "CA",
    "AUD": "AU",
    "MYR": "MY",
    "SGD": "SG",
    "INR": "IN",
}


@dataclass
class RailScore:
    """A rail that passed eligibility, with its total and component scores."""

    rail: PaymentRail
    score: float
    speed: float = 0.0
    cost: float = 0.0
    fit: float = 0.0
    preference: float = 0.0

    @property
    def rail_type(self) -> RailType:
        return self.rail.rail_type


def _clamp(value: float, low: float = 0.0, high: float = COMPONENT_MAX) -> float:
    return max(low, min(high, value))


def speed_score(capabilities: RailCapabilities, criteria: RailSelectionCriteria) -> float:
    is_real_time = capabilities.is_real_time
    days = capabilities.typical_settlement_days

    if criteria.urgency == Urgency.REAL_TIME:
        return COMPONENT_MAX if is_real_time else 0.0

    if criteria.urgency == Urgency.URGENT:
        if is_real_time:
            return COMPONENT_MAX
        return 15.0 if days == 1 else 5.0

    # Standard: prefer faster but don't penalize slow
    if is_real_time:
        return 20.0
    if days <= 1:
        return 15.0
    if days <= 2:
        return 12.0
    return 10.0


def cost_score(rail_type: RailType, criteria: RailSelectionCriteria) -> float:
    step = 6 if criteria.prefer_low_cost else 3
    return _clamp(COMPONENT_MAX - (COST_RANKING[rail_type] - 1) * step)


def fit_score(capabilities: RailCapabilities, criteria: RailSelectionCriteria) -> float:
    score = 10.0

    if criteria.requires_recurring and capabilities.supports_recurring:
        score += 5.0

    if capabilities.get_capability("supports_refunds", False):
        score += 3.0

    # Close to the rail's ceiling
    if capabilities.maximum_amount:
        if criteria.amount_cents / capabilities.maximum_amount > 0.9:
            score -= 5.0

    return _clamp(score)


def preference_score(rail_type: RailType, criteria: RailSelectionCriteria, settings: Settings) -> float:
    score = 0.0

    if criteria.preferred_rail == rail_type:
        score += 15.0

    if criteria.amount_cents >= settings.high_value_threshold_cents:
        if rail_type in (RailType.RTGS, RailType.WIRE):
            score += 10.0
    elif criteria.amount_cents <= settings.low_value_threshold_cents:
        if rail_type in (RailType.ACH, RailType.CHECK):
            score += 5.0

    return _clamp(score)


class RailSelector:
    """
    Picks the best rail for a transaction.

    Args:
        rails: Candidate rails; order breaks score ties.
        event_sink: Receives a RailSelected event per successful selection.
        settings: Thresholds and domestic currency (defaults to env config).
    """

    def __init__(
        self,
        rails: Sequence[PaymentRail],
        event_sink: Optional[EventSink] = None,
        settings: Optional[Settings] = None,
    ):
        self._rails = tuple(rails)
        self._event_sink = event_sink or NullEventSink()
        self._settings = settings or default_settings

    @property
    def rails(self) -> tuple[PaymentRail, ...]:
        return self._rails

    def select(self, criteria: RailSelectionCriteria) -> PaymentRail:
        """
        Select the best rail for the given criteria.

        Raises:
            NoEligibleRailError: No injected rail passes eligibility.
        """
        ranked = self.rank(criteria)

        if not ranked:
            reasons = self._rejection_reasons(criteria)
            logger.warning(
                "No eligible rail for %s %d (urgency=%s): %s",
                criteria.currency,
                criteria.amount_cents,
                criteria.urgency.value,
                "; ".join(f"{k}: {v}" for k, v in reasons.items()) or "no rails configured",
            )
            raise NoEligibleRailError(criteria, reasons)

        best = ranked[0]
        logger.info(
            "Rail selected: %s score=%.1f (speed=%.0f cost=%.0f fit=%.0f pref=%.0f) for %s %d",
            best.rail_type.value,
            best.score,
            best.speed,
            best.cost,
            best.fit,
            best.preference,
            criteria.currency,
            criteria.amount_cents,
        )

        self._publish(RailSelected(rail_type=best.rail_type, criteria=criteria, score=best.score))
        return best.rail

    def eligible_rails(self, criteria: RailSelectionCriteria) -> list[PaymentRail]:
        return [r for r in self._rails if check_eligibility(r, criteria, self._settings).eligible]

    def rank(self, criteria: RailSelectionCriteria) -> list[RailScore]:
        """Score every eligible rail, best first (stable for equal scores)."""
        scored = [self.score(rail, criteria) for rail in self.eligible_rails(criteria)]
        return sorted(scored, key=lambda s: s.score, reverse=True)

    def score(self, rail: PaymentRail, criteria: RailSelectionCriteria) -> RailScore:
        capabilities = rail.capabilities
        speed = speed_score(capabilities, criteria)
        cost = cost_score(rail.rail_type, criteria)
        fit = fit_score(capabilities, criteria)
        preference = preference_score(rail.rail_type, criteria, self._settings)

        total = _clamp(BASE_SCORE + speed + cost + fit + preference, 0.0, 100.0)
        return RailScore(rail=rail, score=total, speed=speed, cost=cost, fit=fit, preference=preference)

    # ─── Convenience selectors ──────────────────────────────────────────

    def optimal_domestic_rail(self, amount: Money) -> PaymentRail:
        return self.select(RailSelectionCriteria(
            amount_cents=amount.amount,
            currency=amount.currency,
            destination_country=country_for_currency(amount.currency),
            urgency=Urgency.STANDARD,
            prefer_low_cost=True,
        ))

    def optimal_international_rail(self, amount: Money, destination_country: str) -> PaymentRail:
        # Speed over cost for international
        return self.select(RailSelectionCriteria(
            amount_cents=amount.amount,
            currency=amount.currency,
            destination_country=destination_country,
            urgency=Urgency.STANDARD,
            is_international=True,
            prefer_low_cost=False,
        ))

    def fastest_rail(self, criteria: RailSelectionCriteria) -> PaymentRail:
        return self.select(criteria.with_urgency(Urgency.URGENT, prefer_low_cost=False))

    def cheapest_rail(self, criteria: RailSelectionCriteria) -> PaymentRail:
        return self.select(criteria.with_urgency(Urgency.STANDARD, prefer_low_cost=True))

    def _rejection_reasons(self, criteria: RailSelectionCriteria) -> dict[str, str]:
        reasons = {}
        for rail in self._rails:
            result = check_eligibility(rail, criteria, self._settings)
            if not result.eligible:
                reasons[rail.rail_type.value] = result.message
        return reasons

    def _publish(self, event: RailSelected) -> None:
        try:
            self._event_sink.publish(event)
        except Exception:
            # Sinks are fire-and-forget; a broken sink must not undo a decision
            logger.exception("Event sink failed for %s", event.action)


def country_for_currency(currency: str) -> str:
    """Home country for a currency (simplified mapping, defaults to US)."""
    return CURRENCY_HOME_COUNTRY.get(currency.upper(), "US")
