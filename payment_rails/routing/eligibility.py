"""
Rail eligibility checks with categorized rejection reasons.

Before a rail is scored we verify, in order:
  1. Rail is available
  2. Currency is supported
  3. Amount is within the rail's limits
  4. Settlement speed satisfies the urgency tier
  5. Recurring support, when required
  6. The rail-type rule (ACH domestic only, checks not urgent, ...)

Each check returns a structured result so the selector can report why
every rail was rejected when nothing qualifies.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from payment_rails.config import Settings
from payment_rails.models.enums import BeneficiaryType, IneligibilityReason, RailType, Urgency
from payment_rails.models.requests import RailSelectionCriteria
from payment_rails.rails.base import PaymentRail


@dataclass
class EligibilityResult:
    """Result of an eligibility check."""

    eligible: bool
    reason: Optional[IneligibilityReason] = None
    message: str = ""


def _ach_rule(criteria: RailSelectionCriteria, settings: Settings) -> Optional[str]:
    if criteria.currency != settings.domestic_currency:
        return f"ACH is {settings.domestic_currency} only"
    if criteria.is_international:
        return "ACH is domestic only"
    return None


def _wire_rule(criteria: RailSelectionCriteria, settings: Settings) -> Optional[str]:
    if criteria.is_international:
        return None
    if criteria.amount_cents < settings.medium_value_threshold_cents:
        return "Domestic wire reserved for medium/high values"
    return None


def _check_rule(criteria: RailSelectionCriteria, settings: Settings) -> Optional[str]:
    if criteria.urgency in (Urgency.URGENT, Urgency.REAL_TIME):
        return "Checks cannot meet urgent delivery"
    if criteria.is_international:
        return "Checks are domestic only"
    if criteria.amount_cents > settings.high_value_threshold_cents:
        return "Checks not used for high-value payments"
    return None


def _rtgs_rule(criteria: RailSelectionCriteria, settings: Settings) -> Optional[str]:
    if criteria.amount_cents < settings.medium_value_threshold_cents:
        return "RTGS is for high-value transfers only"
    if criteria.is_international:
        return "RTGS settles within one country"
    return None


def _virtual_card_rule(criteria: RailSelectionCriteria, settings: Settings) -> Optional[str]:
    if criteria.beneficiary_type != BeneficiaryType.VENDOR:
        return "Virtual cards are for vendor payments only"
    if criteria.urgency == Urgency.REAL_TIME:
        return "Virtual cards do not settle in real time"
    return None


RAIL_RULES: dict[RailType, Callable[[RailSelectionCriteria, Settings], Optional[str]]] = {
    RailType.ACH: _ach_rule,
    RailType.WIRE: _wire_rule,
    RailType.CHECK: _check_rule,
    RailType.RTGS: _rtgs_rule,
    RailType.VIRTUAL_CARD: _virtual_card_rule,
}


def check_eligibility(
    rail: PaymentRail,
    criteria: RailSelectionCriteria,
    settings: Settings,
) -> EligibilityResult:
    """
    Check whether a rail can carry the transaction described by criteria.

    Returns:
        EligibilityResult indicating pass/fail with categorized reason.
    """
    rail_type = rail.rail_type

    if not rail.is_available():
        return EligibilityResult(
            eligible=False,
            reason=IneligibilityReason.UNAVAILABLE,
            message=f"{rail_type.value} rail is currently unavailable",
        )

    capabilities = rail.capabilities

    if not capabilities.supports_currency(criteria.currency):
        return EligibilityResult(
            eligible=False,
            reason=IneligibilityReason.UNSUPPORTED_CURRENCY,
            message=f"{rail_type.value} does not support {criteria.currency}",
        )

    if not capabilities.is_amount_within_limits(criteria.amount_cents):
        return EligibilityResult(
            eligible=False,
            reason=IneligibilityReason.AMOUNT_OUT_OF_BOUNDS,
            message=f"Amount {criteria.amount_cents} outside {rail_type.value} limits",
        )

    if (
        criteria.urgency == Urgency.URGENT
        and capabilities.typical_settlement_days > 1
        and not capabilities.is_real_time
    ):
        return EligibilityResult(
            eligible=False,
            reason=IneligibilityReason.TOO_SLOW,
            message=f"{rail_type.value} settles in {capabilities.typical_settlement_days} days",
        )

    if criteria.urgency == Urgency.REAL_TIME and not capabilities.is_real_time:
        return EligibilityResult(
            eligible=False,
            reason=IneligibilityReason.NOT_REAL_TIME,
            message=f"{rail_type.value} is not a real-time rail",
        )

    if criteria.requires_recurring and not capabilities.supports_recurring:
        return EligibilityResult(
            eligible=False,
            reason=IneligibilityReason.RECURRING_UNSUPPORTED,
            message=f"{rail_type.value} does not support recurring payments",
        )

    violation = RAIL_RULES[rail_type](criteria, settings)
    if violation:
        return EligibilityResult(eligible=False, reason=IneligibilityReason.RAIL_RULE, message=violation)

    return EligibilityResult(eligible=True)
