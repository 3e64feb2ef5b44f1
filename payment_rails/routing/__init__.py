from payment_rails.routing.eligibility import EligibilityResult, check_eligibility
from payment_rails.routing.rail_selector import RailScore, RailSelector, country_for_currency

__all__ = ["EligibilityResult", "check_eligibility", "RailScore", "RailSelector", "country_for_currency"]
