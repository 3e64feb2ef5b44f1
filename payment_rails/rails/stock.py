"""
Fixed rail descriptors for the stock US rails.

A StaticRail never changes after construction; availability is a plain
flag so tests and callers can model an outage by building a new descriptor
with ``available=False``.
"""

from payment_rails.models.capabilities import RailCapabilities
from payment_rails.models.enums import RailType
from payment_rails.rails.base import PaymentRail


class StaticRail(PaymentRail):
    def __init__(self, rail_type: RailType, capabilities: RailCapabilities, available: bool = True):
        self._rail_type = RailType(rail_type)
        self._capabilities = capabilities
        self._available = available

    @property
    def rail_type(self) -> RailType:
        return self._rail_type

    @property
    def capabilities(self) -> RailCapabilities:
        return self._capabilities

    def is_available(self) -> bool:
        return self._available


def default_rails(international_wire: bool = False) -> list[PaymentRail]:
    """
    Build the five stock rails in cost order (cheapest first).

    Args:
        international_wire: Use the multi-currency international wire
            capabilities instead of the domestic (real-time) ones.
    """
    wire = RailCapabilities.for_international_wire() if international_wire else RailCapabilities.for_domestic_wire()
    return [
        StaticRail(RailType.ACH, RailCapabilities.for_ach()),
        StaticRail(RailType.CHECK, RailCapabilities.for_check()),
        StaticRail(RailType.VIRTUAL_CARD, RailCapabilities.for_virtual_card()),
        StaticRail(RailType.WIRE, wire),
        StaticRail(RailType.RTGS, RailCapabilities.for_rtgs()),
    ]
