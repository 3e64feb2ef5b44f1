"""
Abstract payment rail descriptor.

The selector and validator only need three things from a rail: its type,
its static capabilities and whether it is currently accepting payments.
In production these would wrap the live rail integrations (ACH processor,
Fedwire gateway, card issuer); ``StaticRail`` is the in-process stand-in.
"""

from abc import ABC, abstractmethod

from payment_rails.models.capabilities import RailCapabilities
from payment_rails.models.enums import RailType


class PaymentRail(ABC):
    """Abstract base class for rail descriptors."""

    @property
    @abstractmethod
    def rail_type(self) -> RailType:
        ...

    @property
    @abstractmethod
    def capabilities(self) -> RailCapabilities:
        ...

    @abstractmethod
    def is_available(self) -> bool:
        """
        Whether the rail is accepting payments right now.

        Implementations must be cheap and side-effect free; the selector
        calls this once per rail per selection.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rail_type.value})"
