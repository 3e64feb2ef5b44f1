"""
Audit trail for rail selection decisions.

The selector reports every decision to an injected event sink. Sinks are
fire-and-forget: they must not block the caller and must not raise back
into selection. Two sinks ship here:

  - NullEventSink: the default, discards events.
  - AuditEventSink: writes one structured audit line per event through
    the ``payment_rails.audit`` logger:

        AUDIT | action=rail_selected | {"rail": "wire", "score": 100.0, ...}
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from payment_rails.models.enums import RailType
from payment_rails.models.requests import RailSelectionCriteria

logger = logging.getLogger("payment_rails.audit")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class RailSelected:
    """Emitted once per successful selection."""

    rail_type: RailType
    criteria: RailSelectionCriteria
    score: float
    occurred_at: datetime = field(default_factory=_utcnow)

    action = "rail_selected"

    def details(self) -> dict[str, Any]:
        return {
            "rail": self.rail_type.value,
            "score": self.score,
            "criteria": self.criteria.as_dict(),
            "occurred_at": self.occurred_at.isoformat(),
        }


class EventSink(ABC):
    @abstractmethod
    def publish(self, event: RailSelected) -> None:
        ...


class NullEventSink(EventSink):
    def publish(self, event: RailSelected) -> None:
        return None


class AuditEventSink(EventSink):
    """Writes each event as an audit log line."""

    def __init__(self, audit_logger: logging.Logger | None = None, max_detail_length: int = 500):
        self._logger = audit_logger or logger
        self._max_detail_length = max_detail_length

    def publish(self, event: RailSelected) -> None:
        log_event(event.action, event.details(), audit_logger=self._logger, max_length=self._max_detail_length)


def log_event(
    action: str,
    details: dict[str, Any] | None = None,
    audit_logger: logging.Logger | None = None,
    max_length: int = 500,
) -> None:
    """
    Write a single audit log line.

    Args:
        action: What happened (e.g. "rail_selected").
        details: Arbitrary context (serialized to JSON, truncated to max_length).
    """
    (audit_logger or logger).info(
        "AUDIT | action=%s | %s",
        action,
        json.dumps(details, default=str)[:max_length] if details else "",
    )
