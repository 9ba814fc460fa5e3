"""Synchronous change feed for store writes."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from uuid import UUID

from meal_tracker.domain.events import ChangeEvent

_logger = logging.getLogger(__name__)

ChangeHandler = Callable[[ChangeEvent], None]


@dataclass
class ChangeFeed:
    """Fans out change events to subscribers in subscription order.

    A failing subscriber is logged and does not prevent the remaining
    subscribers from being called.
    """

    _handlers: list[ChangeHandler] = field(default_factory=list)

    def subscribe(self, handler: ChangeHandler) -> None:
        """Register a handler for every published event."""
        self._handlers.append(handler)

    def unsubscribe(self, handler: ChangeHandler) -> bool:
        """Remove a handler, returning whether it was registered."""
        try:
            self._handlers.remove(handler)
        except ValueError:
            return False
        return True

    def publish(self, event: ChangeEvent) -> None:
        """Deliver an event to all subscribers."""
        for handler in list(self._handlers):
            try:
                handler(event)
            except Exception:
                _logger.exception(
                    "Change handler failed: entity=%s action=%s",
                    event.entity,
                    event.action,
                )

    def notify(
        self, entity: str, action: str, record_id: UUID | None = None
    ) -> None:
        """Publish a change event built from its parts."""
        self.publish(ChangeEvent(entity=entity, action=action, record_id=record_id))
