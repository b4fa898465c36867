"""
Process-wide bus for actor performance notifications.
"""

import threading
from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional

from screenplay.config.settings import get_settings
from screenplay.core.types import PerformanceEvent, PerformanceEventType
from screenplay.monitoring.logger import get_logger, log_performance_event

logger = get_logger(__name__)

PerformanceHandler = Callable[[PerformanceEvent], None]


class PerformanceEventBus:
    """
    Publish-subscribe bus for begin/end performance notifications.

    Publishing is fire-and-forget: handlers run synchronously in
    subscription order and a failing handler is logged, never raised back
    to the publisher.
    """

    def __init__(self, history_limit: Optional[int] = None):
        """
        Initialize the event bus.

        Args:
            history_limit: Events kept in history (defaults to settings)
        """
        self._subscribers: Dict[PerformanceEventType, List[PerformanceHandler]] = defaultdict(list)
        self._event_history: List[PerformanceEvent] = []
        if history_limit is None:
            history_limit = get_settings().event_history_limit
        self._history_limit = max(history_limit, 0)
        self._event_count: Dict[PerformanceEventType, int] = defaultdict(int)
        self._lock = threading.RLock()

    def subscribe(
        self,
        event_type: PerformanceEventType,
        handler: PerformanceHandler
    ) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: Type of event to subscribe to
            handler: Callback invoked with each event
        """
        with self._lock:
            self._subscribers[event_type].append(handler)
        logger.debug(f"Subscription added for {event_type.value}")

    def unsubscribe(
        self,
        event_type: PerformanceEventType,
        handler: PerformanceHandler
    ) -> None:
        """
        Unsubscribe from events of a specific type.

        Args:
            event_type: Type of event to unsubscribe from
            handler: Callback to remove
        """
        with self._lock:
            if handler in self._subscribers[event_type]:
                self._subscribers[event_type].remove(handler)
                logger.debug(f"Subscription removed for {event_type.value}")

    def publish(self, event: PerformanceEvent) -> None:
        """
        Publish an event to all subscribers of its type.

        Args:
            event: Event to publish
        """
        with self._lock:
            self._add_to_history(event)
            self._event_count[event.event_type] += 1
            handlers = list(self._subscribers.get(event.event_type, []))

        log_performance_event(event.event_type.value, event.actor_name)

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    f"Performance event handler failed for {event.event_type.value}",
                    extra={"actor": event.actor_name},
                )

    def actor_began_performance(self, actor_name: str) -> None:
        self.publish(PerformanceEvent(
            event_type=PerformanceEventType.ACTOR_BEGAN_PERFORMANCE,
            actor_name=actor_name,
        ))

    def actor_ended_performance(self, actor_name: str) -> None:
        self.publish(PerformanceEvent(
            event_type=PerformanceEventType.ACTOR_ENDED_PERFORMANCE,
            actor_name=actor_name,
        ))

    def _add_to_history(self, event: PerformanceEvent) -> None:
        """Add event to history with size limit."""
        self._event_history.append(event)

        excess = len(self._event_history) - self._history_limit
        if excess > 0:
            del self._event_history[:excess]

    def get_event_history(
        self,
        event_type: Optional[PerformanceEventType] = None,
        actor_name: Optional[str] = None,
        limit: int = 100
    ) -> List[PerformanceEvent]:
        """
        Get event history with optional filters.

        Args:
            event_type: Filter by event type
            actor_name: Filter by actor
            limit: Maximum number of events to return

        Returns:
            Most recent matching events, oldest first
        """
        with self._lock:
            history = list(self._event_history)

        if event_type:
            history = [e for e in history if e.event_type == event_type]
        if actor_name:
            history = [e for e in history if e.actor_name == actor_name]

        return history[-limit:]

    def get_statistics(self) -> Dict[str, Any]:
        """Get event bus statistics."""
        with self._lock:
            return {
                "total_events": sum(self._event_count.values()),
                "event_counts": {k.value: v for k, v in self._event_count.items()},
                "history_size": len(self._event_history),
                "active_subscriptions": {
                    event_type.value: len(handlers)
                    for event_type, handlers in self._subscribers.items()
                },
            }

    def clear_history(self) -> None:
        """Clear event history."""
        with self._lock:
            self._event_history.clear()


_event_bus: Optional[PerformanceEventBus] = None
_bus_lock = threading.Lock()


def get_event_bus() -> PerformanceEventBus:
    """Get the process-wide performance event bus."""
    global _event_bus
    with _bus_lock:
        if _event_bus is None:
            _event_bus = PerformanceEventBus()
        return _event_bus


def reset_event_bus() -> None:
    """Drop the process-wide event bus so the next access builds a new one."""
    global _event_bus
    with _bus_lock:
        _event_bus = None
