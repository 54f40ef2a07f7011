"""
Event bus - in-process publish/subscribe
Decouples services from whoever wants to observe their state changes
"""
from typing import Callable, Dict, List, Any, Optional
from dataclasses import dataclass, field
from datetime import datetime
from collections import deque
from uuid import uuid4
import logging
import threading

logger = logging.getLogger(__name__)


@dataclass
class Event:
    """Event envelope"""
    event_type: str
    timestamp: datetime
    data: Dict[str, Any]
    source: str  # publishing service
    event_id: str = field(default_factory=lambda: uuid4().hex)


EventPublisher = Callable[[Event], None]


class EventBus:
    """
    In-memory event bus

    Usage:
    1. subscribe:   event_bus.subscribe("room.status_changed", handler)
    2. publish:     event_bus.publish(Event(...))
    3. unsubscribe: event_bus.unsubscribe("room.status_changed", handler)

    The "*" event type receives every event.
    """

    WILDCARD = "*"

    def __init__(self, history_size: int = 100):
        self._subscribers: Dict[str, List[Callable]] = {}
        self._event_history: deque = deque(maxlen=history_size)
        self._subscriber_lock = threading.Lock()

    def subscribe(self, event_type: str, handler: Callable) -> None:
        with self._subscriber_lock:
            handlers = self._subscribers.setdefault(event_type, [])
            if handler not in handlers:
                handlers.append(handler)
                logger.debug(f"Handler {handler.__name__} subscribed to {event_type}")

    def unsubscribe(self, event_type: str, handler: Callable) -> None:
        with self._subscriber_lock:
            if handler in self._subscribers.get(event_type, []):
                self._subscribers[event_type].remove(handler)
                logger.debug(f"Handler {handler.__name__} unsubscribed from {event_type}")

    def publish(self, event: Event) -> None:
        """
        Publish an event, running every handler synchronously

        A failing handler is logged and does not stop the others.
        """
        self._event_history.append(event)

        with self._subscriber_lock:
            handlers = (self._subscribers.get(event.event_type, [])
                        + self._subscribers.get(self.WILDCARD, []))

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    f"Event handler {handler.__name__} error for {event.event_type}: {e}",
                    exc_info=True
                )

    def get_history(self, event_type: Optional[str] = None, limit: int = 50) -> List[Event]:
        """Most recent first"""
        history = list(self._event_history)
        if event_type:
            history = [e for e in history if e.event_type == event_type]
        return list(reversed(history))[:limit]


def log_event(event: Event) -> None:
    """Subscriber that writes every event to the log"""
    logger.info(f"[{event.source}] {event.event_type} {event.data}")


# Shared bus for the running application
event_bus = EventBus()
