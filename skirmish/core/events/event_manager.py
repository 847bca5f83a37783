"""
Event bus connecting the battle to its observers.

The combat core publishes what happened each turn without knowing who is
listening. Events are queued on publish and delivered in publish order when
the owner of the bus calls process_events, which the game does once per
fixed update. The log manager and tests subscribe to the event types they
care about.
"""

import threading
from collections import defaultdict, deque
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import GameEvent, EventType


EventSubscriber = Callable[["GameEvent"], None]
ErrorCallback = Callable[[str], None]


class EventManager:
    """Queued publish/subscribe bus for battle and application events."""

    def __init__(self, error_callback: Optional[ErrorCallback] = None):
        """Initialize the event manager.

        Args:
            error_callback: Receives a message whenever a subscriber raises.
                Without one the message is printed as a warning.
        """
        self._subscribers: dict["EventType", list[tuple[str, EventSubscriber]]] = defaultdict(list)
        self._event_queue: deque["GameEvent"] = deque()
        self._lock = threading.RLock()
        self._error_callback = error_callback

    def set_error_callback(self, callback: Optional[ErrorCallback]) -> None:
        """Route subscriber failures to callback (None restores printing)."""
        self._error_callback = callback

    def subscribe(
        self,
        event_type: "EventType",
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Subscribe to events of a specific type.

        Args:
            event_type: The type of events to subscribe to
            subscriber: Callback function to handle events
            subscriber_name: Name used when reporting subscriber errors
        """
        name = subscriber_name or getattr(subscriber, '__qualname__', 'anonymous')
        with self._lock:
            self._subscribers[event_type].append((name, subscriber))

    def publish(self, event: "GameEvent") -> None:
        """Queue an event for the next process_events call."""
        with self._lock:
            self._event_queue.append(event)

    def has_queued_events(self) -> bool:
        """Check if there are events waiting to be processed."""
        with self._lock:
            return len(self._event_queue) > 0

    def process_events(self) -> int:
        """Deliver the events queued so far, oldest first.

        Events published by subscribers while this runs stay queued for the
        next call.

        Returns:
            Number of events processed
        """
        with self._lock:
            pending = list(self._event_queue)
            self._event_queue.clear()

        for event in pending:
            self._deliver(event)

        return len(pending)

    def flush(self) -> int:
        """Process events until the queue stays empty.

        Returns:
            Total number of events processed
        """
        total = 0
        while self.has_queued_events():
            total += self.process_events()
        return total

    def _deliver(self, event: "GameEvent") -> None:
        with self._lock:
            subscribers = list(self._subscribers.get(event.event_type, []))

        for name, subscriber in subscribers:
            try:
                subscriber(event)
            except Exception as e:
                # Remaining subscribers still receive the event
                self._report_error(
                    f"Subscriber {name} failed on {event.__class__.__name__} (turn {event.turn}): {e}"
                )

    def _report_error(self, message: str) -> None:
        if self._error_callback is not None:
            self._error_callback(message)
        else:
            print(f"Warning: {message}")
