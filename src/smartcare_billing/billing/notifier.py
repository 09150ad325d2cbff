"""Synchronous bill notification fan-out.

Subscribers are plain callables taking the notification message. They are
invoked in registration order on the caller's thread; an exception raised
by a subscriber propagates to the publisher.
"""

import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

Subscriber = Callable[[str], None]


class BillNotifier:
    """Ordered list of subscriber callbacks notified when a bill is ready.

    Example:
        >>> notifier = BillNotifier()
        >>> notifier.subscribe(print)
        >>> notifier.publish("Bill of $50.00 generated for Ravi")
        Bill of $50.00 generated for Ravi
    """

    def __init__(self) -> None:
        self._subscribers: List[Subscriber] = []

    @property
    def subscribers(self) -> List[Subscriber]:
        """Registered subscribers, in notification order (copy)."""
        return list(self._subscribers)

    def subscribe(self, subscriber: Subscriber) -> None:
        """Register a subscriber at the end of the notification order."""
        self._subscribers.append(subscriber)
        logger.debug(f"Subscribed {_name(subscriber)} ({len(self._subscribers)} total)")

    def unsubscribe(self, subscriber: Subscriber) -> None:
        """Remove a subscriber. Unknown subscribers are ignored."""
        try:
            self._subscribers.remove(subscriber)
        except ValueError:
            logger.debug(f"Unsubscribe ignored, {_name(subscriber)} not registered")
            return
        logger.debug(f"Unsubscribed {_name(subscriber)}")

    def publish(self, message: str) -> int:
        """Deliver a message to every subscriber in registration order.

        Publishing with no subscribers is a no-op.

        Args:
            message: Formatted notification message

        Returns:
            Number of subscribers notified
        """
        subscribers = list(self._subscribers)
        for subscriber in subscribers:
            subscriber(message)
        logger.debug(f"Published bill notification to {len(subscribers)} subscriber(s)")
        return len(subscribers)


def _name(subscriber: Subscriber) -> str:
    return getattr(subscriber, "__name__", repr(subscriber))
