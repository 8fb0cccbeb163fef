"""
EventChannel - Named Pub/Sub Channel

A synchronous, per-owner event channel. Each collection owns one, so
listeners of one grid never see the events of another.
"""
from typing import Callable, Dict, List
from loguru import logger

from .observer import Signal, Subscription


class EventChannel:
    """
    Maps event names to Signals.

    Usage:
        # Subscribe
        sub = channel.subscribe("grid.sort", on_sort)

        # Publish
        channel.publish("grid.sort", state)

        # Release
        sub.cancel()
    """

    def __init__(self, name: str = "EventChannel"):
        self.name = name
        self._signals: Dict[str, Signal] = {}

    def _signal(self, event: str) -> Signal:
        if event not in self._signals:
            self._signals[event] = Signal(f"{self.name}:{event}")
        return self._signals[event]

    def subscribe(self, event: str, handler: Callable) -> Subscription:
        """
        Subscribe to an event.

        Args:
            event: Event name (e.g., "grid.sort", "collection.reset")
            handler: Callback invoked with the published arguments

        Returns:
            Subscription handle; cancel() releases it
        """
        subscription = self._signal(event).connect(handler)
        logger.debug(f"Subscribed to {event}: {getattr(handler, '__name__', handler)}")
        return subscription

    def unsubscribe(self, event: str, handler: Callable) -> None:
        """
        Unsubscribe from an event.

        Args:
            event: Event name
            handler: Handler to remove
        """
        if event in self._signals:
            self._signals[event].disconnect(handler)
            logger.debug(f"Unsubscribed from {event}: {getattr(handler, '__name__', handler)}")

    def publish(self, event: str, *args) -> None:
        """
        Publish an event to all subscribers.

        Args:
            event: Event name
            *args: Arguments passed to every handler
        """
        signal = self._signals.get(event)
        if signal is not None:
            signal.emit(*args)

    def subscriber_count(self, event: str) -> int:
        signal = self._signals.get(event)
        return signal.subscriber_count if signal else 0

    def list_events(self) -> List[str]:
        return [name for name, signal in self._signals.items() if signal.subscriber_count]

    def clear(self) -> None:
        """Drop every subscriber on every event."""
        self._signals.clear()
