"""
Event System - Pub/Sub Messaging.

Provides:
- Signal: Simple observer pattern for sync notifications (e.g., config changes)
- Subscription: Handle returned by connect/subscribe, released with cancel()
- EventChannel: Named events owned by a single collection
- Events: Standard event name constants

Usage:
    from gridsort.core.events import EventChannel, Events

    sub = collection.events.subscribe(Events.GRID_SORT, on_sort)
    collection.events.publish(Events.GRID_SORT, state)
    sub.cancel()
"""
from .observer import Signal, Subscription
from .channel import EventChannel
from .constants import Events


__all__ = ["Signal", "Subscription", "EventChannel", "Events"]
