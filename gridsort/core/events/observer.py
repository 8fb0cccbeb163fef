from loguru import logger
from typing import Callable, List


class Subscription:
    """
    Handle returned by Signal.connect().
    Cancelling it detaches the callback from the signal it was connected to.
    """
    def __init__(self, signal: "Signal", callback: Callable):
        self.signal = signal
        self.callback = callback
        self.active = True

    def cancel(self):
        """Detach the callback. Safe to call more than once."""
        if self.active:
            self.signal.disconnect(self.callback)


class Signal:
    """
    A simple observer pattern implementation (Synchronous).
    Allows subscribers to connect to this signal and receive notifications.
    Equivalent to Qt's Signal or C#'s event.
    """
    def __init__(self, name: str = "Signal"):
        self.name = name
        self._subscriptions: List[Subscription] = []

    def connect(self, callback: Callable) -> Subscription:
        """
        Connect a callback function to this signal.
        Connecting the same callback again returns its existing handle.
        """
        for subscription in self._subscriptions:
            if subscription.callback == callback:
                return subscription
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        return subscription

    def disconnect(self, callback: Callable):
        """Disconnect a callback function from this signal."""
        for subscription in list(self._subscriptions):
            if subscription.callback == callback:
                self._subscriptions.remove(subscription)
                subscription.active = False

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def emit(self, *args, **kwargs):
        """Broadcast arguments to all subscribers synchronously."""
        # Snapshot: subscribers may disconnect while being notified
        for subscription in list(self._subscriptions):
            try:
                subscription.callback(*args, **kwargs)
            except Exception as e:
                logger.error(f"Signal '{self.name}' error in subscriber '{subscription.callback}': {e}")
