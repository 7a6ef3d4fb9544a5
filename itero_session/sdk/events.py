"""
Session change channel - in-process observer list.
"""

import logging
from typing import Callable, List

from itero_session.domain.errors import SubscriberError
from itero_session.domain.session_info import SessionInfo

logger = logging.getLogger(__name__)

Subscriber = Callable[[SessionInfo], None]


class Subscription:
    """Handle returned by SessionChannel.subscribe()."""

    def __init__(self, channel: "SessionChannel", callback: Subscriber):
        self._channel = channel
        self.callback = callback

    def unsubscribe(self) -> bool:
        return self._channel.unsubscribe(self.callback)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.unsubscribe()


class SessionChannel:
    """
    Change notification channel.

    Delivery is synchronous and follows subscription order: emit() returns
    only once every subscriber has been called. Past emissions are not
    replayed to late subscribers.
    """

    def __init__(self):
        self._subscribers: List[Subscriber] = []

    def __len__(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: Subscriber) -> Subscription:
        """
        Register a subscriber.

        Args:
            callback: Called with every SessionInfo emitted from now on

        Returns:
            Subscription handle
        """
        self._subscribers.append(callback)
        return Subscription(self, callback)

    def unsubscribe(self, callback: Subscriber) -> bool:
        """
        Remove a subscriber.

        Returns:
            True if removed, False if it was not subscribed
        """
        try:
            self._subscribers.remove(callback)
        except ValueError:
            return False
        return True

    def emit(self, info: SessionInfo) -> None:
        """
        Deliver info to every current subscriber.

        Subscribers added or removed during delivery take effect on the
        next emission. A failing subscriber does not stop delivery to the
        others; failures are raised together afterwards.

        Raises:
            SubscriberError: If at least one subscriber raised
        """
        failures = []
        for callback in list(self._subscribers):
            try:
                callback(info)
            except Exception as e:
                logger.exception("Session subscriber %r failed", callback)
                failures.append(e)

        if failures:
            raise SubscriberError(failures) from failures[0]
