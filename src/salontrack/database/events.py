"""Snapshot publisher for record store change notifications."""

import logging
from collections import defaultdict
from typing import Callable

logger = logging.getLogger(__name__)

Callback = Callable[[list], None]


class SnapshotPublisher:
    """Fan out full-collection snapshots to subscribers.

    Subscribers always receive the complete current list for a collection,
    never a diff.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Callback]] = defaultdict(list)

    def subscribe(self, collection: str, callback: Callback) -> Callable[[], None]:
        """Register a callback. Returns a callable that removes it."""
        self._subscribers[collection].append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers[collection]:
                self._subscribers[collection].remove(callback)

        return unsubscribe

    def has_subscribers(self, collection: str) -> bool:
        """True if anyone listens to the collection."""
        return bool(self._subscribers.get(collection))

    def publish(self, collection: str, snapshot: list) -> None:
        """Deliver a snapshot to every subscriber of the collection."""
        subscribers = list(self._subscribers.get(collection, ()))
        logger.debug(
            "Publishing %d %s to %d subscriber(s)",
            len(snapshot),
            collection,
            len(subscribers),
        )
        for callback in subscribers:
            callback(snapshot)
