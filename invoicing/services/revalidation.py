# invoicing/services/revalidation.py
"""
Notifies subscribers that a cached view of a path is stale.

Mutations call ``revalidate_path`` after their write has committed, so a
subscriber that fails cannot undo the write; its error is logged and the
remaining subscribers still run. Between the commit and the callback a
reader may still be served the old view.
"""

import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

Subscriber = Callable[[str], None]


class InvalidationBus:
    def __init__(self) -> None:
        self._subscribers: List[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> None:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def revalidate_path(self, path: str) -> None:
        logger.info("Revalidating %s", path, extra={"path": path})
        for callback in list(self._subscribers):
            try:
                callback(path)
            except Exception:
                logger.exception(
                    "Invalidation subscriber failed for %s", path, extra={"path": path}
                )


default_bus = InvalidationBus()
