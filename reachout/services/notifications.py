import logging
from typing import List

from reachout.schemas.common import Notification

logger = logging.getLogger("notifications")


class Notifier:
    """Collects the transient success/error messages produced by one action."""

    def __init__(self):
        self._items: List[Notification] = []

    def success(self, message: str) -> None:
        logger.info(message)
        self._items.append(Notification(level="success", message=message))

    def error(self, message: str) -> None:
        logger.error(message)
        self._items.append(Notification(level="error", message=message))

    @property
    def items(self) -> List[Notification]:
        return list(self._items)

    @property
    def last(self) -> Notification | None:
        return self._items[-1] if self._items else None

    def drain(self) -> List[Notification]:
        items, self._items = self._items, []
        return items
