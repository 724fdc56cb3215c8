# src/astro_schedule/schedule/notifier.py

from __future__ import annotations

import logging
import threading

from ..core.ports import ScheduleListener

logger = logging.getLogger(__name__)


class ChangeNotifier:
    """
    In-process publish/subscribe channel for schedule change messages.

    Delivery is synchronous and follows subscription order.
    A listener that raises is logged and skipped; the remaining listeners
    still receive the message and publish() itself does not raise.
    """

    def __init__(self) -> None:
        self._listeners: list[ScheduleListener] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._listeners)

    def subscribe(self, listener: ScheduleListener) -> None:
        with self._lock:
            if listener in self._listeners:
                return
            self._listeners.append(listener)
        logger.debug("Listener subscribed: %r", listener)

    def unsubscribe(self, listener: ScheduleListener) -> None:
        with self._lock:
            try:
                self._listeners.remove(listener)
            except ValueError:
                return
        logger.debug("Listener unsubscribed: %r", listener)

    def publish(self, message: str) -> None:
        with self._lock:
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(message)
            except Exception:
                logger.exception("Schedule listener %r failed on message=%r", listener, message)
