"""
Outbound ports: one-way notification channels from the UI runtime.

The runtime sends, subscribers receive; nothing is returned to the sender.
Messages are delivered in send order, and each message reaches every
handler before the next message is delivered, including messages sent from
inside a handler.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, Generic, List, TypeVar

from shared.models.i18n import TranslationTable

logger = logging.getLogger(__name__)

T = TypeVar("T")

Handler = Callable[[T], None]


class OutboundPort(Generic[T]):
    """Named outbound channel with FIFO, run-to-completion delivery"""

    def __init__(self, name: str):
        self.name = name
        self._handlers: List[Handler] = []
        self._pending: Deque[T] = deque()
        self._dispatching = False

    def subscribe(self, handler: Handler) -> Callable[[], None]:
        """Register a handler; returns a callable that removes it."""
        self._handlers.append(handler)
        logger.debug(f"Port '{self.name}': subscribed {handler!r}")

        def _unsubscribe() -> None:
            self.unsubscribe(handler)

        return _unsubscribe

    def unsubscribe(self, handler: Handler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def send(self, message: T) -> None:
        """
        Queue a message and deliver everything queued.

        A send issued while a delivery is in progress only queues; the
        outer send delivers it afterwards. A handler that raises does not
        stop the other handlers from receiving the current message; the
        first error is re-raised once it has been delivered, and the
        messages behind it stay queued in order.
        """
        self._pending.append(message)
        if self._dispatching:
            return

        self._dispatching = True
        try:
            while self._pending:
                current = self._pending.popleft()
                failure = None
                for handler in list(self._handlers):
                    try:
                        handler(current)
                    except Exception as e:
                        logger.error(f"Port '{self.name}': handler {handler!r} failed: {e}")
                        if failure is None:
                            failure = e
                if failure is not None:
                    raise failure
        finally:
            self._dispatching = False


class RuntimePorts:
    """Ports exposed by the UI runtime"""

    def __init__(self):
        self.store_translations: OutboundPort[TranslationTable] = OutboundPort("store_translations")
