"""Thread-safe in-memory subscriber registry."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from threading import Lock

ChatId = Hashable  # Opaque session id handed out by the chat transport


class SubscriberRegistry:
    """Process-lifetime map of chat id -> subscribed flag.

    Writers: /start and /stop handlers.
    Readers: the broadcast scheduler.

    Entries are never removed; /stop only clears the flag. Nothing is persisted,
    so the registry is empty again after a restart.
    """

    def __init__(self) -> None:
        self._active: dict[ChatId, bool] = {}
        self._lock = Lock()

    def set_subscribed(self, chat_id: ChatId, active: bool) -> None:
        """Insert or update the flag for a chat. Last write wins."""
        with self._lock:
            self._active[chat_id] = active

    def subscribe(self, chat_id: ChatId) -> None:
        self.set_subscribed(chat_id, True)

    def unsubscribe(self, chat_id: ChatId) -> None:
        self.set_subscribed(chat_id, False)

    def is_active(self, chat_id: ChatId) -> bool:
        """True if the chat is subscribed. Unknown chats are not."""
        with self._lock:
            return self._active.get(chat_id, False)

    def active_sessions(self) -> Iterator[ChatId]:
        """Yield subscribed chat ids in first-subscription order.

        Iterates a snapshot taken on the first ``next()``, so callers may
        await between items while handlers keep mutating the registry.
        """
        with self._lock:
            snapshot = list(self._active.items())
        for chat_id, active in snapshot:
            if active:
                yield chat_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._active)

    def __contains__(self, chat_id: ChatId) -> bool:
        with self._lock:
            return chat_id in self._active
