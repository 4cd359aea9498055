"""Subscription registry — the change-notification channel.

Listeners are no-argument callables invoked synchronously, in
registration order, after every successful mutation. Iteration runs over
a snapshot of the registry, so a listener may unsubscribe itself (or
another listener) mid-notification without affecting the current round.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

Listener = Callable[[], None]
Unsubscribe = Callable[[], None]


class SubscriptionRegistry:

    def __init__(self) -> None:
        # token -> listener; a token per subscription so the same callable
        # can be registered twice and removed independently
        self._listeners: dict[int, Listener] = {}
        self._tokens = itertools.count()

    def __len__(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener) -> Unsubscribe:
        token = next(self._tokens)
        self._listeners[token] = listener

        def unsubscribe() -> None:
            self._listeners.pop(token, None)

        return unsubscribe

    def notify_all(self) -> None:
        for listener in list(self._listeners.values()):
            try:
                listener()
            except Exception:
                logger.exception("Change listener %r failed", listener)
