"""Redraw notifications for the rendering layer."""

import logging
from typing import Callable

logger = logging.getLogger(__name__)

RefreshCallback = Callable[[str], None]


class RefreshChannel:
    """Synchronous publish/subscribe channel carrying "redraw now" signals."""

    def __init__(self, default_text: str = ""):
        self.default_text = default_text
        self._subscribers: list[RefreshCallback] = []

    def subscribe(self, callback: RefreshCallback) -> Callable[[], None]:
        """Register a callback.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def emit(self, text: str | None = None) -> None:
        """Call every subscriber with a description text."""
        text = self.default_text if text is None else text
        logger.debug("Refresh requested for %d subscriber(s)", len(self._subscribers))
        for callback in list(self._subscribers):
            callback(text)
