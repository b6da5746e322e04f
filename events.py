import logging
from collections import defaultdict
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

# Event names
SESSION_CHANGED = "session_changed"
SURFACE_CHANGED = "surface_changed"
SECTION_CHANGED = "section_changed"
USERS_CHANGED = "users_changed"
PATIENTS_CHANGED = "patients_changed"


class EventBus:
    """Synchronous publish/subscribe for the presentation layer.

    Handlers run in subscription order on the publishing call. A handler
    that raises stops delivery and the error reaches the publisher.
    """

    def __init__(self):
        self._handlers: Dict[str, List[Callable]] = defaultdict(list)

    def subscribe(self, event: str, handler: Callable) -> Callable[[], None]:
        """Register a handler and return a function that removes it"""
        self._handlers[event].append(handler)

        def unsubscribe():
            if handler in self._handlers[event]:
                self._handlers[event].remove(handler)

        return unsubscribe

    def publish(self, event: str, **payload):
        handlers = list(self._handlers.get(event, []))
        logger.debug("Publishing %s to %d handler(s): %s", event, len(handlers), payload)
        for handler in handlers:
            handler(**payload)
