"""Minimal synchronous event emitter used for request lifecycle hooks."""

from collections import defaultdict
from typing import Any, Callable, DefaultDict, List

DEBUG_REQUEST = "debug::request"
DEBUG_RESPONSE = "debug::response"
DEBUG_RESULT = "debug::result"

LIFECYCLE_EVENTS = (DEBUG_REQUEST, DEBUG_RESPONSE, DEBUG_RESULT)

Listener = Callable[[Any], None]


class EventEmitter:
    """Dispatches named events to subscribed callbacks in subscription order."""

    def __init__(self) -> None:
        self._listeners: DefaultDict[str, List[Listener]] = defaultdict(list)

    def on(self, event_type: str, callback: Listener) -> None:
        self._listeners[event_type].append(callback)

    def off(self, event_type: str, callback: Listener) -> None:
        if callback in self._listeners[event_type]:
            self._listeners[event_type].remove(callback)

    def emit(self, event_type: str, event_data: Any) -> None:
        for callback in list(self._listeners[event_type]):
            callback(event_data)
