"""Event emitter implementation using Observer Pattern."""
from typing import Any, Callable, Dict, List, Optional


class EventEmitter:
    """
    Event emitter using Observer Pattern.

    Handlers run synchronously in registration order. An exception
    raised by a handler propagates to whoever called ``emit``.
    """

    def __init__(self):
        """Initializes event emitter."""
        self._events: Dict[str, List[Callable]] = {}

    def on(self, event: str, callback: Callable) -> 'EventEmitter':
        """Registers an event handler."""
        self._events.setdefault(event, []).append(callback)
        return self

    def once(self, event: str, callback: Callable) -> 'EventEmitter':
        """Registers a handler that is removed after its first call."""
        def wrapper(*args, **kwargs):
            self.off(event, wrapper)
            return callback(*args, **kwargs)

        return self.on(event, wrapper)

    def emit(self, event: str, *args: Any, **kwargs: Any) -> bool:
        """
        Emits an event.

        Returns:
            True if at least one handler was called
        """
        handlers = list(self._events.get(event, ()))
        for callback in handlers:
            callback(*args, **kwargs)
        return bool(handlers)

    def off(self, event: str, callback: Optional[Callable] = None) -> 'EventEmitter':
        """Removes one handler, or every handler of the event when none is given."""
        if event not in self._events:
            return self

        if callback is None:
            del self._events[event]
        else:
            remaining = [cb for cb in self._events[event] if cb != callback]
            if remaining:
                self._events[event] = remaining
            else:
                del self._events[event]

        return self

    def listener_count(self, event: str) -> int:
        """Number of handlers registered for an event."""
        return len(self._events.get(event, ()))
