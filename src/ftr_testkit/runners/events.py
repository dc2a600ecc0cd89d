from enum import Enum
from typing import Any, Callable, Dict, List, Protocol

class RunEvent(Enum):
    START = "start"
    HOOK_START = "hook"
    HOOK_END = "hook end"
    SUITE_START = "suite"
    SUITE_END = "suite end"
    TEST_START = "test"
    TEST_END = "test end"
    PENDING = "pending"
    PASS = "pass"
    FAIL = "fail"
    END = "end"

Handler = Callable[..., Any]

class EventSource(Protocol):
    def on(self, event: RunEvent, handler: Handler) -> None: ...
    def off(self, event: RunEvent, handler: Handler) -> None: ...

class EventEmitter:
    """Synchronous event bus; handlers run in registration order on the emitting thread."""

    def __init__(self):
        self._handlers: Dict[RunEvent, List[Handler]] = {}

    def on(self, event: RunEvent, handler: Handler) -> None:
        self._handlers.setdefault(event, []).append(handler)

    def off(self, event: RunEvent, handler: Handler) -> None:
        handlers = self._handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def listeners(self, event: RunEvent) -> List[Handler]:
        return list(self._handlers.get(event, []))

    def emit(self, event: RunEvent, *payload: Any) -> None:
        # copy so a handler may unsubscribe itself mid-dispatch
        for handler in list(self._handlers.get(event, [])):
            handler(*payload)
