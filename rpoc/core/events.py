#!/usr/bin/env python3
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from ..config import VariableStore
from ..debug import debug_log


class HostEvent(Enum):
    # Fires before every natural prompt, never for a synthetic repaint
    PROMPT = "fish_prompt"
    # handler(command)
    PREEXEC = "fish_preexec"
    # handler(command, duration_ms)
    POSTEXEC = "fish_postexec"


EventHandler = Callable[..., Any]


class EventBus:
    def __init__(self, store: Optional[VariableStore] = None) -> None:
        self.store = store
        # Anything with an ``is_refreshing`` attribute; set once refresh is installed
        self.refresh_state: Optional[Any] = None
        self._handlers: Dict[HostEvent, List[EventHandler]] = {
            event: [] for event in HostEvent
        }

    @property
    def is_refreshing(self) -> bool:
        return bool(getattr(self.refresh_state, "is_refreshing", False))

    def subscribe(self, event: HostEvent, handler: EventHandler) -> None:
        handlers = self._handlers[event]
        if handler not in handlers:
            handlers.append(handler)

    def unsubscribe(self, event: HostEvent, handler: EventHandler) -> None:
        try:
            self._handlers[event].remove(handler)
        except ValueError:
            pass

    def handlers(self, event: HostEvent) -> List[EventHandler]:
        return list(self._handlers[event])

    def emit(self, event: HostEvent, *args: Any) -> None:
        # Handlers may unsubscribe themselves while being dispatched
        for handler in self.handlers(event):
            try:
                handler(*args)
            except Exception as error:
                debug_log(
                    f"{event.value} handler {getattr(handler, '__name__', handler)!r} failed: {error}",
                    refreshing=self.is_refreshing,
                    store=self.store,
                )
