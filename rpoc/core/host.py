#!/usr/bin/env python3
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional

from prompt_toolkit.formatted_text import (
    AnyFormattedText,
    FormattedText,
    to_formatted_text,
)

from ..config import VariableStore
from .events import EventBus

PromptCallback = Callable[[], AnyFormattedText]
KeyHandler = Callable[[], None]

# Carriage return and newline both submit the current line
SUBMIT_KEYS = ("c-m", "c-j")


class Host(ABC):
    """The line editor the prompt hooks plug into.

    A host owns two prompt slots, a key binding table and the event bus, and
    knows how to repaint the prompt and submit the current input.
    """

    def __init__(self, store: Optional[VariableStore] = None) -> None:
        self.store = store if store is not None else VariableStore()
        self.events = EventBus(self.store)
        self.left_prompt: Optional[PromptCallback] = None
        self.right_prompt: Optional[PromptCallback] = None
        self.key_handlers: Dict[str, KeyHandler] = {}

    @abstractmethod
    def is_interactive(self) -> bool:
        pass

    @abstractmethod
    def repaint(self) -> None:
        """Redraw using the current prompt slots, without firing PROMPT."""

    @abstractmethod
    def submit(self) -> None:
        """Hand the current input to the normal execution pipeline."""

    def bind_key(self, key: str, handler: KeyHandler) -> None:
        self.key_handlers[key] = handler

    def render_left(self) -> FormattedText:
        return self._render(self.left_prompt)

    def render_right(self) -> FormattedText:
        return self._render(self.right_prompt)

    @staticmethod
    def _render(callback: Optional[PromptCallback]) -> FormattedText:
        if callback is None:
            return FormattedText()
        return FormattedText(to_formatted_text(callback()))
