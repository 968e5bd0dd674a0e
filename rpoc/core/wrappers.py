#!/usr/bin/env python3
from enum import Enum
from typing import Optional

from prompt_toolkit.formatted_text import FormattedText, to_formatted_text

from ..config import Config, VariableStore, is_enabled
from .host import PromptCallback
from .refresh import RefreshStateMachine


class PromptSide(Enum):
    LEFT = "left"
    RIGHT = "right"


REFRESH_DISABLED_FLAGS = {
    PromptSide.LEFT: Config.REFRESH_DISABLED_LEFT,
    PromptSide.RIGHT: Config.REFRESH_DISABLED_RIGHT,
}


class PromptWrapper:
    """Wraps the prompt callback that existed before installation.

    During a refresh, a side whose refresh is disabled shows its last output
    instead of calling the original again.
    """

    side = PromptSide.LEFT

    def __init__(
        self,
        state: RefreshStateMachine,
        original: Optional[PromptCallback] = None,
        store: Optional[VariableStore] = None,
    ) -> None:
        self.state = state
        self.original = original
        self.store = store if store is not None else state.host.store
        self.cache = FormattedText()

    @property
    def refresh_disabled(self) -> bool:
        return is_enabled(REFRESH_DISABLED_FLAGS[self.side], self.store)

    def __call__(self) -> FormattedText:
        if self.state.is_refreshing and self.refresh_disabled:
            self.state.log(f"{self.side.value} refresh disabled, using cached prompt")
            return self.cache

        if self.original is None:
            self.cache = FormattedText()
            return self.cache

        try:
            output = FormattedText(to_formatted_text(self.original()))
        except Exception as error:
            self.state.log(f"{self.side.value} prompt failed: {error}")
            return self.cache

        self.cache = output
        return output


class RightPromptWrapper(PromptWrapper):
    side = PromptSide.RIGHT

    def __call__(self) -> FormattedText:
        try:
            return super().__call__()
        finally:
            # Leaves REFRESHING only once the right side has rendered
            self.state.on_right_prompt_rendered()
