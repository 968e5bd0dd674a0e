#!/usr/bin/env python3
from enum import Enum
from typing import TYPE_CHECKING

from ..debug import debug_log, get_calling_function_name

if TYPE_CHECKING:
    from .host import Host


class RefreshState(Enum):
    IDLE = 0
    REFRESHING = 1


class RefreshStateMachine:
    """Tracks the decorative repaint done when a command is submitted.

    Pressing Enter moves IDLE -> REFRESHING and asks the host for one extra
    draw of both prompts; the right prompt wrapper moves it back to IDLE once
    it has produced output. The prompt wrappers and the clock read
    ``is_refreshing`` to tell that extra draw apart from a normal prompt.
    """

    def __init__(self, host: "Host") -> None:
        self.host = host
        self._state = RefreshState.IDLE

    @property
    def state(self) -> RefreshState:
        return self._state

    @property
    def is_refreshing(self) -> bool:
        return self._state is RefreshState.REFRESHING

    def log(self, message: str) -> None:
        debug_log(
            message,
            refreshing=self.is_refreshing,
            store=self.host.store,
            caller=get_calling_function_name(),
        )

    def on_submit_key(self) -> None:
        if self.is_refreshing:
            self.log("previous refresh never reached the right prompt, restarting")

        self._state = RefreshState.REFRESHING
        self.log("submit key pressed, repainting")

        try:
            self.host.repaint()
        except Exception as error:
            self.log(f"repaint failed: {error}")
            self._state = RefreshState.IDLE
        finally:
            self.host.submit()

    def on_right_prompt_rendered(self) -> None:
        if not self.is_refreshing:
            return
        self._state = RefreshState.IDLE
        self.log("right prompt rendered, refresh finished")

    def on_preexec(self, command: str) -> None:
        self.log(f"executing: {command}")
