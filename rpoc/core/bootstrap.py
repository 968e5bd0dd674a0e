#!/usr/bin/env python3
from typing import Optional

from rich.console import Console

from ..ui.plugins.clock import TimePromptPlugin
from ..ui.plugins.duration import DurationPlugin
from .events import HostEvent
from .host import SUBMIT_KEYS, Host
from .refresh import RefreshStateMachine
from .wrappers import PromptWrapper, RightPromptWrapper


class Bootstrap:
    """One-shot installer for the submit-time prompt refresh.

    Runs on the first PROMPT event of an interactive session, wraps whatever
    prompt callbacks the host already had, binds Enter, and then unsubscribes
    itself.
    """

    def __init__(self, host: Host, console: Optional[Console] = None) -> None:
        self.host = host
        self.console = console
        self.state: Optional[RefreshStateMachine] = None
        self.left_wrapper: Optional[PromptWrapper] = None
        self.right_wrapper: Optional[RightPromptWrapper] = None
        self.duration_plugin: Optional[DurationPlugin] = None

    @property
    def installed(self) -> bool:
        return self.state is not None

    def attach(self) -> bool:
        if not self.host.is_interactive():
            return False
        self.host.events.subscribe(HostEvent.PROMPT, self.on_prompt)
        return True

    def on_prompt(self) -> None:
        try:
            self.install()
        finally:
            self.host.events.unsubscribe(HostEvent.PROMPT, self.on_prompt)

    def install(self) -> Optional[RefreshStateMachine]:
        host = self.host
        if self.installed or not host.is_interactive():
            return self.state

        state = RefreshStateMachine(host)
        self.state = state
        host.events.refresh_state = state

        for key in SUBMIT_KEYS:
            host.bind_key(key, state.on_submit_key)

        self.left_wrapper = PromptWrapper(state, host.left_prompt, host.store)
        host.left_prompt = self.left_wrapper

        right_original = host.right_prompt
        if right_original is None:
            clock = TimePromptPlugin(state, host.store)
            if clock.enabled:
                right_original = clock
        self.right_wrapper = RightPromptWrapper(state, right_original, host.store)
        host.right_prompt = self.right_wrapper

        self.duration_plugin = DurationPlugin(self.console, host.store)
        host.events.subscribe(HostEvent.POSTEXEC, self.duration_plugin)
        host.events.subscribe(HostEvent.PREEXEC, state.on_preexec)

        state.log("prompt refresh installed")
        return state
