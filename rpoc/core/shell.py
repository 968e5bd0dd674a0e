#!/usr/bin/env python3
import sys
import time
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.application import get_app
from prompt_toolkit.history import FileHistory
from prompt_toolkit.key_binding import KeyBindings

from ..commands import ShellCommandExecutor
from ..config import Config, VariableStore
from ..ui import UIManager, create_console
from .bootstrap import Bootstrap
from .events import HostEvent
from .host import Host, KeyHandler


class RefreshShell(Host):
    """Interactive prompt_toolkit shell that hosts the prompt refresh hooks."""

    def __init__(self, store: Optional[VariableStore] = None) -> None:
        super().__init__(store)

        self.session = PromptSession(history=FileHistory(str(Config.HISTORY_FILE)))
        self.console = create_console()

        self.ui = UIManager(self.console)
        self.command_executor = ShellCommandExecutor(
            console=self.console,
            ui=self.ui,
        )
        self.bindings = KeyBindings()

        # Installed before the bootstrap so it becomes the wrapped original
        self.left_prompt = self.ui.get_prompt_text
        self.bootstrap = Bootstrap(self, console=self.console)

    def is_interactive(self) -> bool:
        return sys.stdin.isatty() and sys.stdout.isatty()

    def bind_key(self, key: str, handler: KeyHandler) -> None:
        super().bind_key(key, handler)

        @self.bindings.add(key)
        def _(event):
            handler()

    def repaint(self) -> None:
        # The session keeps drawing these until it is done, so the prompt left
        # in scrollback is the one rendered at submission.
        self.session.message = self.render_left()
        self.session.rprompt = self.render_right()
        get_app().invalidate()

    def submit(self) -> None:
        get_app().current_buffer.validate_and_handle()

    def execute_shell_command(self, command: str) -> Optional[str]:
        self.events.emit(HostEvent.PREEXEC, command)
        started = time.monotonic()
        try:
            return self.command_executor.execute(command)
        finally:
            elapsed_ms = int((time.monotonic() - started) * 1000)
            self.events.emit(HostEvent.POSTEXEC, command, elapsed_ms)

    def read_command(self) -> str:
        return self.session.prompt(
            message=self.render_left,
            rprompt=self.render_right,
            key_bindings=self.bindings,
            style=self.ui.get_style(),
        )

    def run(self) -> None:
        self.bootstrap.attach()

        try:
            while True:
                self.events.emit(HostEvent.PROMPT)
                try:
                    user_input = self.read_command()
                except KeyboardInterrupt:
                    continue
                except EOFError:
                    self.ui.display_goodbye()
                    break

                command = user_input.strip()
                if not command:
                    continue

                if self.execute_shell_command(command) == "exit":
                    break
        except KeyboardInterrupt:
            self.ui.display_goodbye()
