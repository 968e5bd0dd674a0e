#!/usr/bin/env python3
import os
import shlex
import subprocess
from typing import Dict, List, Optional

from rich.console import Console

from ..config import Config


class ShellCommandExecutor:
    def __init__(self, console: Console, ui) -> None:
        self.console = console
        self.ui = ui
        self.previous_directory = os.getcwd()

    def execute(self, command: str) -> Optional[str]:
        if not command.strip():
            return None

        try:
            normalized = command.strip()

            if normalized == "exit":
                return "exit"
            if normalized == "cd" or normalized.startswith("cd "):
                self._handle_cd_command(normalized)
                return None
            if self._handle_export_command(normalized):
                return None
            if self._handle_unset_command(normalized):
                return None

            self._handle_regular_command(command)
        except KeyboardInterrupt:
            self.ui.display_interrupt()
        except Exception as error:
            self.ui.display_error(command, f"Error: {error}")

        return None

    def _handle_cd_command(self, command: str) -> None:
        path = command[3:].strip()
        if not path:
            path = os.path.expanduser("~")
        elif path == "-":
            path = self.previous_directory or os.path.expanduser("~")
        else:
            path = os.path.expanduser(path)

        try:
            old_dir = os.getcwd()
            os.chdir(path)
            self.previous_directory = old_dir
        except OSError as error:
            self.ui.display_error(command, f"cd: {error}")

    def _handle_export_command(self, command: str) -> bool:
        if command != "export" and not command.startswith("export "):
            return False

        try:
            tokens = shlex.split(command)
        except ValueError as error:
            self.ui.display_error(command, f"export: {error}")
            return True

        if len(tokens) == 1:
            entries = [f"{key}={value}" for key, value in sorted(os.environ.items())]
            self.console.print("\n".join(entries), markup=False, highlight=False)
            return True

        updates: Dict[str, str] = {}
        for token in tokens[1:]:
            if "=" not in token:
                self.ui.display_error(command, f"export: invalid assignment '{token}'")
                return True
            name, value = token.split("=", 1)
            if not name.isidentifier():
                self.ui.display_error(command, f"export: invalid name '{name}'")
                return True
            updates[name] = value

        # The prompt hooks read their settings from the environment
        os.environ.update(updates)
        return True

    def _handle_unset_command(self, command: str) -> bool:
        if not command.startswith("unset "):
            return False

        try:
            tokens = shlex.split(command)
        except ValueError as error:
            self.ui.display_error(command, f"unset: {error}")
            return True

        removed: List[str] = []
        for name in tokens[1:]:
            if name in os.environ:
                removed.append(name)
                del os.environ[name]

        if not removed:
            self.console.print("[yellow]No variables unset[/yellow]")
        return True

    def _handle_regular_command(self, command: str) -> None:
        shell_kwargs = {}
        if os.name != "nt":
            shell_kwargs["executable"] = Config.get_shell()

        subprocess.run(
            command,
            shell=True,
            cwd=os.getcwd(),
            env=os.environ.copy(),
            **shell_kwargs,
        )
