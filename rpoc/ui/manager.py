#!/usr/bin/env python3
import os

from prompt_toolkit.formatted_text import HTML, FormattedText, to_formatted_text
from prompt_toolkit.styles import Style, merge_styles
from prompt_toolkit.styles.defaults import default_ui_style
from rich.console import Console
from rich.text import Text

from ..config import Config
from .theme import PanelTheme


class UIManager:
    def __init__(self, console: Console) -> None:
        self.console = console

    def get_prompt_text(self) -> FormattedText:
        path_display = self._format_path_for_prompt(os.getcwd())
        prompt_symbol = Config.PROMPT_SYMBOL or "❯"

        return to_formatted_text(
            HTML("<path>{}</path> <prompt_symbol>{}</prompt_symbol> ").format(
                path_display, prompt_symbol
            )
        )

    def get_style(self) -> Style:
        custom_style = Style.from_dict(Config.PROMPT_STYLES)
        return merge_styles([default_ui_style(), custom_style])

    def _format_path_for_prompt(self, path: str) -> str:
        try:
            current_path = os.path.abspath(path)
        except OSError:
            return path

        home_dir = os.path.expanduser("~")

        if current_path == home_dir:
            return "~"

        if current_path.startswith(home_dir + os.sep):
            return "~" + current_path[len(home_dir) :]

        return current_path

    def display_error(self, command: str, error_msg: str) -> None:
        self.console.print(
            PanelTheme.build(
                Text(error_msg, style="red"),
                title=f" Shell: {command}",
                style="error",
                fit=True,
            )
        )

    def display_interrupt(self, message: str = "^C - Command interrupted") -> None:
        self.console.print(f"[yellow]{message}[/yellow]")

    def display_goodbye(self) -> None:
        self.console.print("[yellow]Goodbye![/yellow]")


def create_console() -> Console:
    return Console(highlight=False)
