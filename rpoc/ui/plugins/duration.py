#!/usr/bin/env python3
"""
Command duration report printed after slow commands.
"""

from typing import Any, Optional

from rich.console import Console
from rich.text import Text

from ...config import Config, VariableStore, is_enabled
from ..plugin_system import BasePlugin, PluginMetadata
from ..theme import build_segments, segments_to_text

MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1000


def _format_seconds(sub_minute_ms: int, decimals: int) -> str:
    whole = sub_minute_ms // MS_PER_SECOND
    if decimals <= 0:
        return str(whole)
    # Truncate, never round up to the next unit
    fraction = (sub_minute_ms % MS_PER_SECOND) * 10**decimals // MS_PER_SECOND
    return f"{whole}.{fraction:0{decimals}d}"


def format_duration(elapsed_ms: int, decimals: int = 0) -> str:
    hours = elapsed_ms // MS_PER_HOUR
    minutes = (elapsed_ms // MS_PER_MINUTE) % 60
    seconds = _format_seconds(elapsed_ms % MS_PER_MINUTE, decimals)

    if hours != 0:
        return f"{hours}h {minutes}m {seconds}s"
    if minutes != 0:
        return f"{minutes}m {seconds}s"
    return f"{seconds}s"


def parse_duration(sample: Any) -> Optional[int]:
    if sample is None or isinstance(sample, bool):
        return None
    if isinstance(sample, int):
        return sample if sample >= 0 else None

    text = str(sample).strip()
    if not text.isdecimal():
        return None
    return int(text)


def parse_decimals(value: Optional[str]) -> int:
    try:
        decimals = int(str(value).strip())
    except (TypeError, ValueError):
        return 0
    return max(decimals, 0)


def render_duration(sample: Any, store: Optional[VariableStore] = None) -> Text:
    store = store if store is not None else VariableStore()

    if is_enabled(Config.DURATION_DISABLED, store):
        return Text()

    elapsed_ms = parse_duration(sample)
    if elapsed_ms is None or elapsed_ms < Config.DURATION_THRESHOLD_MS:
        return Text()

    def setting(name: str) -> str:
        return store.get(name, Config.DURATION_DEFAULTS[name])

    value = format_duration(
        elapsed_ms, parse_decimals(setting("rpoc_cmd_duration_decimals"))
    )
    segments = [("", "\n")] + build_segments(
        setting("rpoc_cmd_duration_prefix"),
        setting("rpoc_cmd_duration_prefix_color"),
        value,
        setting("rpoc_cmd_duration_color"),
        setting("rpoc_cmd_duration_postfix"),
        setting("rpoc_cmd_duration_postfix_color"),
    )
    return segments_to_text(segments)


class DurationPlugin(BasePlugin):
    def __init__(
        self, console: Optional[Console] = None, store: Optional[VariableStore] = None
    ):
        super().__init__(
            PluginMetadata(
                name="cmd_duration",
                version="1.0.0",
                description="Reports how long the last command took",
                disabled_flag=Config.DURATION_DISABLED,
            ),
            store,
        )
        self.console = console if console is not None else Console()

    def execute(self, command: str, duration_ms: Any) -> Text:
        text = render_duration(duration_ms, self.store)
        if text.plain:
            self.console.print(text)
        return text
