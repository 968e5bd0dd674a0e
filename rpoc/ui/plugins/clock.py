#!/usr/bin/env python3
"""
Clock segment for the right prompt.

Shows the wall-clock time while the prompt is being refreshed on submit, and a
placeholder on every other draw.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Callable, Optional, Union

from prompt_toolkit.formatted_text import FormattedText

from ...config import Config, FlagState, VariableStore, resolve_flag
from ..plugin_system import BasePlugin, PluginMetadata
from ..theme import build_segments

if TYPE_CHECKING:
    from ...core.refresh import RefreshStateMachine

TIME_FORMAT = "%H:%M:%S"
TIME_PLACEHOLDER = "--:--:--"

RefreshValue = Union[bool, str, None]


def _is_refreshing(refreshing: RefreshValue) -> bool:
    if isinstance(refreshing, str):
        return resolve_flag(refreshing) is FlagState.ENABLED
    return bool(refreshing)


def rpoc_fish_right_prompt_time(
    refreshing: RefreshValue,
    store: Optional[VariableStore] = None,
    now: Optional[Callable[[], datetime]] = None,
) -> FormattedText:
    store = store if store is not None else VariableStore()

    def setting(name: str) -> str:
        return store.get(name, Config.TIME_DEFAULTS[name])

    if _is_refreshing(refreshing):
        value = (now or datetime.now)().strftime(TIME_FORMAT)
    else:
        value = TIME_PLACEHOLDER

    return FormattedText(
        build_segments(
            setting("rpoc_time_prefix"),
            setting("rpoc_time_prefix_color"),
            value,
            setting("rpoc_time_color"),
            setting("rpoc_time_postfix"),
            setting("rpoc_time_postfix_color"),
        )
    )


class TimePromptPlugin(BasePlugin):
    def __init__(
        self,
        state: Optional["RefreshStateMachine"] = None,
        store: Optional[VariableStore] = None,
        now: Optional[Callable[[], datetime]] = None,
    ):
        super().__init__(
            PluginMetadata(
                name="time_prompt",
                version="1.0.0",
                description="Shows the submission time in the right prompt",
                disabled_flag=Config.TIME_PROMPT_DISABLED,
            ),
            store,
        )
        self.state = state
        self.now = now

    def execute(self) -> FormattedText:
        refreshing = self.state.is_refreshing if self.state is not None else None
        return rpoc_fish_right_prompt_time(refreshing, self.store, self.now)
