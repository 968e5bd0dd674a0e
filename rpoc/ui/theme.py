#!/usr/bin/env python3
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from rich.panel import Panel
from rich.text import Text

from ..config import Config

Segment = Tuple[str, str]

# Colors that mean "terminal default" in the variable store
DEFAULT_COLOR_NAMES = {"", "normal", "default", "reset"}


def normalize_color(color: Optional[str]) -> str:
    if color is None:
        return ""
    normalized = color.strip()
    if normalized.lower() in DEFAULT_COLOR_NAMES:
        return ""
    return normalized


def bold(style: str) -> str:
    return f"bold {style}" if style else "bold"


def build_segments(
    prefix: str,
    prefix_color: Optional[str],
    value: str,
    value_color: Optional[str],
    postfix: str,
    postfix_color: Optional[str],
) -> List[Segment]:
    """Prefix, bold value and postfix, each with its own style.

    The trailing empty segment carries no style and resets what follows.
    """
    return [
        (normalize_color(prefix_color), prefix),
        (bold(normalize_color(value_color)), value),
        (normalize_color(postfix_color), postfix),
        ("", ""),
    ]


def segments_to_text(segments: List[Segment]) -> Text:
    text = Text()
    for style, fragment in segments:
        text.append(fragment, style=style or None)
    return text


@dataclass(frozen=True)
class PanelStyle:
    border_style: str
    padding: Optional[tuple[int, int]] = (0, 1)
    title_align: str = "left"
    expand: bool = False


class PanelTheme:
    @staticmethod
    def get_style(name: str) -> PanelStyle:
        theme = Config.PANEL_STYLES.get(name, Config.PANEL_STYLES["default"])
        default_theme = Config.PANEL_STYLES["default"]

        return PanelStyle(
            border_style=theme.get(
                "border_style", default_theme.get("border_style", "#888888")
            ),
            padding=theme.get("padding", default_theme.get("padding")),
            title_align=theme.get(
                "title_align", default_theme.get("title_align", "left")
            ),
            expand=theme.get("expand", default_theme.get("expand", False)),
        )

    @staticmethod
    def build(
        renderable: Any,
        title: str = "",
        style: str = "default",
        *,
        fit: bool = False,
        **overrides: Any,
    ) -> Panel:
        panel_style = PanelTheme.get_style(style)

        panel_kwargs: Dict[str, Any] = {"border_style": panel_style.border_style}
        if panel_style.padding is not None:
            panel_kwargs["padding"] = panel_style.padding
        if panel_style.title_align:
            panel_kwargs["title_align"] = panel_style.title_align
        if panel_style.expand:
            panel_kwargs["expand"] = panel_style.expand

        panel_kwargs.update(overrides)

        if fit:
            return Panel.fit(renderable, title=title, **panel_kwargs)

        return Panel(renderable, title=title, **panel_kwargs)
