#!/usr/bin/env python3
import json
import os
import shutil
from enum import Enum
from pathlib import Path
from typing import Dict, Mapping, Optional


class FlagState(Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"
    UNSET = "unset"


def resolve_flag(value: Optional[str]) -> FlagState:
    if value is None:
        return FlagState.UNSET

    normalized = str(value).strip().lower()
    if not normalized:
        return FlagState.DISABLED
    if normalized in {"1", "true"}:
        return FlagState.ENABLED
    return FlagState.DISABLED


class Config:
    # Boolean-like flags read from the variable store
    DURATION_DISABLED = "rpoc_cmd_duration_disabled"
    REFRESH_DISABLED_LEFT = "rpoc_disable_refresh_left"
    REFRESH_DISABLED_RIGHT = "rpoc_disable_refresh_right"
    TIME_PROMPT_DISABLED = "rpoc_time_prompt_disabled"
    DEBUG = "rpoc_debug"

    # Commands faster than this are not reported
    DURATION_THRESHOLD_MS = 3000

    TIME_DEFAULTS = {
        "rpoc_time_prefix": "at ",
        "rpoc_time_prefix_color": "normal",
        "rpoc_time_color": "#e5c890",
        "rpoc_time_postfix": "",
        "rpoc_time_postfix_color": "normal",
    }

    DURATION_DEFAULTS = {
        "rpoc_cmd_duration_prefix": "took ",
        "rpoc_cmd_duration_prefix_color": "normal",
        "rpoc_cmd_duration_color": "#e5c890",
        "rpoc_cmd_duration_postfix": "",
        "rpoc_cmd_duration_postfix_color": "normal",
        "rpoc_cmd_duration_decimals": "0",
    }

    # Values for the variable store loaded from config.json
    VARIABLES: Dict[str, str] = {}

    PROMPT_SYMBOL = "❯"

    PROMPT_STYLES = {
        "path": "#8caaee bold",
        "prompt_symbol": "#f2d5cf bold",
        "rprompt": "",
    }

    PANEL_STYLES = {
        "default": {
            "border_style": "#888888",
            "padding": (0, 1),
            "title_align": "left",
            "expand": False,
        },
        "error": {
            "border_style": "#e78284",
            "padding": (0, 1),
            "title_align": "left",
            "expand": False,
        },
    }

    CONFIG_DIR = Path.home() / ".rpoc"
    CONFIG_JSON_FILE = CONFIG_DIR / "config.json"
    HISTORY_FILE = CONFIG_DIR / "history"
    CACHE_DIR = Path(
        os.environ.get("XDG_CACHE_HOME") or Path.home() / ".cache"
    ) / "rpoc"
    DEBUG_LOG_FILE = CACHE_DIR / "rpoc_debug.log"

    DEFAULT_SHELL = (
        "/bin/bash" if os.name != "nt" else os.environ.get("COMSPEC", "cmd.exe")
    )

    @classmethod
    def ensure_directories(cls) -> None:
        cls.CONFIG_DIR.mkdir(exist_ok=True)

        if not cls.CONFIG_JSON_FILE.exists():
            cls._write_default_json_config()

    @classmethod
    def get_shell(cls) -> str:
        env_shell = os.getenv("RPOC_SHELL")
        if env_shell:
            return env_shell

        if os.name == "nt":
            return os.getenv("COMSPEC") or cls.DEFAULT_SHELL

        shell = os.getenv("SHELL")
        if shell and shutil.which(shell):
            return shell
        return cls.DEFAULT_SHELL

    @classmethod
    def _load_json_config(cls) -> bool:
        if not cls.CONFIG_JSON_FILE.exists():
            return False

        try:
            with cls.CONFIG_JSON_FILE.open("r", encoding="utf-8") as f:
                config_data = json.load(f)
        except (json.JSONDecodeError, OSError):
            return False

        def get_nested(data, *keys, default=None):
            current = data
            for key in keys:
                if isinstance(current, dict) and key in current:
                    current = current[key]
                else:
                    return default
            return current

        variables = get_nested(config_data, "variables", default={})
        if isinstance(variables, dict):
            # Variables are strings in the store, whatever JSON type they had
            cls.VARIABLES = {
                str(key): cls._stringify(value) for key, value in variables.items()
            }

        prompt_styles = get_nested(
            config_data, "ui", "prompt_styles", default=cls.PROMPT_STYLES
        )
        if isinstance(prompt_styles, dict):
            cls.PROMPT_STYLES.update(prompt_styles)

        prompt_symbol = get_nested(
            config_data, "ui", "prompt_symbol", default=cls.PROMPT_SYMBOL
        )
        if isinstance(prompt_symbol, str):
            cls.PROMPT_SYMBOL = prompt_symbol

        return True

    @staticmethod
    def _stringify(value) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    @classmethod
    def _write_default_json_config(cls) -> None:
        config_data = {
            "variables": {
                **cls.TIME_DEFAULTS,
                **cls.DURATION_DEFAULTS,
            },
            "ui": {
                "prompt_symbol": cls.PROMPT_SYMBOL,
                "prompt_styles": cls.PROMPT_STYLES,
            },
        }

        try:
            with cls.CONFIG_JSON_FILE.open("w", encoding="utf-8") as f:
                json.dump(config_data, f, indent=2, ensure_ascii=False)
        except OSError:
            pass

    @classmethod
    def reload(cls) -> bool:
        try:
            cls.ensure_directories()
            cls._load_json_config()
            return True
        except Exception:
            return False


class VariableStore:
    """View over the named settings the prompt hooks consume.

    Lookup order: explicit ``overrides``, the process environment (exact name,
    then upper-cased name), then the ``variables`` section of config.json.
    Values are re-read on every call so changes take effect on the next render.
    """

    def __init__(
        self,
        overrides: Optional[Mapping[str, str]] = None,
        use_environment: bool = True,
        use_config: bool = True,
    ) -> None:
        self.overrides: Dict[str, str] = dict(overrides or {})
        self.use_environment = use_environment
        self.use_config = use_config

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        if name in self.overrides:
            return self.overrides[name]

        if self.use_environment:
            for key in (name, name.upper()):
                value = os.environ.get(key)
                if value is not None:
                    return value

        if self.use_config and name in Config.VARIABLES:
            return Config.VARIABLES[name]

        return default

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def set(self, name: str, value: str) -> None:
        self.overrides[name] = value

    def erase(self, name: str) -> None:
        self.overrides.pop(name, None)

    def flag(self, name: str) -> FlagState:
        return resolve_flag(self.get(name))


def is_enabled(name: str, store: Optional[VariableStore] = None) -> bool:
    store = store if store is not None else VariableStore()
    return store.flag(name) is FlagState.ENABLED


Config._load_json_config()
