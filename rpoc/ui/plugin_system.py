#!/usr/bin/env python3
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from ..config import VariableStore, is_enabled


@dataclass
class PluginMetadata:
    name: str
    version: str
    description: str
    author: str = "rpoc"
    # Store flag that switches the plugin off when enabled
    disabled_flag: Optional[str] = None


class BasePlugin(ABC):
    def __init__(
        self, metadata: PluginMetadata, store: Optional[VariableStore] = None
    ) -> None:
        self.metadata = metadata
        self.store = store if store is not None else VariableStore()

    @property
    def enabled(self) -> bool:
        if not self.metadata.disabled_flag:
            return True
        return not is_enabled(self.metadata.disabled_flag, self.store)

    @abstractmethod
    def execute(self, *args: Any) -> Any:
        pass

    def __call__(self, *args: Any) -> Any:
        return self.execute(*args)
