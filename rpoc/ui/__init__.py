from .manager import UIManager, create_console
from .theme import PanelTheme

__all__ = ["PanelTheme", "UIManager", "create_console"]
