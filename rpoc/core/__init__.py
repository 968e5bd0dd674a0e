from .bootstrap import Bootstrap
from .events import EventBus, HostEvent
from .host import Host
from .refresh import RefreshState, RefreshStateMachine
from .shell import RefreshShell
from .wrappers import PromptSide, PromptWrapper, RightPromptWrapper

__all__ = [
    "Bootstrap",
    "EventBus",
    "Host",
    "HostEvent",
    "PromptSide",
    "PromptWrapper",
    "RefreshShell",
    "RefreshState",
    "RefreshStateMachine",
    "RightPromptWrapper",
]
