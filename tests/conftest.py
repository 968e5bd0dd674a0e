from datetime import datetime

import pytest

from rpoc.config import VariableStore
from rpoc.core.events import HostEvent
from rpoc.core.host import Host


class ScriptedHost(Host):
    """Host driven by the tests instead of a terminal."""

    def __init__(self, store, interactive=True):
        super().__init__(store)
        self.interactive = interactive
        self.repaints = []
        self.submits = 0
        self.fail_repaint = False

    def is_interactive(self):
        return self.interactive

    def repaint(self):
        if self.fail_repaint:
            raise RuntimeError("terminal went away")
        self.repaints.append((self.render_left(), self.render_right()))

    def submit(self):
        self.submits += 1

    def press(self, key="c-m"):
        self.key_handlers[key]()

    def draw_prompt(self):
        self.events.emit(HostEvent.PROMPT)
        return self.render_left(), self.render_right()

    def run_command(self, command, duration_ms):
        self.events.emit(HostEvent.PREEXEC, command)
        self.events.emit(HostEvent.POSTEXEC, command, duration_ms)


@pytest.fixture
def store():
    return VariableStore(use_environment=False, use_config=False)


@pytest.fixture
def host(store):
    return ScriptedHost(store)


@pytest.fixture
def fixed_now():
    return lambda: datetime(2024, 5, 17, 9, 4, 27)


@pytest.fixture
def non_interactive_host(store):
    return ScriptedHost(store, interactive=False)
