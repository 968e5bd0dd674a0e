import io
import re

from rich.console import Console

from rpoc.core.bootstrap import Bootstrap
from rpoc.core.events import HostEvent
from rpoc.core.wrappers import PromptWrapper, RightPromptWrapper
from rpoc.ui.plugins.clock import TimePromptPlugin


def plain(fragments):
    return "".join(text for _, text in fragments)


def make_console():
    output = io.StringIO()
    return Console(file=output, force_terminal=False, width=80), output


def test_non_interactive_is_noop(non_interactive_host):
    host = non_interactive_host
    original = lambda: "$ "
    host.left_prompt = original
    bootstrap = Bootstrap(host)

    assert bootstrap.attach() is False
    host.draw_prompt()

    assert bootstrap.install() is None
    assert bootstrap.installed is False
    assert host.key_handlers == {}
    assert host.left_prompt is original
    assert host.right_prompt is None
    for event in HostEvent:
        assert host.events.handlers(event) == []


def test_installs_on_first_prompt_and_deregisters(host):
    bootstrap = Bootstrap(host)
    bootstrap.attach()
    assert host.events.handlers(HostEvent.PROMPT) == [bootstrap.on_prompt]

    host.draw_prompt()

    assert bootstrap.installed
    assert host.events.handlers(HostEvent.PROMPT) == []
    assert set(host.key_handlers) == {"c-m", "c-j"}
    assert host.key_handlers["c-m"] == bootstrap.state.on_submit_key
    assert host.key_handlers["c-j"] == bootstrap.state.on_submit_key
    assert bootstrap.state.is_refreshing is False

    state = bootstrap.state
    host.draw_prompt()
    assert bootstrap.state is state


def test_wraps_existing_callbacks(host):
    left = lambda: "$ "
    right = lambda: "git:main"
    host.left_prompt = left
    host.right_prompt = right

    bootstrap = Bootstrap(host)
    bootstrap.install()

    assert isinstance(host.left_prompt, PromptWrapper)
    assert isinstance(host.right_prompt, RightPromptWrapper)
    assert host.left_prompt.original is left
    assert host.right_prompt.original is right


def test_adopts_clock_when_no_right_prompt(host):
    bootstrap = Bootstrap(host)
    bootstrap.install()

    assert isinstance(host.right_prompt.original, TimePromptPlugin)
    assert plain(host.render_right()) == "at --:--:--"


def test_time_prompt_disabled_leaves_right_empty(host, store):
    store.set("rpoc_time_prompt_disabled", "1")
    bootstrap = Bootstrap(host)
    bootstrap.install()

    assert host.right_prompt.original is None
    assert host.render_right() == []


def test_clock_sees_refresh_during_synthetic_repaint(host):
    bootstrap = Bootstrap(host)
    bootstrap.attach()
    host.draw_prompt()

    host.press()

    repainted_right = plain(host.repaints[0][1])
    assert re.fullmatch(r"at \d{2}:\d{2}:\d{2}", repainted_right)
    assert bootstrap.state.is_refreshing is False

    _, right = host.draw_prompt()
    assert plain(right) == "at --:--:--"


def test_end_to_end_submit_cycle(host):
    calls = []

    def fish_prompt():
        calls.append(1)
        return "$ "

    host.left_prompt = fish_prompt
    console, output = make_console()
    bootstrap = Bootstrap(host, console=console)
    bootstrap.attach()

    host.draw_prompt()
    calls.clear()

    host.press()
    assert host.submits == 1
    assert plain(host.repaints[0][0]) == "$ "

    host.run_command("sleep 4", 4000)
    left, _ = host.draw_prompt()

    assert len(calls) == 2
    assert plain(left) == "$ "
    assert bootstrap.state.is_refreshing is False
    assert output.getvalue() == "\ntook 4s\n"


def test_fast_command_prints_nothing(host):
    console, output = make_console()
    Bootstrap(host, console=console).install()

    host.run_command("ls", 120)

    assert output.getvalue() == ""


def test_subscriber_errors_do_not_stop_dispatch(host):
    received = []

    def broken(command, duration_ms):
        raise ValueError("boom")

    host.events.subscribe(HostEvent.POSTEXEC, broken)
    host.events.subscribe(
        HostEvent.POSTEXEC, lambda command, duration_ms: received.append(command)
    )

    host.run_command("true", 0)

    assert received == ["true"]
