import io

import pytest
from rich.console import Console

from rpoc.ui.plugins.duration import (
    DurationPlugin,
    format_duration,
    parse_duration,
    render_duration,
)


def test_format_duration_examples():
    assert format_duration(3661000, 0) == "1h 1m 1s"
    assert format_duration(125000, 0) == "2m 5s"
    assert format_duration(4000, 0) == "4s"
    assert format_duration(0, 0) == "0s"


def test_format_duration_keeps_zero_minutes_when_hours_set():
    assert format_duration(3600000) == "1h 0m 0s"
    assert format_duration(7205000) == "2h 0m 5s"


def test_format_duration_truncates_seconds():
    assert format_duration(59999) == "59s"
    assert format_duration(4567, 1) == "4.5s"
    assert format_duration(125250, 2) == "2m 5.25s"
    assert format_duration(61150, 2) == "1m 1.15s"
    assert format_duration(5570, 2) == "5.57s"
    assert format_duration(8700, 1) == "8.7s"
    assert format_duration(3005, 2) == "3.00s"
    assert format_duration(4007, 4) == "4.0070s"


@pytest.mark.parametrize("elapsed", [0, 1, 999, 2999, "2999"])
def test_below_threshold_is_silent(store, elapsed):
    assert render_duration(elapsed, store).plain == ""
    store.set("rpoc_cmd_duration_disabled", "0")
    assert render_duration(elapsed, store).plain == ""
    store.set("rpoc_cmd_duration_disabled", "1")
    assert render_duration(elapsed, store).plain == ""


@pytest.mark.parametrize("sample", [None, "", "abc", "-5000", "3.5", -4000, True])
def test_invalid_sample_is_silent(store, sample):
    assert parse_duration(sample) is None
    assert render_duration(sample, store).plain == ""


def test_disabled_is_silent(store):
    store.set("rpoc_cmd_duration_disabled", "TRUE")
    assert render_duration(10000, store).plain == ""


def test_render_duration_layout(store):
    text = render_duration(3000, store)
    assert text.plain == "\ntook 3s"

    value_spans = [span for span in text.spans if "bold" in str(span.style)]
    assert len(value_spans) == 1
    span = value_spans[0]
    assert text.plain[span.start : span.end] == "3s"
    assert str(span.style) == "bold #e5c890"


def test_render_duration_custom_settings(store):
    store.set("rpoc_cmd_duration_prefix", "⏱ ")
    store.set("rpoc_cmd_duration_postfix", " elapsed")
    store.set("rpoc_cmd_duration_color", "red")
    store.set("rpoc_cmd_duration_decimals", "1")

    text = render_duration("125250", store)
    assert text.plain == "\n⏱ 2m 5.2s elapsed"


def test_invalid_decimals_fall_back_to_zero(store):
    store.set("rpoc_cmd_duration_decimals", "lots")
    assert render_duration(4500, store).plain == "\ntook 4s"


def test_plugin_prints_only_slow_commands(store):
    output = io.StringIO()
    console = Console(file=output, force_terminal=False, width=80)
    plugin = DurationPlugin(console, store)

    plugin("sleep 0", 10)
    assert output.getvalue() == ""

    plugin("sleep 5", 5000)
    assert output.getvalue() == "\ntook 5s\n"
