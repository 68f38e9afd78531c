"""Tests for the Terminal controller scripts and reply parsing."""

from __future__ import annotations

import json

import pytest

from terminal_mapper.exceptions import BridgeExitError, MalformedReplyError, WindowNotFoundError
from terminal_mapper.store import WindowInfo
from terminal_mapper.window_control import TerminalController, parse_window_list, window_title
from tests.conftest import StubExecutor


def test_create_window_passes_values_as_arguments(bridge: StubExecutor) -> None:
    bridge.queue("4821\n")
    controller = TerminalController(bridge)
    hostile_path = '/tmp/x"; do shell script "rm -rf ~'

    window_id = controller.create_window('Docs" & quit', hostile_path)

    assert window_id == "4821"
    script, args, language = bridge.calls[0]
    assert args == (hostile_path, 'Docs" & quit')
    assert language == "AppleScript"
    assert hostile_path not in script
    assert "quoted form of folderPath" in script
    assert 'tell application "Terminal"' in script


def test_create_window_bracketed_title(bridge: StubExecutor) -> None:
    bridge.queue("12")
    controller = TerminalController(bridge, title_style="bracketed")

    controller.create_window("Docs", "/Users/x/Documents/")

    assert bridge.calls[0][1] == ("/Users/x/Documents/", "[Docs] Documents")


def test_window_title_styles() -> None:
    assert window_title("Api", "/src/api") == "Api"
    assert window_title("Api", "/src/api", "bracketed") == "[Api] api"
    assert window_title("Root", "/", "bracketed") == "[Root] /"


def test_app_name_is_escaped(bridge: StubExecutor) -> None:
    bridge.queue("1")
    TerminalController(bridge, app_name='Term"inal').new_window()

    assert 'tell application "Term\\"inal"' in bridge.calls[0][0]


def test_invalid_title_style() -> None:
    with pytest.raises(ValueError):
        TerminalController(StubExecutor(), title_style="fancy")


def test_list_windows_uses_json_reply(bridge: StubExecutor) -> None:
    reply = json.dumps([{"id": "1", "name": "a, b: c"}, {"id": "2", "name": "Terminal 2"}])
    bridge.queue(reply)

    windows = TerminalController(bridge, app_name="Terminal").list_windows()

    assert windows == [WindowInfo("1", "a, b: c"), WindowInfo("2", "Terminal 2")]
    _, args, language = bridge.calls[0]
    assert args == ("Terminal",)
    assert language == "JavaScript"


@pytest.mark.parametrize(
    "reply",
    [
        "1:one, 2:two",
        '{"id": "1", "name": "x"}',
        '[{"id": 1, "name": "x"}]',
        '[{"id": "", "name": "x"}]',
        '[{"id": "1"}]',
        '["1"]',
    ],
)
def test_parse_window_list_rejects_malformed_replies(reply: str) -> None:
    with pytest.raises(MalformedReplyError):
        parse_window_list(reply)


def test_parse_empty_window_list() -> None:
    assert parse_window_list("[]") == []


@pytest.mark.parametrize("number", [-1728, -1719])
def test_missing_window_raises_not_found(bridge: StubExecutor, number: int) -> None:
    bridge.queue(BridgeExitError(1, f"execution error: Terminal got an error: Can't get window id 5. ({number})"))

    with pytest.raises(WindowNotFoundError) as exc_info:
        TerminalController(bridge).focus("5")

    assert exc_info.value.window_id == "5"


def test_other_bridge_errors_propagate(bridge: StubExecutor) -> None:
    bridge.queue(BridgeExitError(1, "execution error: Not authorized to send Apple events. (-1743)"))

    with pytest.raises(BridgeExitError):
        TerminalController(bridge).close("5")


def test_non_numeric_id_never_reaches_bridge(bridge: StubExecutor) -> None:
    with pytest.raises(WindowNotFoundError):
        TerminalController(bridge).rename("5 to quit", "x")

    assert bridge.calls == []


@pytest.mark.parametrize("window_id", ["\u00b2", "\u0663", "", "12 ", "-3"])
def test_only_ascii_digit_ids_reach_bridge(bridge: StubExecutor, window_id: str) -> None:
    with pytest.raises(WindowNotFoundError):
        TerminalController(bridge).focus(window_id)

    assert bridge.calls == []


def test_rename_and_close_target_window(bridge: StubExecutor) -> None:
    bridge.queue("", "")
    controller = TerminalController(bridge)

    controller.rename("7", "New name")
    controller.close("7")

    assert bridge.calls[0][1] == ("7", "New name")
    assert "custom title" in bridge.calls[0][0]
    assert bridge.calls[1][1] == ("7",)
    assert "close window id targetID" in bridge.calls[1][0]
