"""Tests for the command line interface."""

from __future__ import annotations

import json

import pytest
from flask import Flask

from terminal_mapper import main as cli
from terminal_mapper.manager import WindowMappingManager
from terminal_mapper.results import OperationResult
from terminal_mapper.exceptions import WindowNotFoundError
from terminal_mapper.store import WindowInfo
from tests.conftest import StubExecutor


@pytest.mark.parametrize(
    ("argv", "intent"),
    [
        (["create", "Docs", "/docs"], {"type": "create_window", "name": "Docs", "folder_path": "/docs"}),
        (["rename", "4", "Api"], {"type": "rename_window", "window_id": "4", "name": "Api"}),
        (["forget", "4"], {"type": "forget_window", "window_id": "4"}),
        (["scheme", "workspace"], {"type": "apply_naming_scheme", "scheme": "workspace"}),
        (["terminals"], {"type": "list_terminals"}),
        (["quick", "desktop"], {"type": "create_at_location", "location": "desktop"}),
        (["reopen", "Docs"], {"type": "reopen_project", "name": "Docs"}),
    ],
)
def test_intent_from_args(argv: list[str], intent: dict) -> None:
    assert cli.intent_from_args(cli.build_parser().parse_args(argv)) == intent


def test_unknown_scheme_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.build_parser().parse_args(["scheme", "roman"])
    assert exc_info.value.code == 2


def test_format_results() -> None:
    assert cli.format_result("list", OperationResult.ok([WindowInfo("1", "Docs")])) == ["1\tDocs"]
    assert cli.format_result("list", OperationResult.ok([])) == ["No terminal windows are open."]
    assert cli.format_result("focus", OperationResult.fail(WindowNotFoundError("7"))) == [
        "✗ Not found: No terminal window with id '7'"
    ]


@pytest.fixture
def wired(monkeypatch: pytest.MonkeyPatch, manager: WindowMappingManager) -> WindowMappingManager:
    monkeypatch.setattr(cli, "create_manager", lambda: manager)
    monkeypatch.setattr(cli, "setup_logging", lambda level, log_file: None)
    return manager


def test_main_list(wired: WindowMappingManager, bridge: StubExecutor, capsys: pytest.CaptureFixture[str]) -> None:
    bridge.queue(json.dumps([{"id": "1", "name": "Docs"}]))

    assert cli.main(["list"]) == 0
    assert capsys.readouterr().out == "1\tDocs\n"


def test_main_failure_exit_code(wired: WindowMappingManager, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["forget", "99"]) == 1
    assert "Not found" in capsys.readouterr().err


def test_main_serve_runs_api_on_loopback(wired: WindowMappingManager, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(Flask, "run", lambda app, **kwargs: calls.append((app.name, kwargs)))

    assert cli.main(["serve", "--port", "9001"]) == 0
    assert calls == [("terminal_mapper_api", {"host": "127.0.0.1", "port": 9001, "debug": False, "use_reloader": False})]


def test_main_quick_location(wired: WindowMappingManager, bridge: StubExecutor, monkeypatch: pytest.MonkeyPatch, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    bridge.queue("40")

    assert cli.main(["quick", "downloads"]) == 0
    assert capsys.readouterr().out == "✓ Window 40\n"
