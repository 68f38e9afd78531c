"""Shared test fixtures."""

from __future__ import annotations

import itertools
import threading
from pathlib import Path
from typing import Any, Callable, Iterator

import pytest

from terminal_mapper.manager import WindowMappingManager
from terminal_mapper.store import MappingStore
from terminal_mapper.window_control import TerminalController


class StubExecutor:
    """Stands in for AppleScriptExecutor; replays queued replies.

    A queued reply may be a string (returned), an exception (raised) or a
    callable taking ``(script, args)`` and returning the reply.
    """

    def __init__(self, *replies: Any) -> None:
        self.replies = list(replies)
        self.calls: list[tuple[str, tuple[str, ...], str]] = []
        self._lock = threading.Lock()

    def queue(self, *replies: Any) -> None:
        with self._lock:
            self.replies.extend(replies)

    def run(self, script: str, *args: str, language: str = "AppleScript") -> str:
        with self._lock:
            self.calls.append((script, args, language))
            if not self.replies:
                raise AssertionError(f"unexpected osascript call with {args!r}")
            reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(script, args)
        return reply


@pytest.fixture
def bridge() -> StubExecutor:
    return StubExecutor()


@pytest.fixture
def store(tmp_path: Path) -> MappingStore:
    return MappingStore(tmp_path / "data", name_mirror_path=tmp_path / "names.json")


@pytest.fixture
def clock() -> Callable[[], float]:
    counter = itertools.count(1_700_000_000)
    return lambda: float(next(counter))


@pytest.fixture
def manager(bridge: StubExecutor, store: MappingStore, clock: Callable[[], float]) -> Iterator[WindowMappingManager]:
    controller = TerminalController(bridge)
    mgr = WindowMappingManager(controller, store, max_workers=4, clock=clock)
    yield mgr
    mgr.shutdown()
