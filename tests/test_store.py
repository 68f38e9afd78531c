"""Tests for the JSON mapping store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from terminal_mapper.exceptions import PersistenceWriteError
from terminal_mapper.store import MAX_RECENT_PROJECTS, MappingStore, ProjectMapping, TerminalMapping


def _projects(count: int, start: float = 1000.0) -> list[ProjectMapping]:
    return [ProjectMapping(name=f"p{i}", path=f"/src/p{i}", last_used=start + i) for i in range(count)]


def test_missing_documents_load_empty(store: MappingStore) -> None:
    assert store.load_projects() == []
    assert store.load_terminal_mappings() == {}


@pytest.mark.parametrize("content", ["{not json", '{"name": "x"}', "42", "\xff\xfe"])
def test_corrupt_project_document_loads_empty(store: MappingStore, content: str) -> None:
    store.projects_path.parent.mkdir(parents=True)
    store.projects_path.write_text(content, encoding="latin-1")

    assert store.load_projects() == []


def test_corrupt_terminal_document_loads_empty(store: MappingStore) -> None:
    store.terminals_path.parent.mkdir(parents=True)
    store.terminals_path.write_text('["not", "a", "dict"]')

    assert store.load_terminal_mappings() == {}


def test_invalid_records_are_skipped(store: MappingStore) -> None:
    store.projects_path.parent.mkdir(parents=True)
    store.projects_path.write_text(json.dumps([
        {"name": "ok", "path": "/ok", "lastUsed": 5},
        {"name": "no-path", "lastUsed": 6},
        "junk",
    ]))

    assert store.load_projects() == [ProjectMapping(name="ok", path="/ok", last_used=978307205.0)]


def test_projects_load_sorted_by_recency(store: MappingStore) -> None:
    store.save_projects(_projects(3))

    assert [p.name for p in store.load_projects()] == ["p2", "p1", "p0"]


def test_save_keeps_ten_most_recent(store: MappingStore) -> None:
    store.save_projects(_projects(15))

    loaded = store.load_projects()
    assert len(loaded) == MAX_RECENT_PROJECTS
    assert [p.name for p in loaded] == [f"p{i}" for i in range(14, 4, -1)]


def test_upsert_eleventh_project_evicts_least_recent(store: MappingStore) -> None:
    store.save_projects(_projects(10))

    projects = store.upsert_project("new", "/src/new", now=5000.0)

    assert len(projects) == MAX_RECENT_PROJECTS
    assert projects[0] == ProjectMapping(name="new", path="/src/new", last_used=5000.0)
    assert "p0" not in {p.name for p in store.load_projects()}


def test_upsert_replaces_same_name_or_path(store: MappingStore) -> None:
    store.save_projects([
        ProjectMapping(name="Docs", path="/old/docs", last_used=1.0),
        ProjectMapping(name="Other", path="/src/api", last_used=2.0),
        ProjectMapping(name="Keep", path="/keep", last_used=3.0),
    ])

    store.upsert_project("Docs", "/src/api", now=10.0)

    assert store.load_projects() == [
        ProjectMapping(name="Docs", path="/src/api", last_used=10.0),
        ProjectMapping(name="Keep", path="/keep", last_used=3.0),
    ]


def test_project_round_trip(store: MappingStore) -> None:
    projects = _projects(4)
    store.save_projects(projects)

    assert sorted(store.load_projects(), key=lambda p: p.name) == projects


def test_terminal_mapping_round_trip(store: MappingStore) -> None:
    mappings = {
        "4821": TerminalMapping("4821", "Docs", "/Users/x/Documents", 1_700_000_000.0, 1_700_000_060.0),
        "77": TerminalMapping("77", "Api", "/src/api", 3.0, 4.0, dangling=True),
    }
    store.save_terminal_mappings(mappings)

    assert store.load_terminal_mappings() == mappings
    on_disk = json.loads(store.terminals_path.read_text())
    assert on_disk["4821"] == {
        "windowID": "4821",
        "name": "Docs",
        "folderPath": "/Users/x/Documents",
        "created": 721_692_800.0,
        "lastUsed": 721_692_860.0,
        "dangling": False,
    }


def test_save_replaces_whole_terminal_document(store: MappingStore) -> None:
    store.save_terminal_mappings({"1": TerminalMapping("1", "a", "/a", 1.0, 1.0)})
    store.save_terminal_mappings({"2": TerminalMapping("2", "b", "/b", 1.0, 1.0)})

    assert list(store.load_terminal_mappings()) == ["2"]


def test_dangling_defaults_to_false(store: MappingStore) -> None:
    store.terminals_path.parent.mkdir(parents=True)
    store.terminals_path.write_text(json.dumps({
        "9": {"windowID": "9", "name": "n", "folderPath": "/p", "created": 1, "lastUsed": 2},
    }))

    assert store.load_terminal_mappings()["9"].dangling is False


def test_write_failure_is_raised(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")
    store = MappingStore(blocker / "data")

    with pytest.raises(PersistenceWriteError):
        store.save_projects(_projects(1))
    with pytest.raises(PersistenceWriteError):
        store.save_terminal_mappings({})


def test_no_temp_files_left_behind(store: MappingStore) -> None:
    store.save_projects(_projects(2))

    assert [p.name for p in store.data_dir.iterdir()] == ["projects.json"]


def test_name_mirror(store: MappingStore) -> None:
    assert store.update_name_mirror("1", "Docs")
    assert store.update_name_mirror("2", "Api")
    assert store.load_name_mirror() == {"1": "Docs", "2": "Api"}

    assert store.update_name_mirror("1", None)
    assert not store.update_name_mirror("1", None)
    assert json.loads(store.name_mirror_path.read_text()) == {"2": "Api"}


def test_name_mirror_disabled(tmp_path: Path) -> None:
    store = MappingStore(tmp_path)

    assert not store.update_name_mirror("1", "Docs")
    assert store.load_name_mirror() == {}


def test_name_mirror_write_failure_is_not_raised(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    store = MappingStore(tmp_path / "data", name_mirror_path=blocker / "names.json")

    assert not store.update_name_mirror("1", "Docs")


def test_reads_dates_written_by_the_menu_bar_app(store: MappingStore) -> None:
    # Foundation's JSONEncoder writes Date as seconds since 2001-01-01
    store.projects_path.parent.mkdir(parents=True)
    store.projects_path.write_text(json.dumps([
        {"name": "Old", "path": "/old", "lastUsed": 700_000_000.5},
        {"name": "Recent", "path": "/recent", "lastUsed": 750_000_000.25},
    ]))

    projects = store.load_projects()

    assert [(p.name, p.last_used) for p in projects] == [
        ("Recent", 1_728_307_200.25),
        ("Old", 1_678_307_200.5),
    ]

    store.upsert_project("New", "/new", now=1_728_307_300.0)

    on_disk = json.loads(store.projects_path.read_text())
    assert on_disk == [
        {"name": "New", "path": "/new", "lastUsed": 750_000_100.0},
        {"name": "Recent", "path": "/recent", "lastUsed": 750_000_000.25},
        {"name": "Old", "path": "/old", "lastUsed": 700_000_000.5},
    ]
