"""Data models for the mapping store."""

from dataclasses import dataclass
from typing import Any, Dict

# Dates on disk are seconds since 2001-01-01 UTC, the Foundation reference
# date, so the files stay readable by the Swift menu-bar app.
REFERENCE_DATE_OFFSET = 978307200.0


def to_reference_date(timestamp: float) -> float:
    """Unix timestamp to seconds since the reference date."""
    return timestamp - REFERENCE_DATE_OFFSET


def from_reference_date(value: float) -> float:
    """Seconds since the reference date to a Unix timestamp."""
    return value + REFERENCE_DATE_OFFSET


@dataclass
class ProjectMapping:
    """A recently used project: a human name and the folder it lives in."""
    name: str
    path: str
    last_used: float

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "path": self.path, "lastUsed": to_reference_date(self.last_used)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectMapping":
        return cls(
            name=_require_str(data, "name"),
            path=_require_str(data, "path"),
            last_used=from_reference_date(_require_number(data, "lastUsed")),
        )


@dataclass
class TerminalMapping:
    """Association between a terminal window id and the project it was opened for."""
    window_id: str
    name: str
    folder_path: str
    created: float
    last_used: float
    dangling: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "windowID": self.window_id,
            "name": self.name,
            "folderPath": self.folder_path,
            "created": to_reference_date(self.created),
            "lastUsed": to_reference_date(self.last_used),
            "dangling": self.dangling,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TerminalMapping":
        dangling = data.get("dangling", False)
        if not isinstance(dangling, bool):
            raise ValueError("'dangling' must be a boolean")
        return cls(
            window_id=_require_str(data, "windowID"),
            name=_require_str(data, "name"),
            folder_path=_require_str(data, "folderPath"),
            created=from_reference_date(_require_number(data, "created")),
            last_used=from_reference_date(_require_number(data, "lastUsed")),
            dangling=dangling,
        )


@dataclass
class WindowInfo:
    """A live terminal window as reported by the terminal application."""
    id: str
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name}


def _require_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string")
    return value


def _require_number(data: Dict[str, Any], key: str) -> float:
    value = data.get(key)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number")
    return float(value)
