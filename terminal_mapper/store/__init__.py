"""Persistence for project and terminal mappings."""

from .models import ProjectMapping, TerminalMapping, WindowInfo
from .store import MAX_RECENT_PROJECTS, MappingStore, atomic_write_json

__all__ = [
    "MAX_RECENT_PROJECTS",
    "MappingStore",
    "ProjectMapping",
    "TerminalMapping",
    "WindowInfo",
    "atomic_write_json",
]
