"""JSON-backed store for project and terminal mappings."""

import json
import os
import tempfile
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from loguru import logger

from ..exceptions import PersistenceReadError, PersistenceWriteError
from .models import ProjectMapping, TerminalMapping

# Only the most recently used projects are kept
MAX_RECENT_PROJECTS = 10

PROJECTS_FILE = "projects.json"
TERMINALS_FILE = "terminals.json"


def atomic_write_json(path: Path, data: Any) -> None:
    """
    Write a JSON document atomically (temp file, fsync, rename).
    
    Args:
        path: Target file path
        data: JSON-serializable value
        
    Raises:
        PersistenceWriteError: If the directory or file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    except OSError as e:
        raise PersistenceWriteError(f"Cannot write {path}: {e}") from e
    
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_path, path)
    except (OSError, TypeError, ValueError) as e:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise PersistenceWriteError(f"Cannot write {path}: {e}") from e


def _read_json(path: Path) -> Any:
    """Read a JSON document; a missing file reads as None."""
    if not path.exists():
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise PersistenceReadError(f"Cannot read {path}: {e}") from e


class MappingStore:
    """Reads and writes the project list and the terminal mapping documents.
    
    The store does no merging: ``save_*`` replaces the whole document, so
    callers that update a single entry must load, modify and save.
    """
    
    def __init__(self, data_dir: Union[str, Path], name_mirror_path: Optional[Union[str, Path]] = None):
        """
        Initialize the store.
        
        Args:
            data_dir: Directory holding projects.json and terminals.json
            name_mirror_path: Optional flat {windowID: name} document kept for other tools
        """
        self.data_dir = Path(data_dir)
        self.projects_path = self.data_dir / PROJECTS_FILE
        self.terminals_path = self.data_dir / TERMINALS_FILE
        self.name_mirror_path = Path(name_mirror_path) if name_mirror_path else None
    
    # Projects
    
    def load_projects(self) -> List[ProjectMapping]:
        """
        Load the recent projects, most recently used first.
        
        Returns:
            List of ProjectMapping; empty if the document is missing or corrupt
        """
        try:
            data = _read_json(self.projects_path)
        except PersistenceReadError as e:
            logger.warning("Using empty project list: {}", e)
            return []
        
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning("Using empty project list: {} is not a JSON array", self.projects_path)
            return []
        
        projects = []
        for entry in data:
            try:
                projects.append(ProjectMapping.from_dict(entry))
            except (AttributeError, ValueError) as e:
                logger.warning("Skipping invalid project entry {!r}: {}", entry, e)
        
        projects.sort(key=lambda p: p.last_used, reverse=True)
        return projects
    
    def save_projects(self, projects: List[ProjectMapping]) -> None:
        """
        Save the project list, keeping only the most recent entries.
        
        Args:
            projects: Projects in any order
            
        Raises:
            PersistenceWriteError: If the document cannot be written
        """
        recent = sorted(projects, key=lambda p: p.last_used, reverse=True)[:MAX_RECENT_PROJECTS]
        atomic_write_json(self.projects_path, [p.to_dict() for p in recent])
    
    def upsert_project(self, name: str, path: str, now: Optional[float] = None) -> List[ProjectMapping]:
        """
        Record a project as just used.
        
        Entries sharing the name or the path are replaced by the new entry,
        which goes to the front of the list.
        
        Returns:
            The saved project list
        """
        now = time.time() if now is None else now
        projects = [p for p in self.load_projects() if p.name != name and p.path != path]
        projects.insert(0, ProjectMapping(name=name, path=path, last_used=now))
        projects = projects[:MAX_RECENT_PROJECTS]
        self.save_projects(projects)
        return projects
    
    # Terminals
    
    def load_terminal_mappings(self) -> Dict[str, TerminalMapping]:
        """
        Load terminal mappings keyed by window id.
        
        Returns:
            Dict of window id to TerminalMapping; empty if missing or corrupt
        """
        try:
            data = _read_json(self.terminals_path)
        except PersistenceReadError as e:
            logger.warning("Using empty terminal mappings: {}", e)
            return {}
        
        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning("Using empty terminal mappings: {} is not a JSON object", self.terminals_path)
            return {}
        
        mappings = {}
        for window_id, entry in data.items():
            try:
                mapping = TerminalMapping.from_dict(entry)
            except (AttributeError, ValueError) as e:
                logger.warning("Skipping invalid terminal mapping {!r}: {}", window_id, e)
                continue
            mappings[window_id] = mapping
        return mappings
    
    def save_terminal_mappings(self, mappings: Dict[str, TerminalMapping]) -> None:
        """
        Replace the terminal mapping document.
        
        Raises:
            PersistenceWriteError: If the document cannot be written
        """
        atomic_write_json(
            self.terminals_path,
            {window_id: mapping.to_dict() for window_id, mapping in mappings.items()},
        )
    
    # Name mirror
    
    def load_name_mirror(self) -> Dict[str, str]:
        """Load the flat {windowID: name} mirror (empty when disabled or unreadable)."""
        if self.name_mirror_path is None:
            return {}
        try:
            data = _read_json(self.name_mirror_path)
        except PersistenceReadError as e:
            logger.warning("Ignoring unreadable name mirror: {}", e)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}
    
    def update_name_mirror(self, window_id: str, name: Optional[str]) -> bool:
        """
        Set (or with name=None, remove) one entry of the name mirror.
        
        Failures are logged, never raised.
        
        Returns:
            True if the mirror was written
        """
        if self.name_mirror_path is None:
            return False
        
        mirror = self.load_name_mirror()
        if name is None:
            if mirror.pop(window_id, None) is None:
                return False
        else:
            mirror[window_id] = name
        
        try:
            atomic_write_json(self.name_mirror_path, mirror)
        except PersistenceWriteError as e:
            logger.warning("Failed to update name mirror: {}", e)
            return False
        return True
