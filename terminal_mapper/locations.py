"""Quick locations: well-known folders a window can be opened in by name."""

from pathlib import Path
from typing import Dict, Optional, Tuple, Union

# location key -> (window name, folder relative to the home directory)
QUICK_LOCATIONS: Dict[str, Tuple[str, str]] = {
    "home": ("Home", ""),
    "desktop": ("Desktop", "Desktop"),
    "documents": ("Documents", "Documents"),
    "downloads": ("Downloads", "Downloads"),
}


def resolve_location(location: str, home: Optional[Union[str, Path]] = None) -> Tuple[str, str]:
    """
    Resolve a quick location (case-insensitive) to a window name and folder.
    
    Args:
        location: One of the QUICK_LOCATIONS keys
        home: Home directory; defaults to the current user's
        
    Returns:
        Tuple of (window name, absolute folder path)
        
    Raises:
        ValueError: If the location is unknown
    """
    key = str(location).strip().lower()
    if key not in QUICK_LOCATIONS:
        known = ", ".join(QUICK_LOCATIONS)
        raise ValueError(f"Unknown location '{location}' (expected one of: {known})")
    name, relative = QUICK_LOCATIONS[key]
    base = Path(home) if home is not None else Path.home()
    folder = base / relative if relative else base
    return name, str(folder)
