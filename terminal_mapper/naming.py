"""Bulk naming schemes for open terminal windows."""

from enum import Enum
from typing import List, Union


class NamingScheme(str, Enum):
    """Deterministic rename rules applied to windows in listing order."""
    PROJECT = "project"
    FUNCTION = "function"
    WORKSPACE = "workspace"


FUNCTION_LABELS = [
    "Main",
    "Development",
    "Testing",
    "Documentation",
    "Build",
    "Debug",
    "Production",
    "Staging",
    "Research",
    "Support",
]

WORKSPACE_LETTERS = ["A", "B", "C", "D", "E", "F", "G", "H", "I", "J"]


def parse_scheme(value: Union[str, NamingScheme]) -> NamingScheme:
    """
    Resolve a scheme name (case-insensitive).
    
    Raises:
        ValueError: If the name is not a known scheme
    """
    if isinstance(value, NamingScheme):
        return value
    try:
        return NamingScheme(str(value).strip().lower())
    except ValueError:
        valid = ", ".join(s.value for s in NamingScheme)
        raise ValueError(f"Unknown naming scheme '{value}'. Must be one of: {valid}") from None


def label_for(scheme: NamingScheme, index: int) -> str:
    """Label of the window at zero-based position ``index``."""
    position = index + 1
    if scheme is NamingScheme.PROJECT:
        return f"Project-{position}"
    if scheme is NamingScheme.FUNCTION:
        if index < len(FUNCTION_LABELS):
            return FUNCTION_LABELS[index]
        return f"Terminal-{position}"
    if index < len(WORKSPACE_LETTERS):
        return f"Workspace-{WORKSPACE_LETTERS[index]}"
    return f"Workspace-{position}"


def scheme_labels(scheme: Union[str, NamingScheme], count: int) -> List[str]:
    """
    Labels for ``count`` windows under a naming scheme.
    
    Args:
        scheme: Scheme or scheme name
        count: Number of windows
        
    Returns:
        Exactly ``count`` labels, in listing order
    """
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    scheme = parse_scheme(scheme)
    return [label_for(scheme, i) for i in range(count)]
