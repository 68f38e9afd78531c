"""Command layer routing intents to window mapping operations."""

from .base import Command
from .executor import CommandExecutor
from .apply_naming import ApplyNamingSchemeCommand
from .close_window import CloseWindowCommand, ForgetWindowCommand
from .create_window import (
    CreateAtLocationCommand,
    CreateWindowCommand,
    NewWindowCommand,
    ReopenProjectCommand,
)
from .focus_window import FocusWindowCommand
from .list_mappings import ListProjectsCommand, ListTerminalsCommand
from .list_windows import ListWindowsCommand
from .reconcile import ReconcileCommand
from .rename_window import RenameWindowCommand

__all__ = [
    "Command",
    "CommandExecutor",
    "ApplyNamingSchemeCommand",
    "CloseWindowCommand",
    "CreateAtLocationCommand",
    "CreateWindowCommand",
    "FocusWindowCommand",
    "ForgetWindowCommand",
    "ListProjectsCommand",
    "ListTerminalsCommand",
    "ListWindowsCommand",
    "NewWindowCommand",
    "ReconcileCommand",
    "RenameWindowCommand",
    "ReopenProjectCommand",
]
