"""Utility modules for the terminal mapper."""

from .applescript import AppleScriptExecutor, escape_applescript_string

__all__ = ["AppleScriptExecutor", "escape_applescript_string"]
