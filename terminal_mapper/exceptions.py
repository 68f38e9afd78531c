"""Custom exception classes for the terminal mapper."""

import re
from typing import Optional


class TerminalMapperError(Exception):
    """Base exception for terminal mapper errors."""
    pass


class BridgeError(TerminalMapperError):
    """Exception raised for osascript bridge errors."""
    pass


class BridgeLaunchError(BridgeError):
    """Exception raised when the osascript process could not be started."""
    pass


class BridgeTimeoutError(BridgeError):
    """Exception raised when an osascript process did not finish in time."""

    def __init__(self, timeout: float):
        super().__init__(f"osascript did not finish within {timeout:g}s")
        self.timeout = timeout


class BridgeExitError(BridgeError):
    """Exception raised when osascript exits with a non-zero status."""

    _ERROR_NUMBER_RE = re.compile(r"\((-?\d+)\)\s*$")

    def __init__(self, exit_code: int, output: str):
        super().__init__(output or f"osascript exited with status {exit_code}")
        self.exit_code = exit_code
        self.output = output

    @property
    def error_number(self) -> Optional[int]:
        """AppleScript error number reported on stderr, e.g. -1728."""
        match = self._ERROR_NUMBER_RE.search(self.output or "")
        if match:
            return int(match.group(1))
        return None


class MalformedReplyError(TerminalMapperError):
    """Exception raised when a script reply cannot be parsed."""
    pass


class WindowNotFoundError(TerminalMapperError):
    """Exception raised when a window id does not name a live or mapped window."""

    def __init__(self, window_id: str, message: Optional[str] = None):
        super().__init__(message or f"No terminal window with id '{window_id}'")
        self.window_id = window_id


class ProjectNotFoundError(TerminalMapperError):
    """Exception raised when no recent project has the requested name."""

    def __init__(self, name: str):
        super().__init__(f"No recent project named '{name}'")
        self.name = name


class InvalidRequestError(TerminalMapperError):
    """Exception raised for malformed caller requests."""
    pass


class PersistenceError(TerminalMapperError):
    """Exception raised for mapping store errors."""
    pass


class PersistenceReadError(PersistenceError):
    """Exception raised when a mapping document cannot be read."""
    pass


class PersistenceWriteError(PersistenceError):
    """Exception raised when a mapping document cannot be written."""
    pass
