"""AppleScript execution utilities."""

import subprocess
from typing import Optional, Tuple

from loguru import logger

from ..exceptions import (
    BridgeExitError,
    BridgeLaunchError,
    BridgeTimeoutError,
)

DEFAULT_OSASCRIPT = "/usr/bin/osascript"


def escape_applescript_string(text: str) -> str:
    """
    Escape special characters for AppleScript string literals.
    
    Args:
        text: String to escape
        
    Returns:
        Escaped string safe for use in AppleScript
    """
    # Escape backslashes first (must be first)
    text = text.replace("\\", "\\\\")
    text = text.replace('"', '\\"')
    text = text.replace("\n", "\\n")
    text = text.replace("\r", "\\r")
    text = text.replace("\t", "\\t")
    return text


class AppleScriptExecutor:
    """Centralized osascript execution with standardized error handling.
    
    Values that come from callers are handed to the script's ``run`` handler
    as ``argv`` items instead of being pasted into the script text.
    """
    
    def __init__(self, osascript_path: str = DEFAULT_OSASCRIPT, timeout: Optional[float] = 10.0):
        """
        Initialize the AppleScript executor.
        
        Args:
            osascript_path: Path to the osascript binary
            timeout: Seconds to wait for a script before killing it (None waits forever)
        """
        self.osascript_path = osascript_path
        self.timeout = timeout
    
    def _command(self, script: str, args: Tuple[str, ...], language: str) -> list:
        return [self.osascript_path, "-l", language, "-e", script, *args]
    
    def run(self, script: str, *args: str, language: str = "AppleScript") -> str:
        """
        Run a script and return its textual result.
        
        Args:
            script: Script source with an ``on run argv`` handler (or ``run(argv)`` for JavaScript)
            *args: Values passed to the script as argv
            language: osascript language, "AppleScript" or "JavaScript"
            
        Returns:
            Standard output with the trailing newline removed
            
        Raises:
            BridgeLaunchError: osascript could not be started
            BridgeTimeoutError: the script did not finish within ``timeout``
            BridgeExitError: osascript exited with a non-zero status
        """
        command = self._command(script, tuple(str(arg) for arg in args), language)
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            logger.warning("osascript timed out after {}s", self.timeout)
            raise BridgeTimeoutError(self.timeout) from e
        except OSError as e:
            logger.error("Could not launch {}: {}", self.osascript_path, e)
            raise BridgeLaunchError(f"Could not launch {self.osascript_path}: {e}") from e
        
        if result.returncode != 0:
            output = (result.stderr or "").strip() or (result.stdout or "").strip()
            logger.debug("osascript exited with {}: {}", result.returncode, output)
            raise BridgeExitError(result.returncode, output)
        
        return (result.stdout or "").rstrip("\n")
