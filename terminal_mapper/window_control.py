"""Terminal window control through osascript."""

import json
import os
import re
from typing import List, Optional

from loguru import logger

from .config import TITLE_STYLES
from .exceptions import BridgeExitError, MalformedReplyError, WindowNotFoundError
from .store.models import WindowInfo
from .utils import AppleScriptExecutor, escape_applescript_string

# AppleScript error numbers meaning the referenced window is gone:
# -1728 "Can't get <object>", -1719 "Invalid index"
WINDOW_NOT_FOUND_ERRORS = (-1728, -1719)

_CREATE_SCRIPT = '''
on run argv
    set folderPath to item 1 of argv
    set windowTitle to item 2 of argv
    tell application "{app}"
        activate
        do script "cd " & quoted form of folderPath
        set newWindowID to id of front window
        set custom title of selected tab of front window to windowTitle
        return newWindowID as string
    end tell
end run
'''

_NEW_WINDOW_SCRIPT = '''
on run argv
    tell application "{app}"
        activate
        do script ""
        return (id of front window) as string
    end tell
end run
'''

_FOCUS_SCRIPT = '''
on run argv
    set targetID to (item 1 of argv) as integer
    tell application "{app}"
        activate
        set frontmost of window id targetID to true
    end tell
end run
'''

_RENAME_SCRIPT = '''
on run argv
    set targetID to (item 1 of argv) as integer
    set windowTitle to item 2 of argv
    tell application "{app}"
        set custom title of selected tab of window id targetID to windowTitle
    end tell
end run
'''

_CLOSE_SCRIPT = '''
on run argv
    set targetID to (item 1 of argv) as integer
    tell application "{app}"
        close window id targetID
    end tell
end run
'''

# JavaScript so the reply is JSON instead of a delimiter-joined string
_LIST_SCRIPT = '''
function run(argv) {
    var app = Application(argv[0]);
    var windows = app.windows();
    var result = [];
    for (var i = 0; i < windows.length; i++) {
        var id = String(windows[i].id());
        var title = "";
        try {
            title = windows[i].selectedTab().customTitle() || "";
        } catch (e) {}
        result.push({id: id, name: title || ("Terminal " + id)});
    }
    return JSON.stringify(result);
}
'''


def window_title(name: str, folder_path: str, title_style: str = "plain") -> str:
    """
    Build the visible title of a new window.
    
    Args:
        name: Project name
        folder_path: Folder the window was opened in
        title_style: "plain" (just the name) or "bracketed" ("[name] folder")
    """
    if title_style == "bracketed":
        folder = os.path.basename(os.path.normpath(folder_path)) or folder_path
        return f"[{name}] {folder}"
    return name


def parse_window_list(reply: str) -> List[WindowInfo]:
    """
    Parse the JSON reply of the window listing script.
    
    Raises:
        MalformedReplyError: If the reply is not a JSON array of {id, name} objects
    """
    try:
        data = json.loads(reply)
    except json.JSONDecodeError as e:
        raise MalformedReplyError(f"Window list is not valid JSON: {e}") from e
    
    if not isinstance(data, list):
        raise MalformedReplyError("Window list is not a JSON array")
    
    windows = []
    for entry in data:
        if not isinstance(entry, dict):
            raise MalformedReplyError(f"Unexpected window entry: {entry!r}")
        window_id = entry.get("id")
        name = entry.get("name")
        if not isinstance(window_id, str) or not window_id or not isinstance(name, str):
            raise MalformedReplyError(f"Unexpected window entry: {entry!r}")
        windows.append(WindowInfo(id=window_id, name=name))
    return windows


class TerminalController:
    """Issues window commands to a scriptable terminal application."""
    
    def __init__(self, executor: Optional[AppleScriptExecutor] = None, app_name: str = "Terminal", title_style: str = "plain"):
        if title_style not in TITLE_STYLES:
            raise ValueError(f"Invalid title style '{title_style}'")
        self.executor = executor or AppleScriptExecutor()
        self.app_name = app_name
        self.title_style = title_style
    
    def _script(self, template: str) -> str:
        return template.format(app=escape_applescript_string(self.app_name))
    
    def _run_on_window(self, template: str, window_id: str, *args: str) -> str:
        # Terminal window ids are integers; anything else cannot name a window
        if not re.fullmatch(r"[0-9]+", window_id):
            raise WindowNotFoundError(window_id)
        try:
            return self.executor.run(self._script(template), window_id, *args)
        except BridgeExitError as e:
            if e.error_number in WINDOW_NOT_FOUND_ERRORS:
                raise WindowNotFoundError(window_id, str(e)) from e
            raise
    
    def create_window(self, name: str, folder_path: str) -> str:
        """
        Open a window in ``folder_path`` and title it after ``name``.
        
        The folder is not checked; a bad path still opens a window whose
        shell reports the failed ``cd``.
        
        Returns:
            Window id assigned by the terminal (may be empty if the app returned nothing)
        """
        title = window_title(name, folder_path, self.title_style)
        reply = self.executor.run(self._script(_CREATE_SCRIPT), folder_path, title)
        window_id = reply.strip()
        logger.debug("Created window {!r} titled {!r} in {}", window_id, title, folder_path)
        return window_id
    
    def new_window(self) -> str:
        """Open an untitled window in the default directory and return its id."""
        return self.executor.run(self._script(_NEW_WINDOW_SCRIPT)).strip()
    
    def list_windows(self) -> List[WindowInfo]:
        """
        List open windows in the application's window order.
        
        Raises:
            MalformedReplyError: If the reply cannot be parsed
        """
        reply = self.executor.run(_LIST_SCRIPT, self.app_name, language="JavaScript")
        return parse_window_list(reply)
    
    def focus(self, window_id: str) -> None:
        """Bring a window to the front."""
        self._run_on_window(_FOCUS_SCRIPT, window_id)
    
    def rename(self, window_id: str, name: str) -> None:
        """Set the custom title of a window."""
        self._run_on_window(_RENAME_SCRIPT, window_id, name)
    
    def close(self, window_id: str) -> None:
        """Close a window."""
        self._run_on_window(_CLOSE_SCRIPT, window_id)
