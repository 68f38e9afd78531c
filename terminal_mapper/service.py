"""Wiring of the bridge, controller, store and manager from configuration."""

from typing import Optional

from .config import Config, _config
from .manager import WindowMappingManager
from .store import MappingStore
from .utils import AppleScriptExecutor
from .window_control import TerminalController


def create_manager(config: Optional[Config] = None) -> WindowMappingManager:
    """
    Build a WindowMappingManager from configuration.
    
    Args:
        config: Configuration to use (defaults to the one loaded from the environment)
    """
    config = config or _config
    executor = AppleScriptExecutor(osascript_path=config.osascript_path, timeout=config.script_timeout)
    controller = TerminalController(executor, app_name=config.terminal_app, title_style=config.title_style)
    store = MappingStore(config.data_dir, name_mirror_path=config.name_mirror_file)
    return WindowMappingManager(controller, store, max_workers=config.max_workers)
