"""Configuration for the terminal mapper."""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_DATA_DIR = os.path.expanduser("~/Library/Application Support/TerminalCreator")
DEFAULT_NAME_MIRROR_FILE = os.path.expanduser("~/.tinkybink_terminal_mappings.json")

# Window titles: "plain" uses the project name, "bracketed" uses "[name] folder"
TITLE_STYLES = ["plain", "bracketed"]
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class Config:
    """Configuration class for the terminal mapper."""
    
    def __init__(self):
        """Initialize configuration from environment variables."""
        # Directory holding projects.json and terminals.json
        self.data_dir = os.path.expanduser(os.getenv("TERMINAL_MAPPER_DATA_DIR", DEFAULT_DATA_DIR))
        
        # Scriptable terminal application and the bridge used to reach it
        self.terminal_app = os.getenv("TERMINAL_MAPPER_TERMINAL_APP", "Terminal")
        self.osascript_path = os.getenv("TERMINAL_MAPPER_OSASCRIPT", "/usr/bin/osascript")
        self.script_timeout = float(os.getenv("TERMINAL_MAPPER_SCRIPT_TIMEOUT", "10"))
        
        self.title_style = os.getenv("TERMINAL_MAPPER_TITLE_STYLE", "plain").lower()
        
        # Flat {windowID: name} document read by other tools; empty string disables it
        mirror = os.getenv("TERMINAL_MAPPER_NAME_MIRROR_FILE", DEFAULT_NAME_MIRROR_FILE)
        self.name_mirror_file = os.path.expanduser(mirror) if mirror else None
        
        # Local API (for menu-bar / popover clients)
        self.api_port = int(os.getenv("TERMINAL_MAPPER_API_PORT", "8771"))
        self.max_workers = int(os.getenv("TERMINAL_MAPPER_MAX_WORKERS", "4"))
        
        self.log_level = os.getenv("TERMINAL_MAPPER_LOG_LEVEL", "INFO").upper()
        log_file = os.getenv("TERMINAL_MAPPER_LOG_FILE", "")
        self.log_file = os.path.expanduser(log_file) if log_file else None
        
        self._validate()
    
    def _validate(self):
        """Validate configuration values."""
        if not self.terminal_app.strip():
            raise ValueError("Terminal application name must not be empty")
        
        if self.script_timeout <= 0:
            raise ValueError(f"Script timeout must be positive, got {self.script_timeout}")
        
        if self.title_style not in TITLE_STYLES:
            raise ValueError(
                f"Invalid title style '{self.title_style}'. "
                f"Must be one of: {', '.join(TITLE_STYLES)}"
            )
        
        if not 0 < self.api_port < 65536:
            raise ValueError(f"API port out of range: {self.api_port}")
        
        if self.max_workers < 1:
            raise ValueError(f"Max workers must be at least 1, got {self.max_workers}")
        
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{self.log_level}'. "
                f"Must be one of: {', '.join(LOG_LEVELS)}"
            )


# Create a global config instance
_config = Config()

DATA_DIR = _config.data_dir
TERMINAL_APP = _config.terminal_app
OSASCRIPT_PATH = _config.osascript_path
SCRIPT_TIMEOUT = _config.script_timeout
TITLE_STYLE = _config.title_style
NAME_MIRROR_FILE = _config.name_mirror_file
API_PORT = _config.api_port
MAX_WORKERS = _config.max_workers
LOG_LEVEL = _config.log_level
LOG_FILE = _config.log_file

__all__ = [
    "Config",
    "TITLE_STYLES",
    "DATA_DIR",
    "TERMINAL_APP",
    "OSASCRIPT_PATH",
    "SCRIPT_TIMEOUT",
    "TITLE_STYLE",
    "NAME_MIRROR_FILE",
    "API_PORT",
    "MAX_WORKERS",
    "LOG_LEVEL",
    "LOG_FILE",
]
