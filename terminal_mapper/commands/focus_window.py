"""Command to bring a terminal window to the front."""

from typing import Any, Dict

from .base import Command, require_field
from ..results import OperationResult


class FocusWindowCommand(Command):
    """Command to bring a terminal window to the front."""
    
    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "focus_window"
    
    def execute(self, intent: Dict[str, Any]) -> OperationResult:
        """Execute the focus window command."""
        return self.manager.focus(require_field(intent, "window_id"))
