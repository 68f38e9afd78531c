"""Commands to close a window and to forget its mapping."""

from typing import Any, Dict

from .base import Command, require_field
from ..results import OperationResult


class CloseWindowCommand(Command):
    """Command to close a terminal window (its mapping is kept)."""
    
    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "close_window"
    
    def execute(self, intent: Dict[str, Any]) -> OperationResult:
        """Execute the close window command."""
        return self.manager.close(require_field(intent, "window_id"))


class ForgetWindowCommand(Command):
    """Command to drop the stored mapping of a window."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "forget_window"
    
    def execute(self, intent: Dict[str, Any]) -> OperationResult:
        return self.manager.forget(require_field(intent, "window_id"))
