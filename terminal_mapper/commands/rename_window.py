"""Command to retitle a terminal window."""

from typing import Any, Dict

from .base import Command, require_field
from ..results import OperationResult


class RenameWindowCommand(Command):
    """Command to retitle a terminal window."""
    
    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "rename_window"
    
    def execute(self, intent: Dict[str, Any]) -> OperationResult:
        """Execute the rename window command."""
        window_id = require_field(intent, "window_id")
        name = require_field(intent, "name")
        return self.manager.rename(window_id, name)
