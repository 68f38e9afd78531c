"""Command to list open terminal windows."""

from typing import Any, Dict

from .base import Command
from ..results import OperationResult


class ListWindowsCommand(Command):
    """Command to list open terminal windows."""
    
    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "list_windows"
    
    def execute(self, intent: Dict[str, Any]) -> OperationResult:
        """Execute the list windows command."""
        return self.manager.list_windows()
