"""Commands to read the stored project and terminal mappings."""

from typing import Any, Dict

from .base import Command
from ..results import OperationResult


class ListProjectsCommand(Command):
    """Command to list recent projects, most recent first."""
    
    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "list_projects"
    
    def execute(self, intent: Dict[str, Any]) -> OperationResult:
        """Execute the list projects command."""
        return OperationResult.ok(self.manager.project_mappings())


class ListTerminalsCommand(Command):
    """Command to list stored terminal mappings."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "list_terminals"
    
    def execute(self, intent: Dict[str, Any]) -> OperationResult:
        return OperationResult.ok(self.manager.terminal_mappings())
