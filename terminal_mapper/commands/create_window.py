"""Commands to open terminal windows."""

from typing import Any, Dict

from .base import Command, require_field
from ..results import OperationResult


class CreateWindowCommand(Command):
    """Command to open a window for a project folder and map it."""
    
    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "create_window"
    
    def execute(self, intent: Dict[str, Any]) -> OperationResult:
        """Execute the create window command."""
        name = require_field(intent, "name")
        folder_path = require_field(intent, "folder_path")
        return self.manager.create_window(name, folder_path)


class NewWindowCommand(Command):
    """Command to open a plain, unmapped window."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "new_window"
    
    def execute(self, intent: Dict[str, Any]) -> OperationResult:
        return self.manager.new_window()


class CreateAtLocationCommand(Command):
    """Command to open a mapped window in a quick location such as Desktop."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "create_at_location"
    
    def execute(self, intent: Dict[str, Any]) -> OperationResult:
        return self.manager.create_at_location(require_field(intent, "location"))


class ReopenProjectCommand(Command):
    """Command to open a new window for a recent project by name."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "reopen_project"
    
    def execute(self, intent: Dict[str, Any]) -> OperationResult:
        return self.manager.reopen_project(require_field(intent, "name"))
