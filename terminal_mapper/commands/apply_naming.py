"""Command to rename all open windows with a naming scheme."""

from typing import Any, Dict

from .base import Command, require_field
from ..results import OperationResult


class ApplyNamingSchemeCommand(Command):
    """Command to rename all open windows with a naming scheme."""
    
    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "apply_naming_scheme"
    
    def execute(self, intent: Dict[str, Any]) -> OperationResult:
        """Execute the naming scheme command."""
        return self.manager.apply_naming_scheme(require_field(intent, "scheme"))
