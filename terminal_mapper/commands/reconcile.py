"""Command to prune mappings of windows that are no longer open."""

from typing import Any, Dict

from .base import Command
from ..results import OperationResult


class ReconcileCommand(Command):
    """Command to prune mappings of windows that are no longer open."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "reconcile"
    
    def execute(self, intent: Dict[str, Any]) -> OperationResult:
        return self.manager.reconcile()
