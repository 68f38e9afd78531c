"""Base command class for terminal mapper commands."""

from abc import ABC, abstractmethod
from typing import Any, Dict

from ..exceptions import InvalidRequestError
from ..manager import WindowMappingManager
from ..results import OperationResult


def require_field(intent: Dict[str, Any], key: str) -> str:
    """
    Read a required, non-empty string field from an intent.
    
    Raises:
        InvalidRequestError: If the field is missing or not a non-empty string
    """
    value = intent.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidRequestError(f"Missing '{key}'")
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise InvalidRequestError(f"'{key}' must be a string")
    return str(value)


class Command(ABC):
    """Abstract base class for terminal mapper commands."""
    
    def __init__(self, manager: WindowMappingManager):
        self.manager = manager
    
    @abstractmethod
    def execute(self, intent: Dict[str, Any]) -> OperationResult:
        """
        Execute the command based on the intent.
        
        Args:
            intent: Intent dictionary with command-specific fields
            
        Returns:
            OperationResult of the underlying manager operation
        """
        pass
    
    @abstractmethod
    def can_handle(self, intent_type: str) -> bool:
        """
        Check if this command can handle the given intent type.
        
        Args:
            intent_type: The intent type string
            
        Returns:
            True if this command can handle the intent type
        """
        pass
