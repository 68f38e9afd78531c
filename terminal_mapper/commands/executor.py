"""Command executor to route intents to appropriate command classes."""

from concurrent.futures import Future
from typing import Any, Callable, Dict, List, Optional

from loguru import logger

from .base import Command
from .apply_naming import ApplyNamingSchemeCommand
from .close_window import CloseWindowCommand, ForgetWindowCommand
from .create_window import (
    CreateAtLocationCommand,
    CreateWindowCommand,
    NewWindowCommand,
    ReopenProjectCommand,
)
from .focus_window import FocusWindowCommand
from .list_mappings import ListProjectsCommand, ListTerminalsCommand
from .list_windows import ListWindowsCommand
from .reconcile import ReconcileCommand
from .rename_window import RenameWindowCommand
from ..exceptions import InvalidRequestError
from ..manager import WindowMappingManager
from ..results import OperationResult


class CommandExecutor:
    """Executes commands based on intents."""
    
    def __init__(self, manager: WindowMappingManager):
        """Initialize the command executor with available commands."""
        self.manager = manager
        self.commands: List[Command] = [
            CreateWindowCommand(manager),
            NewWindowCommand(manager),
            CreateAtLocationCommand(manager),
            ReopenProjectCommand(manager),
            ListWindowsCommand(manager),
            FocusWindowCommand(manager),
            RenameWindowCommand(manager),
            CloseWindowCommand(manager),
            ForgetWindowCommand(manager),
            ReconcileCommand(manager),
            ApplyNamingSchemeCommand(manager),
            ListProjectsCommand(manager),
            ListTerminalsCommand(manager),
        ]
    
    def find_command(self, intent_type: str) -> Optional[Command]:
        for command in self.commands:
            if command.can_handle(intent_type):
                return command
        return None
    
    def execute(self, intent: Dict[str, Any]) -> OperationResult:
        """
        Execute a single intent.
        
        Args:
            intent: Dictionary with a 'type' key and command-specific fields
            
        Returns:
            OperationResult of the command; unknown types and missing fields
            fail with InvalidRequestError
        """
        if not isinstance(intent, dict):
            return OperationResult.fail(InvalidRequestError("Intent must be an object"))
        
        intent_type = intent.get("type")
        command = self.find_command(intent_type) if isinstance(intent_type, str) else None
        if command is None:
            logger.warning("Unknown intent type: {!r}", intent_type)
            return OperationResult.fail(InvalidRequestError(f"Unknown intent type: {intent_type!r}"))
        
        try:
            return command.execute(intent)
        except InvalidRequestError as e:
            return OperationResult.fail(e)
    
    def execute_all(self, intent: Any) -> List[OperationResult]:
        """
        Execute command(s) sequentially.
        
        Args:
            intent: A list of intents, a dict with a 'commands' array, or a single intent
            
        Returns:
            One OperationResult per command, in order
        """
        commands_list = self._normalize_to_commands_list(intent)
        if not commands_list:
            return [OperationResult.fail(InvalidRequestError("No commands to execute"))]
        return [self.execute(cmd_intent) for cmd_intent in commands_list]
    
    def submit(
        self,
        intent: Dict[str, Any],
        callback: Optional[Callable[[OperationResult], None]] = None,
    ) -> "Future[OperationResult]":
        """Execute an intent on the manager's worker pool without blocking."""
        return self.manager.submit(self.execute, intent, callback=callback)
    
    def _normalize_to_commands_list(self, intent: Any) -> List[Dict[str, Any]]:
        """
        Normalize various intent formats to a list of command intents.
        """
        if isinstance(intent, list):
            return intent
        if isinstance(intent, dict):
            if "commands" in intent:
                commands = intent.get("commands", [])
                if isinstance(commands, list):
                    return commands
                return [commands] if commands else []
            return [intent]
        return []
