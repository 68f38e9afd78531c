"""Result type returned by manager operations."""

from dataclasses import dataclass
from typing import Any, Optional

from .exceptions import ProjectNotFoundError, TerminalMapperError, WindowNotFoundError


@dataclass
class OperationResult:
    """Outcome of a manager operation.
    
    ``value`` carries the operation's payload on success; on failure it may
    still carry partial data (e.g. the id of a window that was created but
    could not be saved).
    """
    success: bool
    value: Any = None
    error: Optional[TerminalMapperError] = None

    @staticmethod
    def ok(value: Any = None) -> "OperationResult":
        return OperationResult(success=True, value=value)

    @staticmethod
    def fail(error: TerminalMapperError, value: Any = None) -> "OperationResult":
        return OperationResult(success=False, value=value, error=error)

    @property
    def not_found(self) -> bool:
        return isinstance(self.error, (WindowNotFoundError, ProjectNotFoundError))

    @property
    def message(self) -> str:
        return str(self.error) if self.error else ""
