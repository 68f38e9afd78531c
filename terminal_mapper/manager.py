"""Window mapping manager: creates terminal windows and keeps their name mappings."""

import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from loguru import logger

from .exceptions import (
    InvalidRequestError,
    MalformedReplyError,
    PersistenceError,
    ProjectNotFoundError,
    TerminalMapperError,
    WindowNotFoundError,
)
from .locations import resolve_location
from .naming import NamingScheme, parse_scheme, scheme_labels
from .results import OperationResult
from .store import MappingStore, ProjectMapping, TerminalMapping, WindowInfo
from .window_control import TerminalController


class WindowMappingManager:
    """Orchestrates terminal window commands and the mapping store.
    
    Every public operation returns an OperationResult; bridge and store
    failures never propagate past this class. Store updates are
    load-modify-save sequences serialized by one lock per manager.
    """
    
    def __init__(
        self,
        controller: TerminalController,
        store: MappingStore,
        max_workers: int = 4,
        clock: Callable[[], float] = time.time,
    ):
        self.controller = controller
        self.store = store
        self._clock = clock
        self._lock = threading.RLock()
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="terminal-mapper")
    
    # Async dispatch
    
    def submit(
        self,
        operation: Callable[..., OperationResult],
        *args,
        callback: Optional[Callable[[OperationResult], None]] = None,
    ) -> "Future[OperationResult]":
        """
        Run an operation on the worker pool.
        
        Args:
            operation: Bound manager method, e.g. ``manager.create_window``
            *args: Arguments for the operation
            callback: Called with the OperationResult once the operation finishes
            
        Returns:
            Future resolving to the OperationResult
        """
        future = self._pool.submit(operation, *args)
        if callback is not None:
            def _deliver(done: "Future[OperationResult]") -> None:
                try:
                    callback(done.result())
                except Exception:
                    logger.exception("Completion callback for {} failed", getattr(operation, "__name__", operation))
            future.add_done_callback(_deliver)
        return future
    
    def shutdown(self, wait: bool = True) -> None:
        self._pool.shutdown(wait=wait)
    
    # Operations
    
    def create_window(self, name: str, folder_path: str) -> OperationResult:
        """
        Open a terminal window for a project and record its mapping.
        
        Returns:
            Success with the window id. Failure if the bridge fails or returns
            no id (nothing is saved in that case), or if saving fails after the
            window was opened (``value`` still holds the window id).
        """
        if not name or not name.strip():
            return OperationResult.fail(InvalidRequestError("Window name must not be empty"))
        if not folder_path or not folder_path.strip():
            return OperationResult.fail(InvalidRequestError("Folder path must not be empty"))
        
        try:
            window_id = self.controller.create_window(name, folder_path)
        except TerminalMapperError as e:
            logger.error("Failed to create terminal '{}': {}", name, e)
            return OperationResult.fail(e)
        
        if not window_id:
            logger.error("Terminal '{}' was created without a window id", name)
            return OperationResult.fail(MalformedReplyError("Failed to get window ID"))
        
        now = self._clock()
        try:
            with self._lock:
                mappings = self.store.load_terminal_mappings()
                mappings[window_id] = TerminalMapping(
                    window_id=window_id,
                    name=name,
                    folder_path=folder_path,
                    created=now,
                    last_used=now,
                )
                self.store.save_terminal_mappings(mappings)
                self.store.upsert_project(name, folder_path, now=now)
                self.store.update_name_mirror(window_id, name)
        except PersistenceError as e:
            logger.error("Window {} for '{}' opened but not saved: {}", window_id, name, e)
            return OperationResult.fail(e, value=window_id)
        
        logger.info("Mapped window {} to '{}' ({})", window_id, name, folder_path)
        return OperationResult.ok(window_id)
    
    def create_at_location(self, location: str) -> OperationResult:
        """Open a mapped window in a quick location (home, desktop, documents, downloads)."""
        try:
            name, folder_path = resolve_location(location)
        except ValueError as e:
            return OperationResult.fail(InvalidRequestError(str(e)))
        return self.create_window(name, folder_path)
    
    def reopen_project(self, name: str) -> OperationResult:
        """
        Open a new window for a recent project, found by exact name.
        
        The project moves to the front of the recent list.
        """
        for project in self.store.load_projects():
            if project.name == name:
                return self.create_window(project.name, project.path)
        return OperationResult.fail(ProjectNotFoundError(name))
    
    def new_window(self) -> OperationResult:
        """Open an unmapped window."""
        try:
            return OperationResult.ok(self.controller.new_window())
        except TerminalMapperError as e:
            logger.error("Failed to open terminal: {}", e)
            return OperationResult.fail(e)
    
    def list_windows(self) -> OperationResult:
        """List live windows; value is a list of WindowInfo."""
        try:
            return OperationResult.ok(self.controller.list_windows())
        except TerminalMapperError as e:
            logger.error("Failed to list terminals: {}", e)
            return OperationResult.fail(e)
    
    def focus(self, window_id: str) -> OperationResult:
        """Bring a window to the front."""
        try:
            self.controller.focus(window_id)
        except WindowNotFoundError as e:
            self._mark_dangling(window_id)
            return OperationResult.fail(e)
        except TerminalMapperError as e:
            logger.error("Failed to focus window {}: {}", window_id, e)
            return OperationResult.fail(e)
        return OperationResult.ok(window_id)
    
    def rename(self, window_id: str, new_name: str) -> OperationResult:
        """
        Retitle a window and update its mapping.
        
        A window without a mapping gets one with an empty folder path.
        """
        if not new_name or not new_name.strip():
            return OperationResult.fail(InvalidRequestError("New name must not be empty"))
        
        try:
            self.controller.rename(window_id, new_name)
        except WindowNotFoundError as e:
            self._mark_dangling(window_id)
            return OperationResult.fail(e)
        except TerminalMapperError as e:
            logger.error("Failed to rename window {}: {}", window_id, e)
            return OperationResult.fail(e)
        
        now = self._clock()
        try:
            with self._lock:
                mappings = self.store.load_terminal_mappings()
                mapping = mappings.get(window_id)
                if mapping is None:
                    mappings[window_id] = TerminalMapping(
                        window_id=window_id,
                        name=new_name,
                        folder_path="",
                        created=now,
                        last_used=now,
                    )
                else:
                    mapping.name = new_name
                    mapping.last_used = now
                    mapping.dangling = False
                self.store.save_terminal_mappings(mappings)
                self.store.update_name_mirror(window_id, new_name)
        except PersistenceError as e:
            return OperationResult.fail(e, value=window_id)
        
        logger.info("Renamed window {} to '{}'", window_id, new_name)
        return OperationResult.ok(window_id)
    
    def close(self, window_id: str) -> OperationResult:
        """
        Close a window. The mapping is kept; use ``forget`` to drop it.
        """
        try:
            self.controller.close(window_id)
        except WindowNotFoundError as e:
            self._mark_dangling(window_id)
            return OperationResult.fail(e)
        except TerminalMapperError as e:
            logger.error("Failed to close window {}: {}", window_id, e)
            return OperationResult.fail(e)
        return OperationResult.ok(window_id)
    
    def forget(self, window_id: str) -> OperationResult:
        """Remove the stored mapping of a window."""
        with self._lock:
            mappings = self.store.load_terminal_mappings()
            mapping = mappings.pop(window_id, None)
            if mapping is None:
                return OperationResult.fail(WindowNotFoundError(window_id, f"No mapping for window '{window_id}'"))
            try:
                self.store.save_terminal_mappings(mappings)
            except PersistenceError as e:
                return OperationResult.fail(e)
            self.store.update_name_mirror(window_id, None)
        return OperationResult.ok(mapping)
    
    def reconcile(self) -> OperationResult:
        """
        Drop mappings whose window is no longer open.
        
        Mappings created after the listing started are kept; their window
        may be missing from the listing.
        
        Returns:
            Success with the sorted list of pruned window ids
        """
        started = self._clock()
        listed = self.list_windows()
        if not listed.success:
            return listed
        live_ids = {w.id for w in listed.value}
        
        with self._lock:
            mappings = self.store.load_terminal_mappings()
            stale = sorted(
                wid for wid, mapping in mappings.items()
                if wid not in live_ids and mapping.created < started
            )
            if not stale:
                return OperationResult.ok([])
            for window_id in stale:
                del mappings[window_id]
            try:
                self.store.save_terminal_mappings(mappings)
            except PersistenceError as e:
                return OperationResult.fail(e)
            for window_id in stale:
                self.store.update_name_mirror(window_id, None)
        
        logger.info("Pruned {} stale terminal mapping(s)", len(stale))
        return OperationResult.ok(stale)
    
    def apply_naming_scheme(
        self,
        scheme: Union[str, NamingScheme],
        windows: Optional[Sequence[WindowInfo]] = None,
    ) -> OperationResult:
        """
        Rename every window in listing order according to a scheme.
        
        Windows that disappeared are skipped. Other failures stop the pass.
        
        Returns:
            Success with the (window_id, label) pairs that were applied
        """
        try:
            scheme = parse_scheme(scheme)
        except ValueError as e:
            return OperationResult.fail(InvalidRequestError(str(e)))
        
        if windows is None:
            listed = self.list_windows()
            if not listed.success:
                return listed
            windows = listed.value
        
        applied: List[Tuple[str, str]] = []
        for window, label in zip(windows, scheme_labels(scheme, len(windows))):
            result = self.rename(window.id, label)
            if result.success:
                applied.append((window.id, label))
            elif result.not_found:
                logger.debug("Skipping closed window {}", window.id)
            else:
                return OperationResult.fail(result.error, value=applied)
        return OperationResult.ok(applied)
    
    # Store views
    
    def project_mappings(self) -> List[ProjectMapping]:
        return self.store.load_projects()
    
    def terminal_mappings(self) -> Dict[str, TerminalMapping]:
        return self.store.load_terminal_mappings()
    
    def _mark_dangling(self, window_id: str) -> None:
        logger.info("Window {} is gone", window_id)
        with self._lock:
            mappings = self.store.load_terminal_mappings()
            mapping = mappings.get(window_id)
            if mapping is None or mapping.dangling:
                return
            mapping.dangling = True
            try:
                self.store.save_terminal_mappings(mappings)
            except PersistenceError as e:
                logger.warning("Could not mark window {} as dangling: {}", window_id, e)
