"""Local HTTP API for menu-bar and popover clients."""

from dataclasses import is_dataclass
from typing import Any, Dict

from flask import Flask, jsonify, request

from .commands import CommandExecutor
from .exceptions import (
    BridgeError,
    InvalidRequestError,
    MalformedReplyError,
    ProjectNotFoundError,
    WindowNotFoundError,
)
from .results import OperationResult


def to_json(value: Any) -> Any:
    """Convert result payloads (dataclasses, tuples, dicts) into JSON-ready values."""
    if is_dataclass(value) and hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, dict):
        return {str(k): to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value


def error_status(error: Exception) -> int:
    """HTTP status for a failed operation."""
    if isinstance(error, InvalidRequestError):
        return 400
    if isinstance(error, (WindowNotFoundError, ProjectNotFoundError)):
        return 404
    if isinstance(error, (BridgeError, MalformedReplyError)):
        return 502
    return 500


def _respond(result: OperationResult):
    if result.success:
        return jsonify({"status": "ok", "result": to_json(result.value)})
    body: Dict[str, Any] = {
        "status": "error",
        "error": {"type": type(result.error).__name__, "message": result.message},
    }
    if result.value is not None:
        body["result"] = to_json(result.value)
    return jsonify(body), error_status(result.error)


def create_app(executor: CommandExecutor) -> Flask:
    """Create the Flask app routing requests to the command executor."""
    app = Flask("terminal_mapper_api")

    def run(intent_type: str, **fields):
        return _respond(executor.execute({"type": intent_type, **fields}))

    def body() -> Dict[str, Any]:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.get("/windows")
    def list_windows():
        return run("list_windows")

    @app.post("/windows")
    def create_window():
        data = body()
        return run("create_window", name=data.get("name"), folder_path=data.get("folder_path"))

    @app.post("/windows/new")
    def new_window():
        return run("new_window")

    @app.post("/locations/<location>")
    def create_at_location(location: str):
        return run("create_at_location", location=location)

    @app.post("/windows/<window_id>/focus")
    def focus_window(window_id: str):
        return run("focus_window", window_id=window_id)

    @app.post("/windows/<window_id>/rename")
    def rename_window(window_id: str):
        return run("rename_window", window_id=window_id, name=body().get("name"))

    @app.post("/windows/<window_id>/close")
    def close_window(window_id: str):
        return run("close_window", window_id=window_id)

    @app.delete("/windows/<window_id>/mapping")
    def forget_window(window_id: str):
        return run("forget_window", window_id=window_id)

    @app.post("/naming-scheme")
    def apply_naming_scheme():
        return run("apply_naming_scheme", scheme=body().get("scheme"))

    @app.post("/reconcile")
    def reconcile():
        return run("reconcile")

    @app.get("/projects")
    def list_projects():
        return run("list_projects")

    @app.post("/projects/<name>/reopen")
    def reopen_project(name: str):
        return run("reopen_project", name=name)

    @app.get("/terminals")
    def list_terminals():
        return run("list_terminals")

    @app.post("/submit")
    def submit():
        """Run a batch of intents: a list or {"commands": [...]}."""
        results = executor.execute_all(request.get_json(silent=True))
        return jsonify({
            "status": "ok" if all(r.success for r in results) else "error",
            "results": [
                {
                    "success": r.success,
                    "result": to_json(r.value),
                    "error": {"type": type(r.error).__name__, "message": r.message} if r.error else None,
                }
                for r in results
            ],
        })

    return app
