"""Command-line entry point for the terminal mapper."""

import argparse
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

from .api_server import create_app
from .commands import CommandExecutor
from .config import API_PORT, LOG_FILE, LOG_LEVEL
from .locations import QUICK_LOCATIONS
from .logging_config import setup_logging
from .naming import NamingScheme
from .results import OperationResult
from .service import create_manager


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terminal-mapper",
        description="Create, name and find Terminal windows by project.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Open a window for a project folder")
    create.add_argument("name")
    create.add_argument("folder_path")

    quick = sub.add_parser("quick", help="Open a window in a well-known folder")
    quick.add_argument("location", choices=list(QUICK_LOCATIONS))

    reopen = sub.add_parser("reopen", help="Open a window for a recent project")
    reopen.add_argument("name")

    sub.add_parser("new", help="Open a plain window")
    sub.add_parser("list", help="List open windows")

    focus = sub.add_parser("focus", help="Bring a window to the front")
    focus.add_argument("window_id")

    rename = sub.add_parser("rename", help="Retitle a window")
    rename.add_argument("window_id")
    rename.add_argument("name")

    close = sub.add_parser("close", help="Close a window (keeps its mapping)")
    close.add_argument("window_id")

    forget = sub.add_parser("forget", help="Drop the stored mapping of a window")
    forget.add_argument("window_id")

    sub.add_parser("reconcile", help="Drop mappings of windows that are no longer open")

    scheme = sub.add_parser("scheme", help="Rename all open windows with a naming scheme")
    scheme.add_argument("scheme", choices=[s.value for s in NamingScheme])

    sub.add_parser("projects", help="List recent projects")
    sub.add_parser("terminals", help="List stored terminal mappings")

    serve = sub.add_parser("serve", help="Run the local HTTP API")
    serve.add_argument("--port", type=int, default=API_PORT)

    return parser


def intent_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Translate parsed arguments into a command intent."""
    command = args.command
    if command == "create":
        return {"type": "create_window", "name": args.name, "folder_path": args.folder_path}
    if command == "quick":
        return {"type": "create_at_location", "location": args.location}
    if command == "reopen":
        return {"type": "reopen_project", "name": args.name}
    if command == "rename":
        return {"type": "rename_window", "window_id": args.window_id, "name": args.name}
    if command in ("focus", "close", "forget"):
        return {"type": f"{command}_window", "window_id": args.window_id}
    if command == "scheme":
        return {"type": "apply_naming_scheme", "scheme": args.scheme}
    return {
        "new": {"type": "new_window"},
        "list": {"type": "list_windows"},
        "reconcile": {"type": "reconcile"},
        "projects": {"type": "list_projects"},
        "terminals": {"type": "list_terminals"},
    }[command]


def _when(timestamp: float) -> str:
    return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M")


def format_result(command: str, result: OperationResult) -> List[str]:
    """Human-readable lines for a command result."""
    if not result.success:
        prefix = "Not found" if result.not_found else "Error"
        return [f"✗ {prefix}: {result.message}"]

    value = result.value
    if command == "list":
        if not value:
            return ["No terminal windows are open."]
        return [f"{w.id}\t{w.name}" for w in value]
    if command == "projects":
        if not value:
            return ["No recent projects."]
        return [f"{p.name}\t{p.path}\t{_when(p.last_used)}" for p in value]
    if command == "terminals":
        if not value:
            return ["No terminal mappings."]
        lines = []
        for window_id, m in value.items():
            marker = " (gone)" if m.dangling else ""
            lines.append(f"{window_id}\t{m.name}\t{m.folder_path}{marker}")
        return lines
    if command == "reconcile":
        if not value:
            return ["All mappings refer to open windows."]
        return [f"Forgot window {window_id}" for window_id in value]
    if command == "scheme":
        return [f"{window_id} → {label}" for window_id, label in value]
    if command in ("create", "new", "quick", "reopen"):
        return [f"✓ Window {value}"]
    return ["✓ Done"]


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface; returns the exit status."""
    args = build_parser().parse_args(argv)
    setup_logging(LOG_LEVEL, LOG_FILE)

    manager = create_manager()
    executor = CommandExecutor(manager)
    try:
        if args.command == "serve":
            print(f"Serving on http://127.0.0.1:{args.port}")
            create_app(executor).run(host="127.0.0.1", port=args.port, debug=False, use_reloader=False)
            return 0

        result = executor.execute(intent_from_args(args))
        for line in format_result(args.command, result):
            print(line, file=sys.stdout if result.success else sys.stderr)
        return 0 if result.success else 1
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    finally:
        manager.shutdown(wait=False)


if __name__ == "__main__":
    sys.exit(main())
