# src/eafitos_shell/core/handlers/basic/list_handler.py
import logging
from pathlib import Path
from typing import List

from eafitos_shell.core.context.shell_context import ShellContext

logger = logging.getLogger(__name__)

COMMAND_ORDER = 1

listar_help_text = "  listar [dir]           List the files in a directory (default: current)."


def handle_listar(args: List[str], _ctx: ShellContext) -> int:
    """
    Handles the 'listar' command.

    Prints the entries of the given directory (or the current one), sorted
    by name, with directories marked by a trailing '/'.
    """
    target = Path(args[1]) if len(args) > 1 else Path(".")
    try:
        entries = sorted(target.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.debug("listar failed for %s: %s", target, e)
        print(f"Error: could not open directory '{target}': {e.strerror or e}")
        return 1

    for entry in entries:
        print(f"{entry.name}/" if entry.is_dir() else entry.name)
    return 0
