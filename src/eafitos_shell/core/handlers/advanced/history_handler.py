# src/eafitos_shell/core/handlers/advanced/history_handler.py
from typing import List

from eafitos_shell.core.context.shell_context import ShellContext

COMMAND_ORDER = 7

historial_help_text = "  historial              Show the last {max_history} commands."


def handle_historial(_args: List[str], ctx: ShellContext) -> int:
    """
    Handles the 'historial' command: prints the history log oldest first,
    numbered from 1.
    """
    entries = ctx.history.snapshot()
    print(f"\n=== COMMAND HISTORY (last {len(entries)}) ===")

    if not entries:
        print("  History is empty.")
        print("  Run some commands to see them here.\n")
        return 0

    for position, line in entries:
        print(f"  {position:2d}: {line}")
    print()
    return 0
