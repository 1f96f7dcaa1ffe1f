# src/eafitos_shell/core/handlers/basic/read_handler.py
from pathlib import Path
from typing import List

from eafitos_shell.core.context.shell_context import ShellContext

COMMAND_ORDER = 2

leer_help_text = "  leer <file>            Show the contents of a file."


def handle_leer(args: List[str], _ctx: ShellContext) -> int:
    if len(args) < 2:
        print("Usage: leer <file>")
        return 1

    path = Path(args[1])
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        print(f"Error: could not open '{path}': {e.strerror or e}")
        return 1

    print(content, end="" if content.endswith("\n") else "\n")
    return 0
