# src/eafitos_shell/core/handlers/basic/time_handler.py
from datetime import datetime
from typing import List

from eafitos_shell.core.context.shell_context import ShellContext

COMMAND_ORDER = 3

tiempo_help_text = "  tiempo                 Show the current date and time."


def handle_tiempo(_args: List[str], _ctx: ShellContext) -> int:
    now = datetime.now()
    print(f"System date and time: {now.strftime('%d-%m-%Y %H:%M:%S')}")
    return 0
