# src/eafitos_shell/core/handlers/advanced/clear_handler.py
from typing import List

from eafitos_shell.core.context.shell_context import ShellContext

COMMAND_ORDER = 8

limpiar_help_text = "  limpiar                Clear the screen."

# Clear the whole screen, then move the cursor home.
CLEAR_SCREEN = "\033[2J\033[H"

BANNER = """
+--------------------------------------+
|             EAFITos v1.0             |
|      Educational Shell - OS          |
+--------------------------------------+
Type 'ayuda' to see the available commands.
""".lstrip()


def handle_limpiar(_args: List[str], _ctx: ShellContext) -> int:
    print(CLEAR_SCREEN, end="")
    print(BANNER)
    return 0
