# src/eafitos_shell/core/handlers/basic/exit_handler.py
import logging

from eafitos_shell.core.context.shell_context import ShellContext

logger = logging.getLogger(__name__)

COMMAND_ORDER = 6

salir_help_text = "  salir                  End the session."


def handle_salir(_args, _ctx: ShellContext) -> int:
    """Ends the shell process. Cleanup runs in the owner's exit path."""
    print("Leaving the shell...")
    logger.info("Exit requested.")
    raise SystemExit(0)
