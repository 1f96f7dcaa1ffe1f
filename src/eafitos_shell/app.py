from __future__ import annotations

import logging
import sys
from typing import Optional

from eafitos_shell.core.command_registry import build_registry
from eafitos_shell.core.context.shell_context import ShellContext
from eafitos_shell.core.dispatcher import Dispatcher
from eafitos_shell.core.line_reader import LineReader
from eafitos_shell.core.managers.config_manager import config_manager
from eafitos_shell.core.managers.history_manager import HistoryManager
from eafitos_shell.core.shell_loop import Reader, ShellLoop
from eafitos_shell.core.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)


def start_shell(reader: Optional[Reader] = None) -> None:
    """Starts the interactive REPL (Read-Eval-Print Loop) for the EAFITos shell."""
    configure_logger(config_manager.get_nested("debug.level", "WARNING"))

    history = HistoryManager(config_manager.get_max_history())
    ctx = ShellContext(history)
    ctx.registry = build_registry()
    logger.debug("Registered %d commands: %s", ctx.registry.count(), ", ".join(ctx.registry.names()))

    loop = ShellLoop(reader or LineReader(), history, Dispatcher(ctx.registry, ctx))

    print("Welcome to EAFITos (type 'ayuda' for commands)")
    logger.info("Shell startup; history capacity: %d", history.max_entries)
    try:
        loop.run()
    finally:
        history.clear()
        logger.info("Shell shutdown; history released.")


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for running the shell from the command line."""
    start_shell()
    return 0


if __name__ == "__main__":
    sys.exit(main())
