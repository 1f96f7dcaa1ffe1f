# src/eafitos_shell/core/dispatcher.py
from __future__ import annotations

import logging
from typing import List, Optional

from eafitos_shell.core.command_registry import CommandRegistry
from eafitos_shell.core.context.shell_context import ShellContext

HELP_COMMAND = "ayuda"


class Dispatcher:
    """
    Resolves the first token of an argument list to a registered handler and
    runs it. Unknown commands and handler crashes are reported on the console;
    neither ends the shell.
    """

    def __init__(
            self,
            registry: CommandRegistry,
            ctx: ShellContext,
            logger: Optional[logging.Logger] = None,
    ) -> None:
        self._registry = registry
        self._ctx = ctx
        self._log = logger or logging.getLogger(__name__)

    def dispatch(self, args: List[str]) -> None:
        """
        Runs the command named by args[0] with the full argument list.
        An empty list is a no-op.
        """
        if not args:
            return

        name = args[0]
        handler = self._registry.lookup(name)
        if handler is None:
            self._log.debug("Unknown command '%s'", name)
            print(f"Unknown command: {name}\nType '{HELP_COMMAND}' to see the available commands.")
            return

        try:
            status = handler(args, self._ctx)
        except Exception as e:
            self._log.error("Command '%s' raised: %s", name, e, exc_info=True)
            print(f"Error: command '{name}' failed: {e}")
            return

        if status:
            self._log.debug("Command '%s' finished with status %s", name, status)
