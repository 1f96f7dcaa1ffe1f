# src/eafitos_shell/core/shell_loop.py
from __future__ import annotations

import logging
from typing import Callable, List, Protocol

from eafitos_shell.core.dispatcher import Dispatcher
from eafitos_shell.core.line_reader import PROMPT
from eafitos_shell.core.managers.history_manager import HistoryManager
from eafitos_shell.core.parser import tokenize

logger = logging.getLogger(__name__)

EXIT_COMMAND = "salir"


class Reader(Protocol):
    def read_line(self, prompt: str = PROMPT) -> str: ...


class ShellLoop:
    """
    The read-eval-print loop: prompt, read, record, tokenize, dispatch.

    One cycle finishes completely before the next prompt is shown. The loop
    itself never returns; the process ends through the exit command, which
    is also what end of input (Ctrl-D) runs.
    """

    def __init__(
            self,
            reader: Reader,
            history: HistoryManager,
            dispatcher: Dispatcher,
            tokenizer: Callable[[str], List[str]] = tokenize,
            prompt: str = PROMPT,
            exit_command: str = EXIT_COMMAND,
    ) -> None:
        self.reader = reader
        self.history = history
        self.dispatcher = dispatcher
        self.tokenizer = tokenizer
        self.prompt = prompt
        self.exit_command = exit_command

    def step(self) -> None:
        """Runs a single cycle of the loop."""
        try:
            line = self.reader.read_line(self.prompt)
        except KeyboardInterrupt:
            # Ctrl-C drops the current line, same as an empty one.
            return
        except EOFError:
            print()
            logger.debug("End of input, running '%s'.", self.exit_command)
            self.dispatcher.dispatch([self.exit_command])
            # No more input can arrive, even if the exit command did not end the process.
            raise SystemExit(0)

        line = line.rstrip("\r\n")
        if line:
            self.history.append(line)

        self.dispatcher.dispatch(self.tokenizer(line))

    def run(self) -> None:
        logger.debug("Entering REPL loop.")
        while True:
            self.step()
