# src/eafitos_shell/core/line_reader.py
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

PROMPT = "EAFITos> "


class LineReader:
    """
    Reads one line of user input per call via prompt_toolkit.

    Arrow-key recall works for the current run only; nothing is written to
    disk. Raises EOFError at end of input and KeyboardInterrupt on Ctrl-C.
    """

    def __init__(self, session: Optional[PromptSession] = None):
        self._session = session

    def read_line(self, prompt: str = PROMPT) -> str:
        if self._session is None:
            self._session = PromptSession(history=InMemoryHistory())
        return self._session.prompt(prompt)
