# src/eafitos_shell/core/managers/history_manager.py
import logging
from typing import List, Optional, Tuple

from eafitos_shell.core.managers.config_manager import DEFAULT_MAX_HISTORY

logger = logging.getLogger(__name__)


class HistoryManager:
    """
    Keeps a bounded, oldest-first log of the lines entered in the shell.

    The log only grows through `append`. Empty lines and a line equal to the
    most recently stored one are ignored. When the log is full the oldest
    entry is evicted before the new one is stored.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_HISTORY):
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self.max_entries = max_entries
        self._entries: List[str] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> List[str]:
        """A copy of the stored lines, oldest first."""
        return list(self._entries)

    def last(self) -> Optional[str]:
        return self._entries[-1] if self._entries else None

    @staticmethod
    def _copy_line(line: str) -> str:
        return "".join(line)

    def append(self, line: str) -> bool:
        """
        Stores a copy of `line` at the end of the log.

        Returns True if the line was stored, False if it was rejected
        (empty, adjacent duplicate) or could not be stored.
        """
        if not line:
            return False
        if self._entries and self._entries[-1] == line:
            logger.debug("Skipping adjacent duplicate history entry: %r", line)
            return False

        # Build the new log aside so a failure leaves the current one intact.
        try:
            updated = self._entries[1:] if len(self._entries) >= self.max_entries else list(self._entries)
            updated.append(self._copy_line(line))
        except MemoryError:
            logger.error("Could not allocate history entry for %r", line, exc_info=True)
            print("Error: could not save command to history")
            return False

        if len(updated) <= len(self._entries):
            logger.debug("History full (%d). Evicted oldest entry.", self.max_entries)
        self._entries = updated
        return True

    def snapshot(self) -> List[Tuple[int, str]]:
        """Returns (position, line) pairs, 1-indexed and oldest first."""
        return [(i, line) for i, line in enumerate(self._entries, start=1)]

    def clear(self) -> None:
        """Releases every stored entry. Called once when the shell shuts down."""
        count = len(self._entries)
        self._entries = []
        logger.debug("History cleared (%d entries released).", count)
