# src/eafitos_shell/core/command_registry.py
import logging
from typing import Callable, Iterable, Iterator, List, Optional

from eafitos_shell.core.discovery import discover_handlers
from eafitos_shell.model import CommandEntry

logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    The fixed, ordered table of commands known to the shell.

    Built once before the REPL starts and read-only afterwards. Names must be
    unique: a duplicate would shadow the later entry, so it is refused.
    """

    def __init__(self, entries: Iterable[CommandEntry]):
        ordered: List[CommandEntry] = []
        seen = set()
        for entry in entries:
            if entry.name in seen:
                raise ValueError(f"Duplicate command name in registry: '{entry.name}'")
            seen.add(entry.name)
            ordered.append(entry)
        self._entries = tuple(ordered)
        logger.debug("Command registry built with %d commands.", len(self._entries))

    def count(self) -> int:
        return len(self._entries)

    def lookup(self, name: str) -> Optional[Callable[..., int]]:
        """Returns the handler registered under exactly `name`, or None."""
        for entry in self._entries:
            if entry.name == name:
                return entry.handler
        return None

    def names(self) -> List[str]:
        return [entry.name for entry in self._entries]

    def __iter__(self) -> Iterator[CommandEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def build_registry() -> CommandRegistry:
    """
    Discovers all command handlers and builds the registry from them.
    """
    logger.debug("Discovering all command handlers...")
    registry = CommandRegistry(discover_handlers())
    logger.debug("Successfully registered %d handlers.", registry.count())
    return registry
