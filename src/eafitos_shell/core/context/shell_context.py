# src/eafitos_shell/core/context/shell_context.py
import logging
from typing import Optional, TYPE_CHECKING

from eafitos_shell.core.managers.history_manager import HistoryManager

# Prevent circular imports during runtime, but retain type hinting for static analysis
if TYPE_CHECKING:
    from eafitos_shell.core.command_registry import CommandRegistry

logger = logging.getLogger(__name__)


class ShellContext:
    """
    Holds the state one shell session shares with its command handlers:
    the history log and the command registry.
    """

    def __init__(self, history: HistoryManager, registry: Optional['CommandRegistry'] = None):
        self.history = history
        self.registry = registry

    def __repr__(self) -> str:
        commands = self.registry.count() if self.registry is not None else 0
        return f"<ShellContext history={len(self.history)} commands={commands}>"
