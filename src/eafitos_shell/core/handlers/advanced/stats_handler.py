# src/eafitos_shell/core/handlers/advanced/stats_handler.py
import logging
import os
import stat
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from eafitos_shell.core.context.shell_context import ShellContext

logger = logging.getLogger(__name__)

COMMAND_ORDER = 10

estadisticas_help_text = "  estadisticas <file>    Show detailed information about a file."

_TIME_FORMAT = "%d/%m/%Y %H:%M:%S"


def _format_size(size: int) -> str:
    text = f"{size} bytes"
    if size > 1024:
        text += f" ({size / 1024:.2f} KB)"
    if size > 1024 * 1024:
        text += f" ({size / (1024 * 1024):.2f} MB)"
    return text


def _count_content(path: Path) -> Optional[Tuple[int, int, int]]:
    """Returns (lines, words, bytes), or None if the file cannot be read."""
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.debug("Could not read %s for content stats: %s", path, e)
        return None
    lines = data.count(b"\n")
    # A final line without a newline still counts as one.
    if data and lines == 0:
        lines = 1
    return lines, len(data.split()), len(data)


def _file_type(mode: int) -> str:
    if stat.S_ISREG(mode):
        return "Regular file"
    if stat.S_ISDIR(mode):
        return "Directory"
    return "Other"


def handle_estadisticas(args: List[str], _ctx: ShellContext) -> int:
    """
    Handles the 'estadisticas' command.

    Prints size, content counts, permissions, timestamps and type of a file.
    Symbolic links are followed, so a link reports on its target.
    """
    if len(args) < 2:
        print("Usage: estadisticas <file>")
        print("Example: estadisticas README.md")
        return 1

    path = Path(args[1])
    try:
        st = os.stat(path)
    except OSError as e:
        print(f"Error: could not access '{path}': {e.strerror or e}")
        return 1

    print(f"\n=== STATISTICS FOR: {path} ===")
    print("-" * 36)
    print(f"Size:          {_format_size(st.st_size)}")

    if stat.S_ISREG(st.st_mode):
        counts = _count_content(path)
        if counts is not None:
            lines, words, chars = counts
            print(f"Lines:         {lines}")
            print(f"Words:         {words}")
            print(f"Characters:    {chars}")
        else:
            print("Content could not be read for analysis.")

    # filemode() yields e.g. '-rw-r--r--'; drop the leading type character.
    print(f"Permissions:   {stat.S_IMODE(st.st_mode):o} ({stat.filemode(st.st_mode)[1:]})")
    print(f"Modified:      {datetime.fromtimestamp(st.st_mtime).strftime(_TIME_FORMAT)}")
    print(f"Accessed:      {datetime.fromtimestamp(st.st_atime).strftime(_TIME_FORMAT)}")
    print(f"Type:          {_file_type(st.st_mode)}")
    print("-" * 36)
    print()
    return 0
