# src/eafitos_shell/core/parser.py
from __future__ import annotations

from typing import List


def tokenize(line: str | None) -> List[str]:
    """
    Splits a raw input line into its argument list.

    Tokens are separated by any run of whitespace; quotes and backslashes
    have no special meaning. Index 0 is the command name. An empty or blank
    line yields an empty list.

    Args:
        line (str | None): The raw input string from the shell.

    Returns:
        List[str]: The ordered argument tokens.
    """
    if not line:
        return []
    return line.split()
