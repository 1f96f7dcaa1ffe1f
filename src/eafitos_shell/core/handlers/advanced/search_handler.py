# src/eafitos_shell/core/handlers/advanced/search_handler.py
from pathlib import Path
from typing import List

from eafitos_shell.core.context.shell_context import ShellContext

COMMAND_ORDER = 9

buscar_help_text = "  buscar <text> <file>   Search for text inside a file."

USAGE = """
Usage: buscar <text> <file>
Example: buscar hello document.txt
""".strip()


def handle_buscar(args: List[str], _ctx: ShellContext) -> int:
    """
    Handles the 'buscar' command, a minimal grep.

    Prints every line of the file containing the text (case-sensitive),
    prefixed with its line number, followed by the number of matches.
    """
    if len(args) < 3:
        print(USAGE)
        return 1

    search_text, path = args[1], Path(args[2])
    try:
        with path.open("r", encoding="utf-8", errors="replace") as f:
            print(f"\nSearching for '{search_text}' in {path}:")
            print("-" * 36)
            matches = 0
            for line_num, line in enumerate(f, start=1):
                line = line.rstrip("\n")
                if search_text in line:
                    print(f"{line_num:4d}: {line}")
                    matches += 1
    except OSError as e:
        print(f"Error: could not open '{path}': {e.strerror or e}")
        print("       Check that the file exists and is readable.")
        return 1

    if matches == 0:
        print(f"Text '{search_text}' not found.")
    else:
        print(f"Found {matches} occurrence(s).")
    print()
    return 0
