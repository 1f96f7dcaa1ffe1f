# src/eafitos_shell/core/utils/helptext.py
from eafitos_shell.core.command_registry import CommandRegistry

HEADER_HELP_TEXT = """
========================================
      EAFITos - Educational Shell
========================================
""".strip()

GROUP_TITLES = {
    "basic": "BASIC COMMANDS:",
    "advanced": "ADVANCED COMMANDS:",
}

EXAMPLES_HELP_TEXT = """
Quick examples:
  calc 5 + 3             -> Result: 8.00
  buscar main main.c     -> Lines containing 'main'
  estadisticas README.md -> Full file statistics
""".strip()


def get_help_text(registry: CommandRegistry, max_history: int) -> str:
    """
    Assembles the full help text from the header and the help fragment of
    every registered command, grouped by section in registry order.
    A `{max_history}` placeholder in a fragment becomes the history capacity.
    """
    sections = {}
    for entry in registry:
        sections.setdefault(entry.group, []).append(
            (entry.help_text or f"  {entry.name}").replace("{max_history}", str(max_history))
        )

    ordered_groups = [g for g in GROUP_TITLES if g in sections]
    ordered_groups += [g for g in sections if g not in GROUP_TITLES]

    parts = [HEADER_HELP_TEXT]
    for group in ordered_groups:
        title = GROUP_TITLES.get(group, f"{group.upper()} COMMANDS:")
        parts.append("\n".join([title] + sections[group]))
    parts.append(EXAMPLES_HELP_TEXT)
    return "\n\n".join(parts)
