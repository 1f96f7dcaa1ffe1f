# src/eafitos_shell/core/handlers/basic/help_handler.py
from eafitos_shell.core.context.shell_context import ShellContext
from eafitos_shell.core.utils.helptext import get_help_text

COMMAND_ORDER = 5

ayuda_help_text = "  ayuda                  Show this help text."


def handle_ayuda(_args, ctx: ShellContext) -> int:
    print(get_help_text(ctx.registry, ctx.history.max_entries))
    return 0
