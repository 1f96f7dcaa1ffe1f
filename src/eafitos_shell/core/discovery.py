import importlib
import logging
from typing import List, Tuple

from eafitos_shell.core.utils.path_utils import PathUtils
from eafitos_shell.model import CommandEntry

logger = logging.getLogger(__name__)

HANDLERS_PACKAGE = "eafitos_shell.core.handlers"
UNORDERED = 1_000_000


def discover_handlers() -> List[CommandEntry]:
    """
    Scans the handler directories and returns one CommandEntry per
    `handle_<name>` function found in a `*_handler.py` module.

    The subdirectory a module lives in ('basic', 'advanced') becomes the
    command's help group, and a module-level `<name>_help_text` string
    becomes its help text. Entries are ordered by the module-level
    `COMMAND_ORDER` integer; modules without one go last, by module path.
    """
    handlers_dir = PathUtils.get_handlers_dir()
    discovered: List[Tuple[int, CommandEntry]] = []

    logger.debug("Scanning for handlers in: '%s'", handlers_dir)
    if not handlers_dir.is_dir():
        logger.warning("Handlers directory not found, skipping: %s", handlers_dir)
        return []

    for file_path in sorted(handlers_dir.glob("**/*_handler.py")):
        relative_path = file_path.relative_to(handlers_dir)
        module_name_parts = list(relative_path.parts)
        module_name_parts[-1] = file_path.stem
        module_name = f"{HANDLERS_PACKAGE}.{'.'.join(module_name_parts)}"
        group = module_name_parts[0] if len(module_name_parts) > 1 else "basic"

        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            logger.error("Failed to load handler module %s: %s", file_path.name, e, exc_info=True)
            continue

        order = getattr(module, "COMMAND_ORDER", UNORDERED)
        for attr_name in sorted(dir(module)):
            if not attr_name.startswith("handle_"):
                continue
            handler_func = getattr(module, attr_name)
            if not callable(handler_func):
                continue
            command_name = attr_name[len("handle_"):]
            help_text = getattr(module, f"{command_name}_help_text", "")
            discovered.append((order, CommandEntry(
                name=command_name,
                handler=handler_func,
                help_text=help_text if isinstance(help_text, str) else "",
                group=group,
            )))
            logger.debug("Discovered command '%s' (%s)", command_name, group)

    # Stable sort keeps module-path order among equal COMMAND_ORDER values.
    discovered.sort(key=lambda item: item[0])
    return [entry for _, entry in discovered]
