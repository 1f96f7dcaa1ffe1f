import logging
import sys
from tqdm import tqdm


class LogWithTqdm(logging.Handler):
    """
    A logging handler that writes through `tqdm.write()` so log lines never
    tear through the prompt or any progress output on the terminal.
    """
    def emit(self, record):
        try:
            msg = self.format(record)
            tqdm.write(msg, file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def configure_logger(general_level='WARNING'):
    """
    Configures the root logger with a TQDM-friendly handler. Unknown level
    names fall back to WARNING.
    """
    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"
    ))

    root_logger = logging.getLogger()
    if isinstance(general_level, str):
        general_level = getattr(logging, general_level.upper(), logging.WARNING)
    root_logger.setLevel(general_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
