import logging
from rich.logging import RichHandler

LOGGER_NAME = "mutkit"

def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach one RichHandler to the ``mutkit`` logger; calling again only changes the level."""
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="[%X]"))
        log.addHandler(handler)
    return log

def get_logger(name: str = "") -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)
