import logging

from core import config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Install console (and optional file) handlers on the root logger.

    Safe to call more than once; only the first call adds handlers.
    """
    global _configured
    if _configured:
        return

    level_name = (level or config.LOG_LEVEL or "INFO").upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    formatter = logging.Formatter(LOG_FORMAT)

    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    root.addHandler(stream)

    target = log_file or config.LOG_FILE
    if target:
        file_handler = logging.FileHandler(target, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    _configured = True
