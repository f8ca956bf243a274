import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Sends application logs to stderr. Safe to call more than once: the handler is
    only installed the first time.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    if any(getattr(handler, "_gateway_console", False) for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._gateway_console = True
    root.addHandler(handler)
