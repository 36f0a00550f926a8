# log.py
from __future__ import annotations

import logging
import logging.handlers

loggers = {}
log = logging.getLogger()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_init(name: str, level: int = logging.WARNING, **kwargs) -> logging.Handler:
    """
    Attach one handler to the root logger.

    ``name`` is either "console" (stderr) or a path ending in ``.log``, which
    gets a midnight-rotated file. Calling again with the same name returns the
    existing handler.
    """
    if name in loggers:
        return loggers[name]

    if name.endswith(".log"):
        hdlr: logging.Handler = logging.handlers.TimedRotatingFileHandler(
            name,
            when=kwargs.get("frequency", "midnight"),
            interval=kwargs.get("interval", 1),
            backupCount=kwargs.get("backups", 5),
        )
    elif name == "console":
        hdlr = logging.StreamHandler()
    else:
        raise ValueError(f"Unsupported log target: {name!r}")

    hdlr.setFormatter(logging.Formatter(LOG_FORMAT))
    hdlr.setLevel(level)

    loggers[name] = hdlr
    log.addHandler(hdlr)
    log.setLevel(min(level, log.level) if log.level else level)
    return hdlr
