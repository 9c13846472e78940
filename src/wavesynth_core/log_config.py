# src/wavesynth_core/log_config.py
import logging
import sys
from typing import Optional, TextIO, Union

#: Log records go to stderr; stdout carries only the sample report.
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO, stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Installs the single root handler used by the library and the CLI.

    `level` may be a logging constant or a level name such as "WARNING" (the
    form `--log-level` passes). Calling it again replaces the previous handler,
    so the CLI can rebind logging to the stream it was given.
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level name: {name!r}.")

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)
    logging.getLogger(__name__).debug(f"Logging configured at {logging.getLevelName(level)}.")
    return console_handler
