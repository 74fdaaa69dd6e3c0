"""
Logger utility for the tokenizer service with colorful console output and file logging.
"""

import atexit
import logging
from termcolor import colored
from datetime import datetime
import functools
import sys
import os


LEVEL_COLORS = {
    logging.DEBUG: "blue",
    logging.INFO: "green",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "red",
}


class ColorfulFormatter(logging.Formatter):

    def __init__(self, *args, **kwargs):
        super(ColorfulFormatter, self).__init__(*args, **kwargs)

    def formatMessage(self, record):
        created_time = datetime.fromtimestamp(record.created)
        asctime = created_time.strftime(self.datefmt)
        log = self._fmt % {"asctime": asctime, "levelname": record.levelname, "message": record.message}

        color = LEVEL_COLORS.get(record.levelno)
        return colored(log, color) if color else log


@functools.lru_cache()  # Cache to prevent multiple handlers
def setup_logger(output=None, *, color=True, name="WordTok", level=logging.DEBUG):
    """
    Initialize a tokenizer logger.

    Args:
        output (str, optional): A file name or a directory to save log. If None, will not save log file.
            If ends with ".txt" or ".log", assumed to be a file name.
            Otherwise, logs will be saved to `output/log.txt`.
        color (bool): Whether to use colors in console output.
        name (str): The root module name of this logger.
        level (int): Logger and handler verbosity.

    Returns:
        logging.Logger: A configured logger instance.

    Example:
        >>> logger = setup_logger(output="logs/server.log", name="WordTok")
        >>> logger.info("Server starting...")
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
    plain_formatter = logging.Formatter(FORMAT, datefmt="%d/%m/%Y %H:%M:%S")

    ch = logging.StreamHandler(stream=sys.stdout)
    ch.setLevel(level)
    if color:
        formatter = ColorfulFormatter(fmt=FORMAT, datefmt="%d/%m/%Y %H:%M:%S")
    else:
        formatter = plain_formatter
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # file logging
    if output is not None:
        if output.endswith(".txt") or output.endswith(".log"):
            filename = output
        else:
            filename = os.path.join(output, "log.txt")

        dirname = os.path.dirname(filename)
        if dirname and not os.path.exists(dirname):
            os.makedirs(dirname, exist_ok=True)

        fh = logging.StreamHandler(_cached_log_stream(filename))
        fh.setLevel(level)
        fh.setFormatter(plain_formatter)
        logger.addHandler(fh)

    return logger


@functools.lru_cache(maxsize=None)
def _cached_log_stream(filename):
    """
    Cache the opened file object, so that different calls to `setup_logger`
    with the same file name can safely write to the same file.
    """
    io = open(filename, "a", encoding="utf-8")
    atexit.register(io.close)
    return io
