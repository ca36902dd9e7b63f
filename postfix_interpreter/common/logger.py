"""Project-wide logger."""
import logging
import sys

LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = "postfix_interpreter", level: int = logging.INFO) -> logging.Logger:
    """
    Return the named logger, attaching a stderr handler on first use.

    Results of the interpreter go to stdout, so log records are kept on stderr.

    :param str name: Logger name
    :param int level: Initial logging level

    :return: Configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
        log.setLevel(level)
    return log


def set_verbose(verbose: bool) -> None:
    """Switch the project logger between INFO and DEBUG."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


logger: logging.Logger = get_logger()
