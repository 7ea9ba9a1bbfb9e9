"""
flatkeys logger module

Log records go to stderr, stdout is reserved for the transformed json.
"""
import logging
import sys

from flatkeys.errors import ConfigurationError

LOGGER_NAME = 'flatkeys'
LOG_FORMAT = '%(name)s: %(levelname)s: %(message)s'


def resolve_level(level):
    """ Log level as int, accepts names like "debug" """
    if level is None or isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    ConfigurationError.invariant(isinstance(resolved, int), f'Unknown log level: {level}')
    return resolved


def get_logger(name=LOGGER_NAME, level=logging.WARNING, stream=None):
    """
    Get flatkeys logger with a single console handler.
    Later calls only change the level of an already configured logger.
    :param name: logger name
    :param level: level or level name, None silences the logger
    :param stream: console stream, stderr by default
    :return: Logger
    """
    logger = logging.getLogger(name)
    level = resolve_level(level)
    if logger.handlers:
        if level is not None:
            logger.setLevel(level)
        return logger

    if level is None:
        logger.addHandler(logging.NullHandler())
        return logger

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.setLevel(level)
    logger.addHandler(handler)
    return logger
