import gzip
import logging
import logging.handlers
import os

LOG_FORMAT = '[%(asctime)s] (%(levelname)s) %(name)s: %(message)s'
FILE_LOG_FORMAT = LOG_FORMAT + ' [in %(pathname)s:%(lineno)d]'


class LoggingInfo:
    is_setup = False
    cfg_level = logging.INFO
    cfg_packages = {}
    file_handler = None  # type: logging.handlers.RotatingFileHandler
    console_handler = None  # type: logging.StreamHandler


_logging_info = LoggingInfo()


def setup_logging(logger, config, *, debug=False, console=True):
    """
    Configure ``logger`` (usually the root logger) from the ``logging`` section of a
    :cls:`fifocache.config.CacheConfig`.

    The file handler is only added if ``logging.file`` is set. The console never shows more than
    INFO unless ``debug`` is set.

    :param debug: Force DEBUG level on the logger and all handlers. Implies ``console``.
    :param console: Add a console handler.
    """
    from fifocache.config import log_level

    if debug:
        level = console_level = logging.DEBUG
    else:
        level = config.get("logging", "level", converter=log_level)
        console_level = max(level, logging.INFO)
    logger.setLevel(level)
    _logging_info.cfg_level = level

    # per-logger levels, never more verbose than the configured level
    tags = dict(config.get("logging", "tags", {}))
    for name, tag_level in tags.items():
        logging.getLogger(name).setLevel(max(log_level(tag_level), level))
    _logging_info.cfg_packages = tags

    filename = config.get("logging", "file", "")
    if filename:
        _logging_info.file_handler = _add_file_handler(logger, filename, config)
    if console or debug:
        _logging_info.console_handler = _add_console_handler(logger, console_level)

    _logging_info.is_setup = True


def _add_file_handler(logger, filename, config) -> logging.handlers.RotatingFileHandler:
    handler = logging.handlers.RotatingFileHandler(
        filename,
        maxBytes=config.get("logging", "max_size_kb", 0) * 1024,
        backupCount=config.get("logging", "max_backups", 0)
    )
    if config.get("logging", "gzip_backups", False):
        handler.namer = gzip_namer
        handler.rotator = gzip_rotator
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    logger.addHandler(handler)
    return handler


def _add_console_handler(logger, level) -> logging.StreamHandler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return handler


def get_logging_info() -> LoggingInfo:
    return _logging_info


def gzip_rotator(source, dest):
    """ Rotator for RotatingFileHandler: compress the rotated-out log into ``dest``. """
    with open(source, "rb") as sf, gzip.open(dest, 'wb') as df:
        df.writelines(sf)
    os.remove(source)


def gzip_namer(name):
    return name + '.gz'


def exc_log_str(exception) -> str:
    """ Format an exception as a one-line string, without the stack trace. """
    return "{}: {!s}".format(type(exception).__name__, exception)
