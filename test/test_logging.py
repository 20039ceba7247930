import copy
import gzip
import logging
import logging.handlers

import pytest

import fifocache
from fifocache.config import CacheConfig
from fifocache.logging import setup_logging, get_logging_info, gzip_namer, gzip_rotator, \
    exc_log_str
from fifocache.errors import InvalidCapacityError


@pytest.fixture
def logger():
    lg = logging.getLogger('fifocache_test_logging')
    yield lg
    for h in list(lg.handlers):
        lg.removeHandler(h)
        h.close()
    lg.setLevel(logging.NOTSET)


def make_config(**kwargs) -> CacheConfig:
    defaults = copy.deepcopy(fifocache.cfg_defaults)
    defaults['logging'].update(kwargs)
    return CacheConfig(defaults=defaults)


# noinspection PyShadowingNames
class TestSetupLogging:
    def test_console_only(self, logger):
        setup_logging(logger, make_config(level='WARNING'))
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        ch = logger.handlers[0]
        assert isinstance(ch, logging.StreamHandler)
        assert ch.level == logging.WARNING
        assert get_logging_info().console_handler is ch
        assert get_logging_info().is_setup

    def test_console_level_capped_at_info(self, logger):
        setup_logging(logger, make_config(level='DEBUG'))
        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.INFO

    def test_debug(self, logger):
        setup_logging(logger, make_config(level='ERROR'), debug=True, console=False)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.DEBUG

    def test_no_console(self, logger):
        setup_logging(logger, make_config(), console=False)
        assert logger.handlers == []

    def test_tags(self, logger):
        setup_logging(logger, make_config(level='INFO', tags={
            'fifocache_test_logging.quiet': 'ERROR',
            'fifocache_test_logging.loud': 'DEBUG',
        }), console=False)
        assert logging.getLogger('fifocache_test_logging.quiet').level == logging.ERROR
        # never more verbose than the configured level
        assert logging.getLogger('fifocache_test_logging.loud').level == logging.INFO

    def test_file_handler(self, logger, tmp_path):
        filename = str(tmp_path / 'cache.log')
        setup_logging(logger, make_config(file=filename, max_size_kb=4, max_backups=2,
                                          gzip_backups=True), console=False)
        fh = logger.handlers[0]
        assert isinstance(fh, logging.handlers.RotatingFileHandler)
        assert fh.maxBytes == 4096
        assert fh.backupCount == 2
        assert fh.namer is gzip_namer
        assert fh.rotator is gzip_rotator
        assert get_logging_info().file_handler is fh

        logger.warning("hello")
        fh.flush()
        with open(filename) as f:
            assert "(WARNING) fifocache_test_logging: hello" in f.read()

    def test_file_handler_no_gzip(self, logger, tmp_path):
        setup_logging(logger, make_config(file=str(tmp_path / 'cache.log'), gzip_backups=False),
                      console=False)
        assert logger.handlers[0].namer is None


def test_gzip_rotator(tmp_path):
    source = tmp_path / 'cache.log'
    source.write_bytes(b"line one\nline two\n")
    dest = gzip_namer(str(tmp_path / 'cache.log.1'))
    assert dest.endswith('cache.log.1.gz')
    gzip_rotator(str(source), dest)
    assert not source.exists()
    with gzip.open(dest, 'rb') as f:
        assert f.read() == b"line one\nline two\n"


def test_exc_log_str():
    assert exc_log_str(InvalidCapacityError(0)) == \
        "InvalidCapacityError: Cache capacity must be a positive integer, got 0"
