#!/usr/bin/env python
# coding=utf8

import sys
import logging

import fifocache
from fifocache import runner
from fifocache.config import CacheConfig, ConfigError
from fifocache.errors import InvalidConfiguration
from fifocache.logging import setup_logging, exc_log_str


def load_config():
    try:
        filename = sys.argv[2]
    except IndexError:
        filename = None

    try:
        return CacheConfig(filename, defaults=fifocache.cfg_defaults)
    except OSError as e:
        print(str(e), file=sys.stderr)
        sys.exit(runner.ErrorCodes.CFG_FILE)
    except (ValueError, ConfigError) as e:  # JSONDecodeError is a ValueError
        print("[ERROR] {}".format(exc_log_str(e)), file=sys.stderr)
        sys.exit(runner.ErrorCodes.CFG_INVALID)


def run(config, debug=False):
    setup_logging(logging.getLogger(), config, debug=debug)
    try:
        return runner.run_demo(config)
    except (InvalidConfiguration, ConfigError) as e:
        print("[ERROR] {}".format(exc_log_str(e)), file=sys.stderr)
        return runner.ErrorCodes.CFG_INVALID


if __name__ == '__main__':
    try:
        cmd = sys.argv[1].lower()
    except IndexError:
        cmd = None

    if cmd == 'demo':
        sys.exit(run(load_config()))

    elif cmd == 'debug':
        print("Starting in debug mode...")
        sys.exit(run(load_config(), debug=True))

    else:
        print("Usage: ./FifoCache.py <demo|debug|help> [config.json]\n")
