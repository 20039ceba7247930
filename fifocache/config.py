import copy
import json
import logging
from collections import OrderedDict

from fifocache.cache import check_capacity
from fifocache.errors import CacheError, InvalidCapacityError
from fifocache.policy import EvictionPolicy

logger = logging.getLogger("fifocache.config")

_MISSING = object()


class ConfigError(CacheError):
    def __init__(self, file, section, key, *args):
        super().__init__(file, section, key, *args)
        self.file = file
        self.section = section
        self.key = key

    @property
    def location(self) -> str:
        return ':'.join(str(part) for part in (self.file, self.section, self.key) if part)

    def __str__(self):
        return "Error in configuration {}".format(self.location)


class ConfigNameError(ConfigError):
    def __str__(self):
        return "Config sections and keys cannot start with '_' in {}".format(self.location)


class ConfigStructureError(ConfigError):
    """ The file, or one of its sections, is not a JSON object. """
    def __str__(self):
        return "Configuration {} must be a JSON object".format(self.location)


class ConfigKeyError(ConfigError, KeyError):
    def __str__(self):
        return "Configuration key not found: {}".format(self.location)


class ConfigConverterError(ConfigError):
    def __str__(self):
        return "Invalid value for configuration {}: {!s}".format(self.location, self.__cause__)


class CacheConfig:
    """
    Read-only JSON configuration for the cache and its logging. The file holds one object per
    section:

    .. code-block:: json
        {
            "cache": {"capacity": 128, "eviction_policy": "fifo"},
            "logging": {"level": "INFO", "file": "fifocache.log"}
        }

    :param filename: Path of the config file. If None, only ``defaults`` are used.
    :param defaults: Same structure as the file. Used for any key the file does not set.
    """
    def __init__(self, filename=None, defaults=None):
        self.filename = filename
        self._defaults = copy.deepcopy(defaults) if defaults else {}
        self._data = {}
        self.read()

    def read(self):
        """
        (Re)load the file, discarding previously loaded values.

        :raises OSError: Error opening file.
        :raises JSONDecodeError:
        :raises ConfigStructureError: file or section is not an object
        :raises ConfigNameError: section or key name starts with '_'
        """
        self._data = {}
        if self.filename is None:
            return

        logger.info("config({}) Reading file...".format(self.filename))
        with open(self.filename) as cfg_file:
            data = json.load(cfg_file, object_pairs_hook=OrderedDict)
        self._validate(data)
        self._data = data

    def _validate(self, data):
        if not isinstance(data, dict):
            raise ConfigStructureError(self.filename, None, None)
        for section, section_data in data.items():
            if section.startswith('_'):
                raise ConfigNameError(self.filename, section, None)
            if not isinstance(section_data, dict):
                raise ConfigStructureError(self.filename, section, None)
            bad_keys = [k for k in section_data if k.startswith('_')]
            if bad_keys:
                raise ConfigNameError(self.filename, section, bad_keys[0])

    def get(self, section: str, key: str, default=None, converter=None):
        """
        Look up ``section``/``key`` in the file, then in the constructor defaults, then fall back
        to ``default``. Collections are returned as-is, not copied.

        :param converter: Callable applied to the value found.
        :raises ConfigKeyError: not found anywhere and ``default`` is None
        :raises ConfigConverterError: converter raised (chained as the cause)
        """
        value = _MISSING
        for source in (self._data, self._defaults):
            value = source.get(section, {}).get(key, _MISSING)
            if value is not _MISSING:
                break
        else:
            if default is None:
                raise ConfigKeyError(self.filename, section, key)
            value = default
        logger.debug("config({!s}) {}:{} = {!r}".format(self, section, key, value))

        if converter is not None:
            try:
                value = converter(value)
            except Exception as e:
                raise ConfigConverterError(self.filename, section, key) from e
        return value

    def __str__(self):
        return '{!s}[ro]'.format(self.filename if self.filename is not None else '<defaults>')

    def __repr__(self):
        return 'CacheConfig<{!s}>'.format(self)


def log_level(value: str):
    """ Converter for the logging.level config. """
    levels = {
        'CRITICAL': logging.CRITICAL,
        'ERROR': logging.ERROR,
        'WARNING': logging.WARNING,
        'WARN': logging.WARNING,
        'INFO': logging.INFO,
        'DEBUG': logging.DEBUG,
    }
    return levels[value.upper()]


def capacity(value) -> int:
    """
    Converter for the cache.capacity config. Accepts ints, or strings of digits.

    :raises InvalidCapacityError:
    """
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError as e:
            raise InvalidCapacityError(value) from e
    return check_capacity(value)


def eviction_policy(value) -> EvictionPolicy:
    """
    Converter for the cache.eviction_policy config.

    :raises UnsupportedPolicyError:
    """
    return EvictionPolicy.parse(value)
