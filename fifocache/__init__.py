# fifocache
from .cache import FifoCache, Lookup
from .builder import CacheBuilder
from .errors import CacheError, InvalidConfiguration, InvalidCapacityError, \
    UnsupportedPolicyError
from .factory import CacheFactory, FifoCacheFactory
from .policy import EvictionPolicy
from .provider import CacheProvider

__release__ = "1.0"  # release stream, usually major.minor only
__version__ = "1.0.0"

cfg_defaults = {
    "cache": {
        "capacity": 128,
        "eviction_policy": "fifo"
    },
    "logging": {
        "level": "INFO",
        "file": "",
        "max_size_kb": 0,
        "max_backups": 0,
        "gzip_backups": True,
        "tags": {}
    }
}
