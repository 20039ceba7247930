import logging
import threading

from fifocache.cache import FifoCache
from fifocache.factory import CacheFactory

logger = logging.getLogger("fifocache.provider")


class CacheProvider:
    """
    Holds one shared cache instance, created on first access. Construct a provider once when
    wiring up the application and pass it to everything that should share the cache.

    :param factory: Factory used to create the instance.
    """
    def __init__(self, factory: CacheFactory):
        self.factory = factory
        self._cache = None  # type: FifoCache
        self._lock = threading.Lock()

    @property
    def cache(self) -> FifoCache:
        cache = self._cache
        if cache is None:
            with self._lock:
                if self._cache is None:
                    logger.debug("Creating shared cache from {!r}".format(self.factory))
                    self._cache = self.factory.create_cache()
                cache = self._cache
        return cache

    @property
    def is_created(self) -> bool:
        return self._cache is not None

    def reset(self):
        """ Discard the shared instance. The next access to :attr:`cache` creates a new one. """
        with self._lock:
            self._cache = None
