from abc import ABC, abstractmethod

from fifocache.cache import FifoCache, check_capacity


class CacheFactory(ABC):
    """ Creates caches of a fixed configuration. """
    @abstractmethod
    def create_cache(self) -> FifoCache:
        pass


class FifoCacheFactory(CacheFactory):
    """
    :param capacity: Capacity of the caches created.
    :raises InvalidCapacityError: invalid capacity
    """
    def __init__(self, capacity: int):
        self.capacity = check_capacity(capacity)

    def create_cache(self) -> FifoCache:
        return FifoCache(self.capacity)

    def __repr__(self):
        return 'FifoCacheFactory<capacity={:d}>'.format(self.capacity)
