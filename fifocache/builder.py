import logging

from fifocache.cache import FifoCache, check_capacity
from fifocache.errors import InvalidCapacityError
from fifocache.policy import EvictionPolicy

logger = logging.getLogger("fifocache.builder")


class CacheBuilder:
    """
    Step-by-step configuration of a cache. Setters return the builder, so calls can be chained:

    >>> cache = CacheBuilder().set_capacity(3).set_eviction_policy("FIFO").build()

    The eviction policy defaults to FIFO. Every :meth:`build` call produces a new, independent
    cache.
    """
    def __init__(self):
        self.capacity = None
        self.eviction_policy = EvictionPolicy.FIFO

    @classmethod
    def from_config(cls, config) -> 'CacheBuilder':
        """
        Create a builder initialised from the ``cache`` section of a configuration.

        :param config: A :cls:`fifocache.config.CacheConfig`.
        :raises ConfigKeyError: capacity or eviction_policy not configured
        :raises ConfigConverterError: configured values are invalid (the original
            InvalidConfiguration error is the cause)
        """
        from fifocache import config as cfg
        return cls()\
            .set_capacity(config.get("cache", "capacity", converter=cfg.capacity))\
            .set_eviction_policy(
                config.get("cache", "eviction_policy", converter=cfg.eviction_policy))

    def set_capacity(self, capacity: int) -> 'CacheBuilder':
        self.capacity = capacity
        return self

    def set_eviction_policy(self, eviction_policy) -> 'CacheBuilder':
        """
        :param eviction_policy: An :cls:`EvictionPolicy` or its name.
        :raises UnsupportedPolicyError: policy not recognised
        """
        self.eviction_policy = EvictionPolicy.parse(eviction_policy)
        return self

    def build(self) -> FifoCache:
        """
        :raises InvalidCapacityError: capacity was not set or is invalid
        """
        if self.capacity is None:
            raise InvalidCapacityError(None)
        check_capacity(self.capacity)
        logger.debug("Building {!s} cache with capacity {:d}"
            .format(self.eviction_policy, self.capacity))
        if self.eviction_policy is EvictionPolicy.FIFO:
            return FifoCache(self.capacity)
        raise AssertionError("Unhandled eviction policy {!r}".format(self.eviction_policy))
