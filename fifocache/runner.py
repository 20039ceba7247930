import logging

from fifocache import config as cfg
from fifocache.builder import CacheBuilder
from fifocache.cache import FifoCache
from fifocache.config import CacheConfig
from fifocache.factory import FifoCacheFactory
from fifocache.provider import CacheProvider

logger = logging.getLogger("fifocache.runner")

DEMO_CAPACITY = 3


class ErrorCodes:
    OK = 0
    ERROR = 1
    CFG_FILE = 17
    CFG_INVALID = 18


def _producer(provider: CacheProvider, key: str, value: int):
    provider.cache.put(key, value)


def _consumer(provider: CacheProvider, key: str):
    return provider.cache.lookup(key)


def run_demo(config: CacheConfig, out=print) -> int:
    """
    Walk through the basic cache operations, duplication and shared-instance wiring, writing
    each step to ``out``.

    The eviction policy is taken from the configuration. The first part always uses a capacity
    of :data:`DEMO_CAPACITY` so that eviction is visible; the shared cache uses the configured
    capacity.

    :raises InvalidConfiguration: (as the cause of a ConfigConverterError) bad cache config
    """
    cache = CacheBuilder.from_config(config).set_capacity(DEMO_CAPACITY).build()
    logger.info("Demo cache: {!r}".format(cache))

    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("c", 3)
    out("get(a) = {!s}".format(cache.lookup("a")))

    cache.put("d", 4)  # evicts "a"
    out("put(d, 4)")
    out("get(a) = {!s}".format(cache.lookup("a")))
    out("get(b) = {!s}".format(cache.lookup("b")))

    # the copy is full too, so this evicts "b" from the copy only
    dup = cache.duplicate()  # type: FifoCache
    dup.put("e", 5)
    out("duplicate: put(e, 5)")
    out("duplicate: get(b) = {!s}".format(dup.lookup("b")))
    out("duplicate: get(e) = {!s}".format(dup.lookup("e")))
    out("original: get(b) = {!s}".format(cache.lookup("b")))
    out("original: get(e) = {!s}".format(cache.lookup("e")))

    cache.remove("b")
    out("remove(b)")
    out("get(b) = {!s}".format(cache.lookup("b")))
    cache.put("e", 5)
    out("put(e, 5)")
    out("size() = {:d}".format(cache.size()))

    factory = FifoCacheFactory(config.get("cache", "capacity", converter=cfg.capacity))
    provider = CacheProvider(factory)
    _producer(provider, "x", 10)
    out("shared: get(x) = {!s}".format(_consumer(provider, "x")))
    out("shared: size() = {:d}".format(provider.cache.size()))

    return ErrorCodes.OK
