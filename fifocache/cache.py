import logging
import threading
from collections import OrderedDict
from typing import Iterator, List, NamedTuple, Optional, Tuple

from fifocache.errors import InvalidCapacityError

logger = logging.getLogger("fifocache.cache")


class Lookup(NamedTuple):
    """
    Result of :meth:`FifoCache.lookup`. Evaluates true only if the key was found, so a stored
    value of 0 or -1 is still distinguishable from a miss.
    """
    found: bool
    value: Optional[int] = None

    def __bool__(self):
        return self.found

    def __str__(self):
        return "found({!r})".format(self.value) if self.found else "not_found"


Lookup.NOT_FOUND = Lookup(False)


def check_capacity(capacity) -> int:
    """
    Validate a cache capacity.

    :raises InvalidCapacityError: capacity is not an int, or is less than 1
    """
    # bool is an int subclass, but True is not a meaningful capacity
    if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 1:
        raise InvalidCapacityError(capacity)
    return capacity


class FifoCache:
    """
    Fixed-size cache, evicting the oldest inserted item when a new key is added while full.

    Updating the value of a key already in the cache does not change its position in the
    eviction order, and neither do reads. All operations are safe to call from multiple threads.

    :param capacity: Maximum number of entries. Must be an int of at least 1.
    :raises InvalidCapacityError: invalid capacity

    .. attribute:: capacity

        ``int`` - Maximum number of entries. Read-only.
    """
    def __init__(self, capacity: int):
        self._capacity = check_capacity(capacity)
        # insertion order of the OrderedDict is the eviction order, oldest first
        self._data = OrderedDict()  # type: OrderedDict[str, int]
        self._lock = threading.RLock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def put(self, key: str, value: int):
        """
        Insert or update a value. If ``key`` is new and the cache is full, the oldest entry is
        evicted first. Updating an existing key never evicts.
        """
        with self._lock:
            if key in self._data:
                self._data[key] = value
                return
            if len(self._data) >= self._capacity:
                old_key, old_value = self._data.popitem(last=False)
                logger.debug("Evicted {!r} (value={!r}) to make room for {!r}"
                    .format(old_key, old_value, key))
            self._data[key] = value

    def get(self, key: str) -> Optional[int]:
        """ Return the value for ``key``, or None if it is not in the cache. """
        with self._lock:
            return self._data.get(key)

    def lookup(self, key: str) -> Lookup:
        with self._lock:
            try:
                return Lookup(True, self._data[key])
            except KeyError:
                return Lookup.NOT_FOUND

    def remove(self, key: str):
        """ Remove ``key`` from the cache. Does nothing if it is not present. """
        with self._lock:
            self._data.pop(key, None)

    def clear(self):
        with self._lock:
            self._data.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._data)

    def contains_key(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def duplicate(self) -> 'FifoCache':
        """
        Create an independent copy of this cache, with the same capacity, contents and eviction
        order. Changes to either cache afterwards are not seen by the other.
        """
        with self._lock:
            dup = type(self)(self._capacity)
            dup._data = OrderedDict(self._data)
        return dup

    def keys(self) -> List[str]:
        """ Snapshot of the keys in eviction order, oldest first. """
        with self._lock:
            return list(self._data.keys())

    def items(self) -> List[Tuple[str, int]]:
        """ Snapshot of the (key, value) pairs in eviction order, oldest first. """
        with self._lock:
            return list(self._data.items())

    def __copy__(self):
        return self.duplicate()

    def __deepcopy__(self, memo):
        # keys are str and values int, so a copy of the mapping is already a deep copy
        return self.duplicate()

    def __getitem__(self, key: str) -> int:
        with self._lock:
            return self._data[key]

    def __setitem__(self, key: str, value: int):
        self.put(key, value)

    def __delitem__(self, key: str):
        with self._lock:
            del self._data[key]

    def __contains__(self, key):
        return self.contains_key(key)

    def __len__(self):
        return self.size()

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self):
        return "FifoCache<capacity={:d}, {!r}>".format(self._capacity, dict(self.items()))
