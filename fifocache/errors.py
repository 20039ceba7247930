class CacheError(Exception):
    pass


class InvalidConfiguration(CacheError, ValueError):
    """
    A cache could not be configured or constructed. No cache is produced when this is raised.
    """
    pass


class InvalidCapacityError(InvalidConfiguration):
    """
    Capacity is missing, not an integer, or less than 1.

    :param capacity: The rejected capacity value.
    """
    def __init__(self, capacity, *args):
        super().__init__(capacity, *args)
        self.capacity = capacity

    def __str__(self):
        return "Cache capacity must be a positive integer, got {!r}".format(self.capacity)


class UnsupportedPolicyError(InvalidConfiguration):
    """
    Eviction policy selector does not name a supported policy.

    :param policy: The rejected policy value.
    """
    def __init__(self, policy, *args):
        super().__init__(policy, *args)
        self.policy = policy

    def __str__(self):
        return "Unsupported eviction policy: {!r}".format(self.policy)
