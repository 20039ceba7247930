import enum

from fifocache.errors import UnsupportedPolicyError


class EvictionPolicy(enum.Enum):
    """ Eviction policies a cache can be configured with. """
    FIFO = "fifo"

    @classmethod
    def parse(cls, value) -> 'EvictionPolicy':
        """
        Convert a policy selector to an :cls:`EvictionPolicy`. Strings are matched
        case-insensitively, ignoring surrounding whitespace.

        :raises UnsupportedPolicyError: value does not name a known policy
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError as e:
                raise UnsupportedPolicyError(value) from e
        raise UnsupportedPolicyError(value)

    def __str__(self):
        return self.value.upper()
