import abc
import types
from collections.abc import MutableMapping


class InjectiveMapping(MutableMapping):
    """A mutable mapping whose values are as unique as its keys."""

    @abc.abstractmethod
    def set(self, key, value):
        """Map key to value, dropping whatever either side was mapped to."""
        raise NotImplementedError

    @abc.abstractmethod
    def has_key(self, key):
        raise NotImplementedError

    @abc.abstractmethod
    def has_value(self, value):
        raise NotImplementedError

    @abc.abstractmethod
    def get_value(self, key, default=None):
        raise NotImplementedError

    @abc.abstractmethod
    def get_key(self, value, default=None):
        raise NotImplementedError

    @abc.abstractmethod
    def delete_key(self, key):
        """Remove the pair holding key. Returns False if there was none."""
        raise NotImplementedError

    @abc.abstractmethod
    def delete_value(self, value):
        """Remove the pair holding value. Returns False if there was none."""
        raise NotImplementedError

    def __contains__(self, key):
        return self.has_key(key)

    def delete(self, key):
        return self.delete_key(key)

    @property
    def size(self):
        return len(self)

    def entries(self):
        return iter(self.items())

    def for_each(self, callback, context=None):
        # callback may mutate the mapping; pairs it removes are not visited
        if context is not None:
            callback = types.MethodType(callback, context)
        for key in list(self.keys()):
            if not self.has_key(key):
                continue
            callback(self.get_value(key), key)
