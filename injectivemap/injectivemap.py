import logging
from collections.abc import Mapping

from injectivemap.mapping import InjectiveMapping

logger = logging.getLogger(__name__)

_missing = object()


def create_map():
    first = InjectiveMap()
    second = first.inverse
    return first, second


def _checked_pairs(items):
    for item in items:
        try:
            key, value = item
        except (TypeError, ValueError):
            raise TypeError('expected a (key, value) pair, got %r' % (item,))
        yield key, value


def _pairs(entries):
    if entries is None:
        return ()
    if isinstance(entries, Mapping):
        return entries.items()
    if isinstance(entries, tuple) and hasattr(entries, '_asdict'):
        return entries._asdict().items()
    if isinstance(entries, (str, bytes)):
        raise TypeError('cannot build an InjectiveMap from %s'
                        % type(entries).__name__)
    try:
        items = iter(entries)
    except TypeError:
        pass
    else:
        return _checked_pairs(items)
    if hasattr(entries, '__dict__') and not isinstance(entries, type):
        # a plain record: field names become the keys
        return vars(entries).items()
    raise TypeError('cannot build an InjectiveMap from %s'
                    % type(entries).__name__)


class InjectiveMap(InjectiveMapping):
    """Dict-like map with unique keys and unique values."""

    def __init__(self, entries=None):
        self._forward = {}
        self._reverse = {}
        self._inverse = None
        for key, value in _pairs(entries):
            self.set(key, value)

    @property
    def inverse(self):
        # shares both dicts with self, so either side can be mutated
        if self._inverse is None:
            other = type(self).__new__(type(self))
            other._forward = self._reverse
            other._reverse = self._forward
            other._inverse = self
            self._inverse = other
        return self._inverse

    def set(self, key, value):
        # both lookups hash before anything is removed; an unhashable
        # key or value leaves the map as it was
        old_value = self._forward.get(key, _missing)
        old_key = self._reverse.get(value, _missing)
        if old_value is not _missing:
            self.delete_key(key)
            if old_value != value:
                logger.debug('evicted %r -> %r', key, old_value)
        if old_key is not _missing and self.has_value(value):
            self.delete_value(value)
            logger.debug('evicted %r -> %r', old_key, value)
        self._forward[key] = value
        self._reverse[value] = key
        return self

    def has_key(self, key):
        return key in self._forward

    def has_value(self, value):
        return value in self._reverse

    def get_value(self, key, default=None):
        return self._forward.get(key, default)

    def get_key(self, value, default=None):
        return self._reverse.get(value, default)

    def delete_key(self, key):
        if key not in self._forward:
            return False
        value = self._forward.pop(key)
        del self._reverse[value]
        return True

    def delete_value(self, value):
        if value not in self._reverse:
            return False
        key = self._reverse.pop(value)
        del self._forward[key]
        return True

    def clear(self):
        self._forward.clear()
        self._reverse.clear()

    def copy(self):
        return type(self)(self._forward)

    def __copy__(self):
        return self.copy()

    def popitem(self):
        key, value = self._forward.popitem()
        del self._reverse[value]
        return key, value

    def __getitem__(self, key):
        return self._forward[key]

    def __setitem__(self, key, value):
        self.set(key, value)

    def __delitem__(self, key):
        if not self.delete_key(key):
            raise KeyError(key)

    def __iter__(self):
        return iter(self._forward)

    def __len__(self):
        return len(self._forward)

    def keys(self):
        return self._forward.keys()

    def values(self):
        # same order as keys(): both sides are always updated together
        return self._reverse.keys()

    def items(self):
        return self._forward.items()

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self._forward)
