from collections.abc import Mapping, MutableMapping

import pytest

from injectivemap.mapping import InjectiveMapping
from injectivemap.injectivemap import InjectiveMap


def number_names(names, table):
    # knows nothing about value-side lookups
    for name in names:
        if name not in table:
            table[name] = len(table)
    return table


def test_is_a_mutable_mapping():
    m = InjectiveMap()
    assert isinstance(m, InjectiveMapping)
    assert isinstance(m, MutableMapping)
    assert isinstance(m, Mapping)
    assert not isinstance({}, InjectiveMapping)

def test_interface_is_abstract():
    with pytest.raises(TypeError):
        InjectiveMapping()

    class Partial(InjectiveMapping):
        def __getitem__(self, key):
            raise KeyError(key)

    with pytest.raises(TypeError):
        Partial()

def test_plain_mapping_consumer():
    m = number_names(['a', 'b', 'a'], InjectiveMap())
    assert m == {'a': 0, 'b': 1}
    assert m.get_key(1) == 'b'

def test_plain_mapping_operations():
    m = InjectiveMap()
    m.update({'a': 1}, b=2)
    assert m.get('a') == 1
    assert m.get('nope') is None
    assert m.setdefault('c', 3) == 3
    assert m.setdefault('c', 4) == 3
    assert m.pop('b') == 2
    assert m.pop('b', 'gone') == 'gone'
    assert not m.has_value(2)
    assert len(m) == m.size == 2
    assert sorted(m) == ['a', 'c']
    assert dict(m) == {'a': 1, 'c': 3}

def test_update_keeps_bijection():
    m = InjectiveMap({'a': 1})
    m.update([('b', 1)])
    assert dict(m) == {'b': 1}
    assert m.get_key(1) == 'b'

def test_equality_with_dict():
    assert InjectiveMap({'a': 1}) == {'a': 1}
    assert InjectiveMap({'a': 1}) != {'a': 2}
    assert InjectiveMap([('a', 1)]) == InjectiveMap({'a': 1})

def test_size_is_read_only():
    m = InjectiveMap({'a': 1})
    with pytest.raises(AttributeError):
        m.size = 3

def test_type_name():
    assert type(InjectiveMap()).__name__ == 'InjectiveMap'
    assert repr(InjectiveMap()) == 'InjectiveMap({})'
