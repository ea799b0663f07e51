import enum
import sys

from collections import OrderedDict
from types import MappingProxyType

import pytest

from sentry_bridge.exceptions import ConversionError
from sentry_bridge.utils.serializer import (
    MappingSerializer, Serializer, normalize)
from sentry_bridge.utils.serializer.manager import (
    CYCLE_MARKER, SerializationManager)
from sentry_bridge.utils.testutils import TestCase


class Color(enum.Enum):
    RED = 1


def iter_mappings(value):
    pending = [value]
    while pending:
        mapping = pending.pop()
        yield mapping
        pending.extend(v for v in mapping.values() if isinstance(v, dict))


class NormalizeTest(TestCase):
    def test_scalars_pass_through(self):
        for value in (1, 1.5, True, 'text', b'bytes', None):
            assert normalize(value) is value

    def test_sequences_pass_through(self):
        value = [{'a': 1}, (1, 2)]
        assert normalize(value) is value

    def test_nested_mappings_become_dicts(self):
        value = {
            'a': MappingProxyType({
                'b': OrderedDict([('c', {'d': 1})]),
            }),
        }
        result = normalize(value)

        self.assertEqual(result, {'a': {'b': {'c': {'d': 1}}}})
        for mapping in iter_mappings(result):
            assert type(mapping) is dict

    def test_keys_become_text(self):
        result = normalize({
            1: 'one',
            b'raw': 2,
            Color.RED: 3,
            (1, 2): 4,
            'plain': {5: 'five'},
        })

        self.assertEqual(result, {
            '1': 'one',
            'raw': 2,
            'RED': 3,
            '(1, 2)': 4,
            'plain': {'5': 'five'},
        })

    def test_leaf_values_are_kept(self):
        leaf = object()
        items = [1, 2]
        result = normalize({'a': {'leaf': leaf, 'items': items}})

        assert result['a']['leaf'] is leaf
        assert result['a']['items'] is items

    def test_arbitrary_depth(self):
        levels = sys.getrecursionlimit() * 5
        value = {'leaf': True}
        for n in range(levels):
            value = MappingProxyType({n: value})

        result = normalize(value)

        depth = 0
        for mapping in iter_mappings(result):
            assert type(mapping) is dict
            assert all(isinstance(k, str) for k in mapping)
            depth += 1
        assert depth == levels + 1

        innermost = result
        for n in reversed(range(levels)):
            innermost = innermost[str(n)]
        assert innermost == {'leaf': True}

    def test_cycle_deep_down_is_replaced(self):
        root = {}
        value = root
        for _ in range(sys.getrecursionlimit() * 2):
            value['next'] = {}
            value = value['next']
        value['root'] = root

        result = normalize(root)

        while 'next' in result:
            result = result['next']
        assert result == {'root': CYCLE_MARKER}

    def test_input_is_not_mutated(self):
        inner = {1: 'x'}
        value = {'a': inner}

        result = normalize(value)

        assert value == {'a': {1: 'x'}}
        assert value['a'] is inner
        assert result is not value
        assert result['a'] is not inner

    def test_idempotent(self):
        value = {
            'a': OrderedDict([(1, {'b': [1, 2]})]),
            Color.RED: MappingProxyType({'c': None}),
        }
        once = normalize(value)
        assert normalize(once) == once

    def test_cycle_is_replaced(self):
        value = {'a': 1}
        value['self'] = value

        assert normalize(value) == {'a': 1, 'self': CYCLE_MARKER}

    def test_shared_mapping_is_not_a_cycle(self):
        shared = {'x': 1}
        result = normalize({'a': shared, 'b': shared})
        assert result == {'a': {'x': 1}, 'b': {'x': 1}}

    def test_unconvertible_key_raises(self):
        class BadKey(object):
            def __str__(self):
                raise RuntimeError('nope')

        with pytest.raises(ConversionError):
            normalize({'a': {BadKey(): 1}})


class CustomSerializerTest(TestCase):
    def test_registered_serializer_is_used(self):
        class SetSerializer(Serializer):
            types = (set, frozenset)

            def serialize(self, value):
                return sorted(value)

        manager = SerializationManager()
        manager.register(MappingSerializer)
        manager.register(SetSerializer)

        result = normalize({'a': {'b': {3, 1, 2}}}, manager=manager)
        assert result == {'a': {'b': [1, 2, 3]}}

    def test_serializer_can_recurse(self):
        class PairSerializer(Serializer):
            types = (tuple,)

            def serialize(self, value):
                return [self.recurse(v) for v in value]

        manager = SerializationManager()
        manager.register(MappingSerializer)
        manager.register(PairSerializer)

        value = {'a': ({1: 'x'}, 2)}
        value['a'][0]['back'] = value

        result = normalize(value, manager=manager)
        assert result == {'a': [{'1': 'x', 'back': CYCLE_MARKER}, 2]}

    def test_register_is_idempotent(self):
        manager = SerializationManager()
        manager.register(MappingSerializer)
        manager.register(MappingSerializer)
        assert list(manager.serializers) == [MappingSerializer]
