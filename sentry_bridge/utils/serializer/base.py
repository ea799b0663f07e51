"""
sentry_bridge.utils.serializer.base
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from collections.abc import Mapping

from sentry_bridge.utils.encoding import to_text
from sentry_bridge.utils.serializer.manager import register

__all__ = ('Serializer', 'MappingSerializer')


class Serializer(object):
    types = ()

    def __init__(self, manager):
        self.manager = manager

    def can(self, value):
        """
        Given ``value``, return a boolean describing whether this
        serializer can operate on the given type
        """
        return isinstance(value, self.types)

    def serialize(self, value):
        return value

    def expand(self, value):
        """
        Returns ``(result, items)``. ``items`` is None for a finished value,
        otherwise ``(key, value)`` pairs the transformer stores into
        ``result`` once it has transformed each value.
        """
        return self.serialize(value), None

    def recurse(self, value):
        """
        Given ``value``, recurse (using the parent transformer) to handle
        coercing of nested values.
        """
        return self.manager.transform(value)


class MappingSerializer(Serializer):
    types = (Mapping,)

    def make_key(self, key):
        if isinstance(key, str):
            return key
        return to_text(key)

    def expand(self, value):
        return {}, [(self.make_key(k), v) for k, v in value.items()]


register(MappingSerializer)
