"""
sentry_bridge.utils.serializer.manager
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging

__all__ = ('register', 'normalize')

logger = logging.getLogger('sentry.errors.serializer')

CYCLE_MARKER = '<...>'


class SerializationManager(object):
    logger = logger

    def __init__(self):
        self.__registry = []

    @property
    def serializers(self):
        for serializer in self.__registry:
            yield serializer

    def register(self, serializer):
        if serializer not in self.__registry:
            self.__registry.append(serializer)
        return serializer


class Transformer(object):
    """
    Walks a single value. Mappings are walked with an explicit stack, so
    nesting depth is bounded by memory rather than the interpreter's
    recursion limit.

    ``context`` holds the ids of the containers currently being serialized,
    so a container that holds itself is replaced with a marker instead of
    being walked forever.
    """
    logger = logger

    def __init__(self, manager):
        self.manager = manager
        self.context = {}
        self.serializers = []
        for serializer in manager.serializers:
            self.serializers.append(serializer(self))

    def get_serializer(self, value):
        for serializer in self.serializers:
            if serializer.can(value):
                return serializer
        return None

    def enter(self, value):
        """
        Starts serializing ``value``. Returns the result and, for containers,
        a frame ``(objid, result, items)`` whose items still have to be
        transformed into ``result``.
        """
        serializer = self.get_serializer(value)
        if serializer is None:
            # nothing to convert, hand the value back untouched
            return value, None

        objid = id(value)
        if objid in self.context:
            self.logger.debug('Cycle detected in %s', type(value).__name__)
            return CYCLE_MARKER, None
        self.context[objid] = 1

        try:
            result, items = serializer.expand(value)
        except Exception:
            del self.context[objid]
            raise

        if items is None:
            del self.context[objid]
            return result, None
        return result, (objid, result, iter(items))

    def transform(self, value):
        result, frame = self.enter(value)
        if frame is None:
            return result

        stack = [frame]
        while stack:
            objid, out, items = stack[-1]
            for key, item in items:
                out[key], frame = self.enter(item)
                if frame is not None:
                    stack.append(frame)
                    break
            else:
                stack.pop()
                del self.context[objid]
        return result


manager = SerializationManager()
register = manager.register


def normalize(value, manager=manager):
    """
    Returns a copy of ``value`` in which every mapping, at any depth, is a
    plain ``dict`` with text keys. Anything the registered serializers do
    not handle is returned as is.

    >>> normalize({'a': MappingProxyType({1: 'b'})})
    {'a': {'1': 'b'}}
    """
    return Transformer(manager).transform(value)
