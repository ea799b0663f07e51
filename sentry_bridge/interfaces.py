"""
sentry_bridge.interfaces
~~~~~~~~~~~~~~~~~~~~~~~~

Builders for the structured parts of an event. Each builder takes a mapping
of optional fields and returns a fresh payload in which only the fields that
were given (and are not None) are set; everything else is left for the
transport to default.

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import logging

from collections.abc import Mapping

from sentry_bridge.exceptions import BuildError
from sentry_bridge.utils.serializer import normalize

__all__ = ('Interface', 'User', 'Request', 'build_user', 'build_request')


class Interface(object):
    """
    - fields: copied as given
    - bags: passed through ``normalize`` first
    - others: name of a bag whose keys are merged into the payload itself
    """
    name = None
    fields = ()
    bags = ()
    others = None

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    @property
    def keys(self):
        keys = self.fields + self.bags
        if self.others:
            keys += (self.others,)
        return keys

    def check(self, data):
        if not isinstance(data, Mapping):
            raise BuildError(
                'expected a mapping, got %s' % type(data).__name__,
                field=self.name)

        unknown = [key for key in data if key not in self.keys]
        if unknown:
            raise BuildError(
                'unknown keys %s' % ', '.join(sorted(repr(k) for k in unknown)),
                field=self.name)

    def make_payload(self):
        return {}

    def build(self, data):
        self.check(data)
        payload = self.make_payload()

        for key in self.fields:
            value = data.get(key)
            if value is not None:
                payload[key] = value

        for key in self.bags:
            value = data.get(key)
            if value is not None:
                payload[key] = normalize(value)

        if self.others:
            other = data.get(self.others)
            if other is not None:
                self.merge_others(payload, other)

        return payload

    def merge_others(self, payload, other):
        if not isinstance(other, Mapping):
            raise BuildError(
                'expected a mapping for %r, got %s' % (
                    self.others, type(other).__name__),
                field=self.name)

        for key, value in normalize(other).items():
            if key in payload or key in self.keys:
                self.logger.debug(
                    'Ignoring %r in %s.%s, it shadows a known field',
                    key, self.name, self.others)
                continue
            payload[key] = value


class User(Interface):
    """
    The user the event happened for.

    >>> build_user({'id': 42, 'email': 'jane@example.com'})
    {'email': 'jane@example.com', 'id': 42}
    """
    name = 'user'
    fields = ('email', 'id', 'username', 'ip_address')
    others = 'other'


class Request(Interface):
    """
    The HTTP request that was being handled. ``data`` is the request body
    and may be either a mapping or raw text.
    """
    name = 'request'
    fields = ('url', 'method', 'query_string')
    bags = ('data', 'cookies', 'headers', 'env')
    others = 'other'


_user = User()
_request = Request()


def build_user(data):
    return _user.build(data)


def build_request(data):
    return _request.build(data)
