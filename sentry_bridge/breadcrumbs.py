"""
sentry_bridge.breadcrumbs
~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from collections.abc import Mapping

from sentry_bridge.exceptions import BuildError
from sentry_bridge.interfaces import Interface
from sentry_bridge.levels import to_severity
from sentry_bridge.utils.dates import current_datetime

__all__ = ('Breadcrumb', 'build_breadcrumb')


class Breadcrumb(Interface):
    """
    A trail entry describing what the application did before the event.

    Breadcrumbs are stamped with the time they were built unless a
    ``timestamp`` is passed in, so a list of them sorts in the order it was
    given.

    ``sentry_sdk`` sorts breadcrumbs by timestamp before sending them. An
    explicit ``timestamp`` therefore decides the crumb's position on the
    wire, and crumbs given with timestamps out of order arrive sorted.
    """
    name = 'breadcrumb'
    fields = ('type', 'message', 'category', 'timestamp')
    bags = ('data',)

    @property
    def keys(self):
        return super(Breadcrumb, self).keys + ('level',)

    def make_payload(self):
        timestamp = current_datetime()
        if timestamp is None:
            return {}
        return {'timestamp': timestamp}

    def build(self, data):
        payload = super(Breadcrumb, self).build(data)

        if payload.get('data') is not None and \
           not isinstance(payload['data'], Mapping):
            raise BuildError(
                'expected a mapping for \'data\', got %s' % (
                    type(payload['data']).__name__),
                field=self.name)

        level = data.get('level')
        if level is not None:
            payload['level'] = to_severity(level)
        return payload


_breadcrumb = Breadcrumb()


def build_breadcrumb(data):
    return _breadcrumb.build(data)
