"""
sentry_bridge.utils.testutils
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2013 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import uuid

from unittest import TestCase as BaseTestCase

from sentry_bridge.base import Client
from sentry_bridge.exceptions import TransportError
from sentry_bridge.transport.base import Transport


class InMemoryTransport(Transport):
    """
    Keeps captured ``(event, hint)`` pairs in ``events`` instead of sending
    them anywhere.
    """

    def __init__(self):
        self.events = []
        self.dsn = None
        self.options = None
        self.initialized = False
        self.closed = False

    def init(self, dsn, options):
        self.dsn = dsn
        self.options = options
        self.initialized = True
        self.closed = False

    def capture(self, event, hint=None):
        if not self.initialized or self.closed:
            raise TransportError('Transport is not initialized')
        event.setdefault('event_id', uuid.uuid4().hex)
        self.events.append((event, hint or {}))
        return event['event_id']

    def close(self):
        self.closed = True


class TestCase(BaseTestCase):
    dsn = 'https://public@sentry.example.com/1'

    def make_client(self, **options):
        """
        Returns a client that keeps its events in ``client.transport.events``.
        """
        return Client(self.dsn, transport=InMemoryTransport(), **options)
