"""
sentry_bridge.base
~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import logging
import os

from collections.abc import Mapping

from sentry_bridge.conf import defaults, load_options
from sentry_bridge.events import build_event
from sentry_bridge.exceptions import ConfigurationError
from sentry_bridge.transport.sdk import SentrySdkTransport

__all__ = ('Client', 'init', 'close', 'send_event')

# the process-wide client, set by ``init``
Bridge = None


class Client(object):
    """
    Builds events from plain mappings and hands them to a transport.

    Will read the DSN from the environment variable ``SENTRY_DSN`` if none
    is given.

    >>> from sentry_bridge import Client

    >>> client = Client('https://public_key@sentry.example.com/1',
    >>>                 environment='production',
    >>>                 in_app_excludes=['vendor.lib'])

    >>> event_id = client.send_event({
    >>>     'message': {'message': 'oh no'},
    >>>     'level': 'warning',
    >>> })

    >>> client.close()
    """
    logger = logging.getLogger('sentry_bridge')

    def __init__(self, dsn=None, transport=None, **options):
        self.configure_logging()

        self.error_logger = logging.getLogger('sentry.errors')

        if dsn is None and os.environ.get(defaults.DSN_ENV_VAR):
            msg = "Configuring sentry_bridge from environment variable '%s'"
            self.logger.debug(msg, defaults.DSN_ENV_VAR)
            dsn = os.environ[defaults.DSN_ENV_VAR]

        self.dsn = dsn
        self.options = load_options(options)

        if self.options.get('debug'):
            self.logger.setLevel(logging.DEBUG)

        if not self.dsn:
            self.logger.info(
                'sentry_bridge is not configured (no DSN was given), events '
                'will not be delivered.')

        if transport is None:
            transport = SentrySdkTransport()
        self.transport = transport
        self.transport.init(self.dsn, self.options)
        self.closed = False

    def configure_logging(self):
        for name in ('sentry_bridge', 'sentry'):
            logger = logging.getLogger(name)
            if logger.handlers:
                continue
            logger.addHandler(logging.StreamHandler())
            logger.setLevel(logging.INFO)

    def is_enabled(self):
        """
        Return a boolean describing whether the client should attempt to send
        events.
        """
        return bool(self.dsn) and not self.closed

    def send_event(self, data):
        """
        Builds an event from ``data`` and sends it, returning the event id
        as a string.

        >>> client.send_event({
        >>>     'message': {'message': 'oh no'},
        >>>     'throwable': RuntimeError('foo bar'),
        >>> })

        Build failures raise ``BuildError``; transport failures are logged
        and raised as they are.
        """
        event, hint = build_event(data)

        if self.closed:
            self.logger.debug('Client is closed, dropping event')
            return defaults.EMPTY_EVENT_ID

        try:
            event_id = self.transport.capture(event, hint)
        except Exception as e:
            self.error_logger.error(
                'Unable to send event: %s', e, exc_info=True)
            raise

        if event_id is None:
            self.logger.debug('Event was dropped by the transport')
            return defaults.EMPTY_EVENT_ID

        return str(event_id)

    def close(self):
        if self.closed:
            return
        self.closed = True
        self.transport.close()


def init(dsn=None, options=None, transport=None):
    """
    Creates a client and makes it the process-wide one used by ``send_event``
    and ``close``.

    >>> init('https://public_key@sentry.example.com/1', {
    >>>     'environment': 'production',
    >>>     'release': 'shop@1.0.0',
    >>>     'in_app_excludes': ['foo.bar'],
    >>> })
    """
    global Bridge

    if options is None:
        options = {}
    if not isinstance(options, Mapping):
        raise ConfigurationError(
            'Options must be a mapping, got %s' % type(options).__name__)

    client = Client(dsn, transport=transport, **options)
    if Bridge is not None and not Bridge.closed:
        Client.logger.debug('Replacing the process-wide client')
    Bridge = client
    return client


def close(client=None):
    global Bridge

    if client is None:
        client = Bridge
    if client is None:
        return

    client.close()
    if client is Bridge:
        Bridge = None


def send_event(data, client=None):
    """
    Sends ``data`` with ``client``, or with the client created by ``init``.
    Without any client the event is still built, so bad input is reported,
    but nothing is sent and the empty event id is returned.
    """
    if client is None:
        client = Bridge
    if client is None:
        build_event(data)
        Client.logger.debug('sentry_bridge is not initialized, dropping event')
        return defaults.EMPTY_EVENT_ID
    return client.send_event(data)
