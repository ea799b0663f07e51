"""
sentry_bridge.transport.sdk
~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import logging

import sentry_sdk
from sentry_sdk.integrations.excepthook import ExcepthookIntegration
from sentry_sdk.utils import event_from_exception

from sentry_bridge.exceptions import TransportError
from sentry_bridge.transport.base import Transport
from sentry_bridge.utils import merge_dicts

__all__ = ('SentrySdkTransport',)


class SentrySdkTransport(Transport):
    """
    Delivers events through the official ``sentry_sdk`` client, which keeps
    its state per process. Only one of these should be open at a time.
    """

    def __init__(self):
        self.client = None
        self.logger = logging.getLogger(__name__)

    def get_init_kwargs(self, dsn, options):
        kwargs = {'dsn': dsn}

        for key in ('environment', 'debug', 'release'):
            if key in options:
                kwargs[key] = options[key]

        if 'shutdown_timeout' in options:
            # sentry_sdk counts in seconds
            kwargs['shutdown_timeout'] = options['shutdown_timeout'] / 1000.0

        if options.get('in_app_excludes'):
            kwargs['in_app_exclude'] = list(options['in_app_excludes'])

        if options.get('enable_uncaught_exception_handler') is False:
            kwargs['disabled_integrations'] = [ExcepthookIntegration()]

        return kwargs

    def init(self, dsn, options):
        kwargs = self.get_init_kwargs(dsn, options)
        self.logger.debug(
            'Initializing sentry_sdk with %s', ', '.join(sorted(kwargs)))
        sentry_sdk.init(**kwargs)
        self.client = sentry_sdk.get_client()

    def capture(self, event, hint=None):
        if self.client is None:
            raise TransportError('Transport is not initialized')

        hint = dict(hint or {})
        exc_info = hint.get('exc_info')
        if exc_info is not None and 'exception' not in event:
            exc_event, exc_hint = event_from_exception(
                exc_info, client_options=self.client.options)
            event['exception'] = exc_event['exception']
            hint = merge_dicts(exc_hint, hint)

        return sentry_sdk.capture_event(event, hint=hint)

    def close(self):
        if self.client is None:
            return

        client, self.client = self.client, None
        client.close()

        # leave a no-op client behind, like a process that never called init
        if sentry_sdk.get_client() is client:
            sentry_sdk.get_global_scope().set_client(None)
