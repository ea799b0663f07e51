"""
sentry_bridge.transport.base
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

__all__ = ('Transport',)


class Transport(object):
    """
    All transport implementations need to subclass this class

    A transport owns delivery: queueing, retries, rate limits and the
    process-wide state that goes with them. ``capture`` receives a fully
    built event and owns it from then on.
    """

    def init(self, dsn, options):
        """
        Sets the transport up. ``options`` only holds the options the caller
        set, see ``sentry_bridge.conf.load_options``.
        """
        raise NotImplementedError

    def capture(self, event, hint=None):
        """
        Hands ``event`` off for delivery and returns its id, or None if the
        event was dropped.
        """
        raise NotImplementedError

    def close(self):
        """
        Releases whatever ``init`` set up.
        """
        pass
