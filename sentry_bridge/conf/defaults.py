"""
sentry_bridge.conf.defaults
~~~~~~~~~~~~~~~~~~~~~~~~~~~

Represents the default values for all sentry_bridge settings. Options that
are not passed to ``init`` are never sent to the transport; the values below
are what the transport uses in that case.

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

# Read when ``init`` is called without a DSN
DSN_ENV_VAR = 'SENTRY_DSN'

# Returned instead of an event id when nothing was sent
EMPTY_EVENT_ID = '0' * 32

ENVIRONMENT = None

DEBUG = False

RELEASE = None

# Milliseconds to wait for pending events on close
SHUTDOWN_TIMEOUT = 2000

IN_APP_EXCLUDES = ()

ENABLE_UNCAUGHT_EXCEPTION_HANDLER = True
