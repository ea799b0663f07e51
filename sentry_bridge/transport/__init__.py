"""
sentry_bridge.transport
~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from sentry_bridge.transport.base import *  # NOQA
from sentry_bridge.transport.sdk import *  # NOQA
