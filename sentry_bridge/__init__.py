"""
sentry_bridge
~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

__all__ = ('VERSION', 'Client', 'init', 'close', 'send_event')

VERSION = '1.0.0'

from sentry_bridge.base import *  # NOQA
from sentry_bridge.exceptions import *  # NOQA
