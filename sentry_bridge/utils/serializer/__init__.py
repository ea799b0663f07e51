"""
sentry_bridge.utils.serializer
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from sentry_bridge.utils.serializer.manager import *  # NOQA
from sentry_bridge.utils.serializer.base import *  # NOQA
