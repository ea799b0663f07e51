"""
sentry_bridge.utils.dates
~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from datetime import datetime, timezone

from sentry_bridge.utils import logger


def current_datetime():
    """
    Returns the current time in UTC, or None when the clock can't be read.
    The transport stamps events that come without a timestamp.
    """
    try:
        return datetime.now(timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        logger.warning('Unable to read the current time: %s', e)
        return None
