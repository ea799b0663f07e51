"""
sentry_bridge.levels
~~~~~~~~~~~~~~~~~~~~

Severity levels as understood by the transport.

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

__all__ = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'FATAL', 'to_severity')

DEBUG = 'debug'
INFO = 'info'
WARNING = 'warning'
ERROR = 'error'
FATAL = 'fatal'

LEVELS = {
    'debug': DEBUG,
    'info': INFO,
    'warning': WARNING,
    'error': ERROR,
    'fatal': FATAL,
}


def to_severity(level):
    """
    Converts a level name into a transport severity. Anything that is not one
    of the known names is reported as ``INFO``.

    >>> to_severity('warning')
    'warning'
    >>> to_severity('critical')
    'info'
    """
    if not isinstance(level, str):
        return INFO
    return LEVELS.get(level, INFO)
