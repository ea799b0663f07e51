"""
sentry_bridge.conf
~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from collections.abc import Mapping

from sentry_bridge.conf import defaults
from sentry_bridge.exceptions import ConfigurationError
from sentry_bridge.utils import is_sequence
from sentry_bridge.utils.encoding import to_text

__all__ = ('OPTIONS', 'load_options', 'get_option')

OPTIONS = (
    'environment',
    'debug',
    'release',
    'shutdown_timeout',
    'in_app_excludes',
    'enable_uncaught_exception_handler',
)


def load_options(options):
    """
    Validates the options given to ``init`` and returns the ones that were
    set. A missing or None option is left out so the transport keeps its
    own default for it.

    >>> load_options({'environment': 'production', 'shutdown_timeout': 500,
    >>>               'in_app_excludes': ['foo.bar', 'baz.qux']})
    """
    if options is None:
        return {}

    if not isinstance(options, Mapping):
        raise ConfigurationError(
            'Options must be a mapping, got %s' % type(options).__name__)

    unknown = [key for key in options if key not in OPTIONS]
    if unknown:
        raise ConfigurationError(
            'Unknown options: %s' % ', '.join(sorted(repr(k) for k in unknown)))

    loaded = {}
    for key, value in options.items():
        if value is None:
            continue

        if key == 'shutdown_timeout':
            try:
                value = int(value)
            except (TypeError, ValueError):
                raise ConfigurationError(
                    'shutdown_timeout must be a number of milliseconds, '
                    'got %r' % (value,))
            if value < 0:
                raise ConfigurationError(
                    'shutdown_timeout must not be negative, got %r' % (value,))

        elif key == 'in_app_excludes':
            if not is_sequence(value):
                raise ConfigurationError(
                    'in_app_excludes must be a sequence of module prefixes, '
                    'got %s' % type(value).__name__)
            value = [to_text(prefix) for prefix in value]

        elif key in ('debug', 'enable_uncaught_exception_handler'):
            if not isinstance(value, bool):
                raise ConfigurationError(
                    '%s must be True or False, got %r' % (key, value))

        loaded[key] = value

    return loaded


def get_option(options, key):
    """
    Returns the value the transport ends up with for ``key``.
    """
    if key in options:
        return options[key]
    return getattr(defaults, key.upper())
