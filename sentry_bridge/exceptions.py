"""
sentry_bridge.exceptions
~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

__all__ = ('BuildError', 'ConversionError', 'TransportError',
           'ConfigurationError')


class BuildError(ValueError):
    """
    Raised when an input map cannot be turned into an event. ``field`` names
    the part of the event that was being built.
    """
    def __init__(self, message, field=None):
        self.field = field
        self.message = message
        super(BuildError, self).__init__(message)

    def __str__(self):
        if self.field:
            return '%s: %s' % (self.field, self.message)
        return self.message


class ConversionError(BuildError):
    """
    Raised when a value could not be coerced to text.
    """


class TransportError(Exception):
    """
    Raised when a transport is used outside of its init/close lifecycle.
    """


class ConfigurationError(ValueError):
    pass
