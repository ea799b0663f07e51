"""
sentry_bridge.utils.encoding
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from enum import Enum

from sentry_bridge.exceptions import ConversionError


def force_text(s, encoding='utf-8', errors='replace'):
    """
    Similar to Django's force_str: bytes are decoded, everything else goes
    through ``str()``. Undecodable bytes become U+FFFD unless ``errors``
    says otherwise.
    """
    if isinstance(s, str):
        return s
    if isinstance(s, (bytes, bytearray)):
        return bytes(s).decode(encoding, errors)
    if isinstance(s, Enum):
        return s.name
    return str(s)


def to_text(value):
    """
    Coerces ``value`` into text for use as a key or a tag value. Unlike
    ``force_text`` a failure is reported as a ``ConversionError``.
    """
    try:
        return force_text(value)
    except Exception as e:
        try:
            type_name = type(value).__name__
        except Exception:
            type_name = '<unknown>'
        raise ConversionError(
            'Unable to convert %s value to text (%s)' % (type_name, e)) from e
