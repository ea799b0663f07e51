"""
sentry_bridge.events
~~~~~~~~~~~~~~~~~~~~

Turns an event map into the payload handed to the transport.

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import logging
import sys
import uuid

from collections.abc import Mapping
from contextlib import contextmanager

from sentry_bridge.breadcrumbs import build_breadcrumb
from sentry_bridge.exceptions import BuildError
from sentry_bridge.interfaces import Interface, build_request, build_user
from sentry_bridge.levels import to_severity
from sentry_bridge.utils import is_sequence, merge_dicts
from sentry_bridge.utils.dates import current_datetime
from sentry_bridge.utils.encoding import to_text
from sentry_bridge.utils.serializer import normalize

__all__ = ('Message', 'build_event', 'build_message', 'get_error_context')

logger = logging.getLogger(__name__)

EVENT_KEYS = (
    'event_id', 'message', 'level', 'release', 'environment', 'dist',
    'logger', 'platform', 'transaction', 'server_name', 'user', 'request',
    'tags', 'breadcrumbs', 'extra', 'fingerprints', 'throwable',
)

# copied onto the event under the same name
SIMPLE_FIELDS = (
    'dist', 'release', 'environment', 'logger', 'platform', 'transaction',
    'server_name',
)


class Message(Interface):
    """
    Messages store the following metadata:

    - message: 'My message from %s about %s'
    - params: ('foo', 'bar')
    - formatted: 'My message from foo about bar'
    """
    name = 'logentry'
    fields = ('formatted', 'message')

    @property
    def keys(self):
        return self.fields + ('params',)

    def build(self, data):
        payload = super(Message, self).build(data)

        params = data.get('params')
        if params is not None:
            if not is_sequence(params):
                raise BuildError(
                    'expected a sequence for \'params\', got %s' % (
                        type(params).__name__),
                    field=self.name)
            payload['params'] = list(params)
        return payload


_message = Message()


def build_message(data):
    return _message.build(data)


@contextmanager
def building(field):
    """
    Reports any failure while building ``field`` as a ``BuildError``.
    """
    try:
        yield
    except BuildError:
        raise
    except Exception as e:
        raise BuildError('%s: %s' % (type(e).__name__, e), field=field) from e


def to_event_id(value):
    if isinstance(value, uuid.UUID):
        return value.hex
    return uuid.UUID(to_text(value)).hex


def get_exc_info(throwable):
    """
    Accepts an exception, an ``exc_info`` triple, or ``True`` for the
    exception currently being handled.
    """
    if throwable is True:
        exc_info = sys.exc_info()
        if exc_info[1] is None:
            raise BuildError('no exception is being handled', field='throwable')
        return exc_info

    if isinstance(throwable, BaseException):
        return (type(throwable), throwable, throwable.__traceback__)

    if isinstance(throwable, tuple) and len(throwable) == 3 \
       and isinstance(throwable[1], BaseException):
        return throwable

    raise BuildError(
        'expected an exception or an exc_info tuple, got %s' % (
            type(throwable).__name__),
        field='throwable')


def get_error_context(exc):
    """
    Returns the structured data attached to ``exc``: its ``data`` attribute
    when that is a mapping, otherwise an empty dict.

    >>> class PaymentError(Exception):
    ...     def __init__(self, message, data):
    ...         super(PaymentError, self).__init__(message)
    ...         self.data = data
    >>> get_error_context(PaymentError('declined', {'order': 12}))
    {'order': 12}
    """
    data = getattr(exc, 'data', None)
    if isinstance(data, Mapping):
        return data
    return {}


def iter_tags(tags):
    if isinstance(tags, Mapping):
        return tags.items()
    if isinstance(tags, (str, bytes)):
        raise BuildError(
            'expected a mapping or (key, value) pairs, got %s' % (
                type(tags).__name__),
            field='tags')
    return tags


def build_event(data):
    """
    Builds an event from ``data`` and returns ``(event, hint)``. The hint
    holds what the transport needs but never puts on the wire, namely the
    ``exc_info`` of a causative exception.

    >>> event, hint = build_event({
    >>>     'message': {'message': 'Order %s failed', 'params': [12]},
    >>>     'level': 'error',
    >>>     'tags': {'shop': 'eu'},
    >>>     'user': {'id': 42},
    >>>     'breadcrumbs': [{'message': 'checkout', 'category': 'ui'}],
    >>>     'extra': {'cart': {'items': 3}},
    >>>     'throwable': exc,
    >>> })

    The ``extra`` mapping is merged with the data attached to ``throwable``
    (see ``get_error_context``); on a key collision the exception's data
    wins.

    Any failure raises ``BuildError`` and no event is returned.
    """
    if not isinstance(data, Mapping):
        raise BuildError(
            'expected a mapping, got %s' % type(data).__name__,
            field='event')

    unknown = [key for key in data if key not in EVENT_KEYS]
    if unknown:
        raise BuildError(
            'unknown keys %s' % ', '.join(sorted(repr(k) for k in unknown)),
            field='event')

    event = {}
    hint = {}

    timestamp = current_datetime()
    if timestamp is not None:
        event['timestamp'] = timestamp

    event_id = data.get('event_id')
    if event_id is not None:
        with building('event_id'):
            event['event_id'] = to_event_id(event_id)

    message = data.get('message')
    if message is not None:
        with building('message'):
            event['logentry'] = build_message(message)

    level = data.get('level')
    if level is not None:
        event['level'] = to_severity(level)

    for key in SIMPLE_FIELDS:
        value = data.get(key)
        if value is not None:
            event[key] = value

    user = data.get('user')
    if user is not None:
        with building('user'):
            event['user'] = build_user(user)

    request = data.get('request')
    if request is not None:
        with building('request'):
            event['request'] = build_request(request)

    tags = data.get('tags')
    if tags is not None:
        with building('tags'):
            values = {}
            for key, value in iter_tags(tags):
                values[to_text(key)] = '' if value is None else to_text(value)
            if values:
                event['tags'] = values

    breadcrumbs = data.get('breadcrumbs')
    if breadcrumbs is not None:
        with building('breadcrumbs'):
            if not is_sequence(breadcrumbs):
                raise BuildError(
                    'expected a sequence, got %s' % type(breadcrumbs).__name__,
                    field='breadcrumbs')
            if breadcrumbs:
                event['breadcrumbs'] = {
                    'values': [build_breadcrumb(b) for b in breadcrumbs],
                }

    exc_info = None
    throwable = data.get('throwable')
    if throwable is not None:
        with building('throwable'):
            exc_info = get_exc_info(throwable)

    extra = data.get('extra')
    with building('extra'):
        if extra is not None and not isinstance(extra, Mapping):
            raise BuildError(
                'expected a mapping, got %s' % type(extra).__name__,
                field='extra')
        context = get_error_context(exc_info[1]) if exc_info else None
        merged = merge_dicts(extra, context)
        if merged:
            event['extra'] = normalize(merged)

    if exc_info is not None:
        hint['exc_info'] = exc_info

    fingerprints = data.get('fingerprints')
    if fingerprints is not None:
        with building('fingerprints'):
            if not is_sequence(fingerprints):
                raise BuildError(
                    'expected a sequence, got %s' % type(fingerprints).__name__,
                    field='fingerprints')
            if fingerprints:
                event['fingerprint'] = list(fingerprints)

    logger.debug('Built event with %s', ', '.join(sorted(event)))
    return event, hint
