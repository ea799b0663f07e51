"""
sentry_bridge.scripts.runner
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import logging
import os
import sys
from optparse import OptionParser

from sentry_bridge import Client
from sentry_bridge.conf import OPTIONS, defaults, get_option
from sentry_bridge.exceptions import BuildError
from sentry_bridge.utils import json, merge_dicts
from sentry_bridge.utils.testutils import InMemoryTransport


def store_json(option, opt_str, value, parser):
    try:
        value = json.loads(value)
    except json.JSONDecodeError:
        print("Invalid JSON was used for option %s.  Received: %s" % (opt_str, value))
        sys.exit(1)
    if not isinstance(value, dict):
        print("Option %s expects a JSON object.  Received: %s" % (opt_str, value))
        sys.exit(1)
    setattr(parser.values, option.dest, value)


def get_loadavg():
    if hasattr(os, 'getloadavg'):
        return os.getloadavg()
    return None


def get_uid():
    try:
        import pwd
    except ImportError:
        return None
    return pwd.getpwuid(os.geteuid())[0]


def send_test_event(client, options):
    print("Client configuration:")
    print('  %-35s: %s' % ('dsn', client.dsn))
    for k in OPTIONS:
        print('  %-35s: %s' % (k, get_option(client.options, k)))
    print()

    if not client.is_enabled():
        print('Error: Client reports as being disabled!')
        return False

    event = merge_dicts({
        'message': {
            'message': 'This is a test message generated using ``sentry-bridge test``',
        },
        'level': 'info',
        'logger': 'sentry_bridge.test',
        'request': {
            'method': 'GET',
            'url': 'http://example.com',
        },
        'tags': options.get('tags') or {},
        'extra': {
            'user': get_uid(),
            'loadavg': get_loadavg(),
        },
    }, options.get('data'))

    print('Sending a test message...', end=' ')

    try:
        ident = client.send_event(event)
    except BuildError as e:
        print('error!')
        print('Invalid event: %s' % (e,))
        return False
    except Exception as e:
        print('error!')
        print('Unable to send event: %s' % (e,))
        return False

    if ident == defaults.EMPTY_EVENT_ID:
        print('error!')
        print('The event was dropped by the transport')
        return False

    print('success!')
    print('Event ID was %r' % (ident,))
    return True


def main(argv=None):
    root = logging.getLogger('sentry.errors')
    root.setLevel(logging.DEBUG)
    root.addHandler(logging.StreamHandler())

    parser = OptionParser(usage='%prog test [DSN] [options]')
    parser.add_option("--data", action="callback", callback=store_json,
        type="string", nargs=1, dest="data")
    parser.add_option("--tags", action="callback", callback=store_json,
        type="string", nargs=1, dest="tags")
    parser.add_option("--environment", dest="environment")
    parser.add_option("--release", dest="release")
    parser.add_option("--debug", action="store_true", dest="debug")
    parser.add_option("--dry-run", action="store_true", dest="dry_run",
        help="build the event and print it instead of sending it")
    (opts, args) = parser.parse_args(argv)

    if not args or args[0] != 'test':
        parser.error('Unknown command, expected "test"')

    dsn = ' '.join(args[1:]) or os.environ.get(defaults.DSN_ENV_VAR)
    if not dsn:
        print("Error: No configuration detected!")
        print("You must either pass a DSN to the command, or set the %s "
              "environment variable." % defaults.DSN_ENV_VAR)
        sys.exit(1)

    print("Using DSN configuration:")
    print(" ", dsn)
    print()

    transport = InMemoryTransport() if opts.dry_run else None
    client = Client(dsn, transport=transport, environment=opts.environment,
                    release=opts.release, debug=opts.debug)
    try:
        ok = send_test_event(client, opts.__dict__)
    finally:
        client.close()

    if ok and transport is not None:
        event, hint = transport.events[-1]
        print(json.dumps(event, indent=2, sort_keys=True))

    sys.exit(0 if ok else 1)
