"""
Runs events through the real sentry_sdk client with a transport that keeps
envelopes in memory.
"""
import sentry_sdk
from sentry_sdk.transport import Transport as SdkTransport

import sentry_bridge

from sentry_bridge.transport.sdk import SentrySdkTransport
from sentry_bridge.utils.testutils import TestCase

DSN = 'https://public@sentry.example.com/1'


class CapturingSdkTransport(SdkTransport):
    def __init__(self, options=None):
        super(CapturingSdkTransport, self).__init__(options)
        self.envelopes = []

    def capture_envelope(self, envelope):
        self.envelopes.append(envelope)


class CapturingTransport(SentrySdkTransport):
    def __init__(self):
        super(CapturingTransport, self).__init__()
        self.sdk_transport = CapturingSdkTransport()

    def get_init_kwargs(self, dsn, options):
        kwargs = super(CapturingTransport, self).get_init_kwargs(dsn, options)
        kwargs['transport'] = self.sdk_transport
        kwargs['default_integrations'] = False
        return kwargs

    @property
    def events(self):
        events = []
        for envelope in self.sdk_transport.envelopes:
            event = envelope.get_event()
            if event is not None:
                events.append(event)
        return events


class SentrySdkIntegrationTest(TestCase):
    def setUp(self):
        self.transport = CapturingTransport()
        self.client = sentry_bridge.init(DSN, {
            'environment': 'test',
            'release': 'shop@1.0.0',
            'in_app_excludes': ['foo.bar', 'baz.qux'],
            'enable_uncaught_exception_handler': False,
        }, transport=self.transport)

    def tearDown(self):
        sentry_bridge.close()

    def test_options_reach_the_sdk(self):
        options = sentry_sdk.get_client().options
        assert options['environment'] == 'test'
        assert options['release'] == 'shop@1.0.0'
        assert sorted(options['in_app_exclude']) == ['baz.qux', 'foo.bar']

    def test_send_event(self):
        try:
            raise ValueError('foo bar')
        except ValueError as e:
            exc = e

        ident = sentry_bridge.send_event({
            'message': {'message': 'oh no'},
            'level': 'warning',
            'tags': {'shop': 'eu'},
            'breadcrumbs': [{'message': 'b1'}, {'message': 'b2'}],
            'extra': {'cart': {'items': 3}},
            'throwable': exc,
        })

        events = self.transport.events
        assert len(events) == 1
        event = events[0]
        assert event['event_id'] == ident
        assert event['logentry']['message'] == 'oh no'
        assert event['level'] == 'warning'
        assert event['tags']['shop'] == 'eu'
        assert event['extra']['cart'] == {'items': 3}
        assert [c['message'] for c in event['breadcrumbs']['values']] == ['b1', 'b2']
        assert event['exception']['values'][0]['type'] == 'ValueError'

    def test_close_releases_the_sdk(self):
        sentry_bridge.close()
        assert not sentry_sdk.get_client().is_active()
