import json

import pytest
from django.test import RequestFactory, override_settings

from conftest import sign_body
from digiflazz.constants import WebhookEvent
from digiflazz.signals import webhook_received
from digiflazz.views import webhook_callback


@pytest.fixture
def factory():
    return RequestFactory()


@pytest.fixture
def received():
    events = []

    def receiver(sender, event, payload, **kwargs):
        events.append((event, payload))

    webhook_received.connect(receiver)
    yield events
    webhook_received.disconnect(receiver)


def _post(factory, body, event='update', signature=None):
    extra = {'HTTP_X_DIGIFLAZZ_EVENT': event}
    signature = signature if signature is not None else sign_body(body)
    if signature:
        extra['HTTP_X_HUB_SIGNATURE'] = signature
    return factory.post('/callback/', data=body, content_type='application/json', **extra)


class TestWebhookCallback:

    def test_valid_update_sends_signal(self, factory, received, update_body):
        response = webhook_callback(_post(factory, update_body))

        assert response.status_code == 200
        assert json.loads(response.content) == {'status': 'received'}
        assert received == [(WebhookEvent.UPDATE, json.loads(update_body)['data'])]

    def test_valid_ping(self, factory, received, ping_body):
        response = webhook_callback(_post(factory, ping_body, event='ping'))

        assert response.status_code == 200
        assert received[0][1]['hook_id'] == 'h1'

    def test_signature_mismatch_is_401(self, factory, received, update_body):
        response = webhook_callback(_post(factory, update_body, signature='sha1=' + '0' * 40))

        assert response.status_code == 401
        assert received == []

    def test_missing_signature_is_400(self, factory, received, update_body):
        response = webhook_callback(_post(factory, update_body, signature=''))

        assert response.status_code == 400
        assert received == []

    def test_malformed_signature_is_400(self, factory, update_body):
        response = webhook_callback(_post(factory, update_body, signature='md5=abc123'))

        assert response.status_code == 400

    @override_settings(DIGIFLAZZ_WEBHOOK_SECRET='')
    def test_missing_secret_is_500(self, factory, received, update_body):
        response = webhook_callback(_post(factory, update_body))

        assert response.status_code == 500
        assert received == []

    def test_get_not_allowed(self, factory):
        response = webhook_callback(factory.get('/callback/'))

        assert response.status_code == 405
