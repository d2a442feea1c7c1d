import hashlib
import hmac

import django
import pytest
from django.conf import settings

if not settings.configured:
    settings.configure(
        DEBUG=True,
        SECRET_KEY='digiflazz-tests',
        ALLOWED_HOSTS=['*'],
        INSTALLED_APPS=['digiflazz'],
        ROOT_URLCONF='digiflazz.urls',
        DIGIFLAZZ_USERNAME='testuser',
        DIGIFLAZZ_API_KEY='test-api-key',
        DIGIFLAZZ_WEBHOOK_SECRET='test-webhook-secret',
    )
    django.setup()


WEBHOOK_SECRET = 'test-webhook-secret'


def sign_body(body, secret=WEBHOOK_SECRET):
    """Build an X-Hub-Signature value the way Digiflazz does."""
    if isinstance(body, str):
        body = body.encode('utf-8')
    digest = hmac.new(secret.encode('utf-8'), body, hashlib.sha1).hexdigest()
    return f'sha1={digest}'


@pytest.fixture
def webhook_secret():
    return WEBHOOK_SECRET


@pytest.fixture
def update_body():
    return b'{"data":{"ref_id":"INV1","status":"Sukses","rc":"00","sn":"123"}}'


@pytest.fixture
def ping_body():
    return (
        b'{"sed":"abc","hook_id":"h1","hook":{"url":"https://example.com/hook",'
        b'"secret":"s","type":"json","status":1}}'
    )
