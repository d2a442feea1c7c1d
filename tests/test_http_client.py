from unittest.mock import Mock, patch

import pytest
import requests

from digiflazz.exceptions import TransportError
from digiflazz.utils.http_client import HTTPClient


@pytest.fixture
def http_client():
    c = HTTPClient('https://api.test/v1/', timeout=5)
    yield c
    c.close()


def _response(status_code=200, json_data=None, text=''):
    resp = Mock()
    resp.status_code = status_code
    resp.text = text
    if json_data is None:
        resp.json.side_effect = ValueError('No JSON object could be decoded')
    else:
        resp.json.return_value = json_data
    return resp


class TestPost:

    def test_sends_json_with_timeout(self, http_client):
        with patch.object(http_client.session, 'post', return_value=_response(json_data={'data': {}})) as post:
            http_client.post('/cek-saldo', data={'cmd': 'deposit'})

        args, kwargs = post.call_args
        assert args[0] == 'https://api.test/v1/cek-saldo'
        assert kwargs['json'] == {'cmd': 'deposit'}
        assert kwargs['timeout'] == 5
        assert kwargs['headers']['Content-Type'] == 'application/json'

    @pytest.mark.parametrize('exc', [requests.ConnectionError('refused'), requests.Timeout('slow')])
    def test_network_failure(self, http_client, exc):
        with patch.object(http_client.session, 'post', side_effect=exc) as post:
            with pytest.raises(TransportError) as exc_info:
                http_client.post('/cek-saldo', data={})

        assert exc_info.value.status_code is None
        assert post.call_count == 1

    def test_http_error_without_envelope(self, http_client):
        with patch.object(http_client.session, 'post', return_value=_response(503, text='down')):
            with pytest.raises(TransportError) as exc_info:
                http_client.post('/cek-saldo', data={})

        assert exc_info.value.status_code == 503
        assert exc_info.value.response_data == 'down'

    def test_non_json_success_response(self, http_client):
        with patch.object(http_client.session, 'post', return_value=_response(200, text='<html>')):
            with pytest.raises(TransportError):
                http_client.post('/cek-saldo', data={})

    def test_http_error_with_gateway_envelope_is_returned(self, http_client):
        body = {'data': {'rc': '45', 'message': 'IP Anda tidak kami kenali'}}
        with patch.object(http_client.session, 'post', return_value=_response(400, json_data=body)):
            assert http_client.post('/cek-saldo', data={}) == body


def test_sanitize_payload_masks_credentials(http_client):
    payload = {'cmd': 'deposit', 'username': 'user', 'sign': 'abc'}

    sanitized = http_client._sanitize_payload(payload)

    assert sanitized == {'cmd': 'deposit', 'username': '***', 'sign': '***'}
    assert payload['username'] == 'user'


def test_sanitize_payload_masks_nested_hook_secret(http_client):
    payload = {'hook_id': 'h1', 'hook': {'url': 'https://x', 'secret': 'hook-secret'}}

    sanitized = http_client._sanitize_payload(payload)

    assert sanitized['hook'] == {'url': 'https://x', 'secret': '***'}
    assert payload['hook']['secret'] == 'hook-secret'
