from io import StringIO
from unittest.mock import patch

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from digiflazz.exceptions import APIError, TransportError


@patch('digiflazz.management.commands.digiflazz_balance.DigiflazzClient')
def test_balance_command(mock_client):
    mock_client.return_value.check_balance.return_value = {'deposit': 50000}
    mock_client.return_value.price_list.return_value = [{}, {}]
    out = StringIO()

    call_command('digiflazz_balance', '--price-list', stdout=out)

    assert 'Deposit: 50000' in out.getvalue()
    assert 'Prepaid products: 2' in out.getvalue()


@patch('digiflazz.management.commands.digiflazz_balance.DigiflazzClient')
def test_balance_command_api_error(mock_client):
    mock_client.return_value.check_balance.side_effect = APIError('IP Anda tidak kami kenali', rc='45')

    with pytest.raises(CommandError):
        call_command('digiflazz_balance', stdout=StringIO())


@patch('digiflazz.management.commands.digiflazz_ping.DigiflazzClient')
def test_ping_command(mock_client):
    mock_client.return_value.trigger_ping.return_value = {
        'sed': 'abc', 'hook_id': 'h1', 'hook': {'url': 'https://example.com/hook'}
    }
    out = StringIO()

    call_command('digiflazz_ping', '--hook-id', 'h1', stdout=out)

    mock_client.return_value.trigger_ping.assert_called_once_with('h1')
    assert 'hook_id=h1' in out.getvalue()


@patch('digiflazz.management.commands.digiflazz_balance.DigiflazzClient')
def test_balance_command_transport_error(mock_client):
    mock_client.return_value.check_balance.side_effect = TransportError('Unexpected response from /cek-saldo')

    with pytest.raises(CommandError):
        call_command('digiflazz_balance', stdout=StringIO())
