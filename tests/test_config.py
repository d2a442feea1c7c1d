import pytest
from django.test import override_settings

from digiflazz.config import DigiflazzConfig, config
from digiflazz.exceptions import ConfigurationError


def test_defaults():
    assert config.api_base_url == 'https://api.digiflazz.com/v1'
    assert config.timeout == 30


def test_reads_settings_on_access():
    with override_settings(DIGIFLAZZ_WEBHOOK_SECRET='rotated', DIGIFLAZZ_TIMEOUT=10):
        assert config.webhook_secret == 'rotated'
        assert config.timeout == 10


@override_settings(DIGIFLAZZ_API_KEY='')
def test_missing_api_key():
    with pytest.raises(ConfigurationError):
        config.api_key


@override_settings(DIGIFLAZZ_API_BASE_URL='')
def test_empty_base_url_rejected():
    with pytest.raises(ConfigurationError):
        DigiflazzConfig()
