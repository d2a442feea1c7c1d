"""
Configuration management for the Digiflazz client.
"""

from django.conf import settings

from .constants import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT
from .exceptions import ConfigurationError


class DigiflazzConfig:
    """
    Configuration manager for Digiflazz API settings.
    Loads and validates settings from Django settings.
    """
    
    def __init__(self):
        self._validate_settings()
    
    @property
    def api_base_url(self):
        """Get Digiflazz API base URL."""
        return getattr(settings, 'DIGIFLAZZ_API_BASE_URL', DEFAULT_API_BASE_URL)
    
    @property
    def username(self):
        """Get Digiflazz username."""
        username = getattr(settings, 'DIGIFLAZZ_USERNAME', '')
        if not username:
            raise ConfigurationError(
                "DIGIFLAZZ_USERNAME is not configured in Django settings. "
                "Please add it to your settings.py or .env file."
            )
        return username
    
    @property
    def api_key(self):
        """Get Digiflazz API key (production or development key)."""
        api_key = getattr(settings, 'DIGIFLAZZ_API_KEY', '')
        if not api_key:
            raise ConfigurationError(
                "DIGIFLAZZ_API_KEY is not configured in Django settings. "
                "Please add it to your settings.py or .env file."
            )
        return api_key
    
    @property
    def webhook_secret(self):
        """Get webhook secret. Emptiness is reported by the verifier."""
        return getattr(settings, 'DIGIFLAZZ_WEBHOOK_SECRET', '')
    
    @property
    def timeout(self):
        """Get HTTP timeout in seconds."""
        return getattr(settings, 'DIGIFLAZZ_TIMEOUT', DEFAULT_TIMEOUT)
    
    def _validate_settings(self):
        """
        Validate that required settings are present.
        Raises ConfigurationError if validation fails.
        """
        if not self.api_base_url:
            raise ConfigurationError("DIGIFLAZZ_API_BASE_URL is not configured.")
        
        # Credentials are checked lazily in their property getters so the
        # webhook side can run without them.


# Singleton instance
config = DigiflazzConfig()
