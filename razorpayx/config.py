"""
Configuration management for the RazorpayX client.
"""

from django.conf import settings

from .constants import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT, MAX_RETRIES
from .exceptions import ConfigurationError


class RazorpayXConfig:
    """
    Configuration manager for RazorpayX API settings.
    Values are read from Django settings on every access, so overrides
    made after import are honoured.
    """

    @property
    def api_base_url(self):
        """Get RazorpayX API base URL."""
        base_url = getattr(settings, 'RAZORPAYX_API_BASE_URL', DEFAULT_API_BASE_URL)
        if not base_url:
            raise ConfigurationError("RAZORPAYX_API_BASE_URL is not configured.")
        return base_url

    @property
    def key_id(self):
        """Get RazorpayX API key id."""
        key_id = getattr(settings, 'RAZORPAYX_KEY_ID', '')
        if not key_id:
            raise ConfigurationError(
                "RAZORPAYX_KEY_ID is not configured in Django settings. "
                "Please add it to your settings.py or .env file."
            )
        return key_id

    @property
    def key_secret(self):
        """Get RazorpayX API key secret."""
        key_secret = getattr(settings, 'RAZORPAYX_KEY_SECRET', '')
        if not key_secret:
            raise ConfigurationError(
                "RAZORPAYX_KEY_SECRET is not configured in Django settings. "
                "Please add it to your settings.py or .env file."
            )
        return key_secret

    @property
    def account_number(self):
        """Get the default source account number (optional)."""
        return getattr(settings, 'RAZORPAYX_ACCOUNT_NUMBER', '')

    @property
    def timeout(self):
        return getattr(settings, 'RAZORPAYX_TIMEOUT', DEFAULT_TIMEOUT)

    @property
    def max_retries(self):
        return getattr(settings, 'RAZORPAYX_MAX_RETRIES', MAX_RETRIES)

    @property
    def validate_payouts(self):
        """Whether payout input is checked locally before it is sent."""
        return bool(getattr(settings, 'RAZORPAYX_VALIDATE_PAYOUTS', True))


# Singleton instance
config = RazorpayXConfig()
