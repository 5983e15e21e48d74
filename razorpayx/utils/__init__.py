"""
Utility modules for RazorpayX payout operations.
"""

from .http_client import RestClient
from .validators import (
    validate_amount,
    validate_destination,
    validate_payout_id,
    validate_payout_info,
)
from .formatters import (
    format_amount,
    format_currency,
    rupees_to_paise,
)

__all__ = [
    'RestClient',
    'validate_amount',
    'validate_destination',
    'validate_payout_id',
    'validate_payout_info',
    'format_amount',
    'format_currency',
    'rupees_to_paise',
]
