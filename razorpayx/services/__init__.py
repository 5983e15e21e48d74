"""
Service modules for RazorpayX resources.
"""

from .payout_service import PayoutClient

__all__ = [
    'PayoutClient',
]
