"""
Constants and enums for RazorpayX payout operations.
"""

from enum import Enum


class PayoutStatus(str, Enum):
    """Payout lifecycle statuses. Transitions happen server-side."""
    QUEUED = "queued"
    PENDING = "pending"
    REJECTED = "rejected"
    PROCESSING = "processing"
    PROCESSED = "processed"
    CANCELLED = "cancelled"
    REVERSED = "reversed"


class PayoutMode(str, Enum):
    """Transfer rails."""
    UPI = "UPI"
    NEFT = "NEFT"
    RTGS = "RTGS"
    IMPS = "IMPS"
    CARD = "card"


class PayoutPurpose(str, Enum):
    """
    Commonly used payout purposes.

    The API accepts any purpose string, so this only documents the usual values.
    """
    REFUND = "refund"
    CASHBACK = "cashback"
    PAYOUT = "payout"
    SALARY = "salary"
    UTILITY_BILL = "utility bill"
    VENDOR_BILL = "vendor bill"


class Currency(str, Enum):
    """Supported currencies."""
    INR = "INR"


class FundAccountType(str, Enum):
    """Fund account destination kinds."""
    BANK_ACCOUNT = "bank_account"
    VPA = "vpa"


# API Endpoints
class APIEndpoints:
    """RazorpayX API endpoints."""
    PAYOUTS = "/payouts"
    PAYOUT = "/payouts/{payout_id}"
    CANCEL_PAYOUT = "/payouts/{payout_id}/cancel"


IDEMPOTENCY_HEADER = "X-Payout-Idempotency"

# Default settings
DEFAULT_API_BASE_URL = "https://api.razorpay.com/v1"
DEFAULT_TIMEOUT = 30  # seconds
MAX_RETRIES = 3
PAISE_PER_RUPEE = 100
