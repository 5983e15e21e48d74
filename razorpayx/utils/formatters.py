"""
Data formatting utilities for paise amounts.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from ..constants import PAISE_PER_RUPEE
from ..exceptions import InvalidAmountError


def format_amount(paise: int) -> str:
    """
    Format an amount in paise as rupees with 2 decimal places.

    Args:
        paise: Amount in paise

    Returns:
        Formatted amount string (e.g., 123456 -> "1234.56")
    """
    rupees = Decimal(int(paise or 0)) / PAISE_PER_RUPEE
    return f"{rupees:.2f}"


def format_currency(paise: int, currency: str = "INR") -> str:
    """
    Format an amount in paise with currency code.

    Returns:
        Formatted string (e.g., "INR 1,234.56")
    """
    rupees = Decimal(int(paise or 0)) / PAISE_PER_RUPEE
    return f"{currency} {rupees:,.2f}"


def rupees_to_paise(amount: Union[int, float, Decimal, str]) -> int:
    """
    Convert a rupee amount to paise, rounding half up.

    Raises:
        InvalidAmountError: If amount cannot be parsed
    """
    try:
        rupees = Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidAmountError(f"Invalid amount format: {amount}")

    paise = (rupees * PAISE_PER_RUPEE).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    return int(paise)
