"""
Validation utilities for RazorpayX payout operations.

These checks never modify the payload; they only refuse input the API
would reject anyway.
"""

from typing import Any, Mapping

from ..exceptions import InvalidAmountError, InvalidDestinationError, ValidationError


def validate_amount(amount: Any) -> int:
    """
    Validate a payout amount in paise.

    Args:
        amount: Amount to validate

    Returns:
        The amount, unchanged

    Raises:
        InvalidAmountError: If amount is not a non-negative integer
    """
    # bool is an int subclass but never a meaningful amount
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmountError(
            f"Amount must be an integer number of paise. Got: {amount!r}"
        )

    if amount < 0:
        raise InvalidAmountError(f"Amount must not be negative. Got: {amount}")

    return amount


def validate_destination(payout_info: Mapping[str, Any]) -> str:
    """
    Check that exactly one of ``fund_account`` and ``fund_account_id`` is set.

    Returns:
        The name of the destination key that is present

    Raises:
        InvalidDestinationError: If both or neither are present
    """
    has_fund_account = payout_info.get('fund_account') is not None
    has_fund_account_id = payout_info.get('fund_account_id') is not None

    if has_fund_account and has_fund_account_id:
        raise InvalidDestinationError(
            "Provide either fund_account or fund_account_id, not both"
        )
    if not has_fund_account and not has_fund_account_id:
        raise InvalidDestinationError(
            "A payout needs a destination: fund_account or fund_account_id"
        )

    return 'fund_account' if has_fund_account else 'fund_account_id'


def validate_payout_id(payout_id: str) -> str:
    """
    Validate a payout identifier before it is placed in a URL path.

    Raises:
        ValidationError: If the id is empty or contains a path separator
    """
    if not payout_id or not str(payout_id).strip():
        raise ValidationError("Payout id is required")

    if '/' in str(payout_id):
        raise ValidationError(f"Invalid payout id: {payout_id}")

    return payout_id


def validate_payout_info(payout_info: Mapping[str, Any]) -> Mapping[str, Any]:
    """Run every create-time check and return the payload unchanged."""
    validate_amount(payout_info.get('amount'))
    validate_destination(payout_info)
    return payout_info
