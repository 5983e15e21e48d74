"""
Custom exceptions for RazorpayX API operations.
"""


class RazorpayXException(Exception):
    """Base exception for all RazorpayX-related errors."""

    def __init__(
        self,
        message,
        error_code=None,
        response_data=None,
        status_code=None,
        source=None,
        reason=None,
        field=None,
    ):
        self.message = message
        self.error_code = error_code
        self.response_data = response_data
        self.status_code = status_code
        self.source = source
        self.reason = reason
        self.field = field
        super().__init__(self.message)


class ConfigurationError(RazorpayXException):
    """Raised when there's a configuration issue."""
    pass


class ValidationError(RazorpayXException):
    """Raised when local input validation fails."""
    pass


class InvalidAmountError(ValidationError):
    """Raised when amount is invalid."""
    pass


class InvalidDestinationError(ValidationError):
    """Raised when a payout names both or neither of fund_account / fund_account_id."""
    pass


class APIError(RazorpayXException):
    """Raised when the RazorpayX API returns an error."""
    pass


class ConnectionFailedError(APIError):
    """Raised when the API could not be reached after all retries."""
    pass


class BadRequestError(APIError):
    """Raised on HTTP 400, e.g. cancelling a payout that is no longer queued."""
    pass


class AuthenticationError(APIError):
    """Raised when authentication with RazorpayX API fails."""
    pass


class NotFoundError(APIError):
    """Raised when the requested resource does not exist."""
    pass


class ServerError(APIError):
    """Raised on 5xx responses."""
    pass
