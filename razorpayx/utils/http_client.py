"""
HTTP client for RazorpayX API communication.
"""

import logging
from typing import Any, Dict, Optional

import requests

from razorpayx.constants import DEFAULT_TIMEOUT, IDEMPOTENCY_HEADER, MAX_RETRIES
from razorpayx.exceptions import (
    APIError,
    AuthenticationError,
    BadRequestError,
    ConnectionFailedError,
    NotFoundError,
    ServerError,
)

logger = logging.getLogger(__name__)


class RestClient:
    """
    Authenticated REST transport for the RazorpayX API.
    Handles request/response, error translation, connection retries, and logging.
    """

    def __init__(
        self,
        base_url: str,
        key_id: str,
        key_secret: str,
        timeout: int = DEFAULT_TIMEOUT,
        max_retries: int = MAX_RETRIES,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize REST client.

        Args:
            base_url: Base URL for API requests, e.g. https://api.razorpay.com/v1
            key_id: API key id used as the basic auth username
            key_secret: API key secret used as the basic auth password
            timeout: Request timeout in seconds
            max_retries: Attempts made when the connection itself fails
            session: Optional pre-built requests session
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.session = session or requests.Session()
        self.session.auth = (key_id, key_secret)

    def _get_full_url(self, path: str) -> str:
        """Get full URL for path."""
        path = path.lstrip('/')
        return f"{self.base_url}/{path}"

    def _log_request(self, method: str, url: str, headers: Dict, data: Optional[Dict] = None):
        """Log API request details."""
        logger.info(f"RazorpayX API Request: {method} {url}")
        logger.debug(f"Headers: {self._sanitize_headers(headers)}")
        if data:
            logger.debug(f"Payload: {data}")

    def _log_response(self, response: requests.Response):
        """Log API response details."""
        logger.info(f"RazorpayX API Response: {response.status_code}")
        logger.debug(f"Response: {response.text}")

    def _sanitize_headers(self, headers: Dict) -> Dict:
        """Remove sensitive data from headers for logging."""
        sanitized = headers.copy()
        if 'Authorization' in sanitized:
            sanitized['Authorization'] = 'Basic ***'
        return sanitized

    def _raise_for_error(self, response: requests.Response):
        """
        Translate a non-2xx response into an exception.

        RazorpayX reports errors as
        ``{"error": {"code", "description", "source", "reason", "field"}}``.
        """
        status = response.status_code
        message = f"API request failed with status {status}"
        details: Dict[str, Any] = {}
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get('error'), dict):
            details = body['error']
            message = details.get('description') or message
        elif response.text:
            message = response.text

        if status in (401, 403):
            error_class = AuthenticationError
        elif status == 404:
            error_class = NotFoundError
        elif status == 400:
            error_class = BadRequestError
        elif status >= 500:
            error_class = ServerError
        else:
            error_class = APIError

        raise error_class(
            message,
            error_code=details.get('code'),
            response_data=response.text,
            status_code=status,
            source=details.get('source'),
            reason=details.get('reason'),
            field=details.get('field'),
        )

    def _handle_response(self, response: requests.Response) -> Any:
        """
        Handle API response and extract data.

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            APIError: If response indicates an error or cannot be decoded
        """
        self._log_response(response)

        if response.status_code >= 400:
            self._raise_for_error(response)

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise APIError(
                f"Failed to parse API response: {str(e)}",
                response_data=response.text,
                status_code=response.status_code,
            )

    def load(
        self,
        path: str,
        method: str = 'GET',
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Make a request to the API.

        Args:
            path: API path, e.g. /payouts
            method: HTTP method
            data: Query parameters for GET, JSON body otherwise
            headers: Extra request headers

        Returns:
            Decoded response body

        Raises:
            APIError: Or one of its subclasses on failure
        """
        method = method.upper()
        url = self._get_full_url(path)
        headers = dict(headers or {})

        request_kwargs: Dict[str, Any] = {'headers': headers, 'timeout': self.timeout}
        if method == 'GET':
            request_kwargs['params'] = data
        else:
            headers.setdefault('Content-Type', 'application/json')
            if data is not None:
                request_kwargs['json'] = data

        self._log_request(method, url, headers, data)

        # A request that may have reached the server is only resent when
        # resending cannot repeat its effect
        if method == 'GET' or IDEMPOTENCY_HEADER in headers:
            retryable = (requests.ConnectionError, requests.Timeout)
        else:
            retryable = (requests.ConnectTimeout,)

        for attempt in range(self.max_retries):
            try:
                response = self.session.request(method, url, **request_kwargs)
            except (requests.ConnectionError, requests.Timeout) as e:
                if not isinstance(e, retryable):
                    raise ConnectionFailedError(
                        f"Request to {url} failed and was not retried: {str(e)}"
                    ) from e
                if attempt == self.max_retries - 1:
                    raise ConnectionFailedError(
                        f"Connection failed after {self.max_retries} attempts: {str(e)}"
                    ) from e
                logger.warning(f"Request failed (attempt {attempt + 1}/{self.max_retries}): {str(e)}")
                continue
            return self._handle_response(response)

    def close(self):
        """Close the session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
