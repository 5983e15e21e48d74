"""
Entry point that wires a REST transport to the resource clients.
"""

import logging
from typing import Optional

from .config import config
from .services.payout_service import PayoutClient
from .utils.http_client import RestClient

logger = logging.getLogger(__name__)


class RazorpayX:
    """
    RazorpayX API client.

    Credentials and transport settings come from Django settings unless
    passed explicitly::

        with RazorpayX() as rpx:
            payout = rpx.payouts.get("pout_00000000000001")
    """

    def __init__(
        self,
        key_id: Optional[str] = None,
        key_secret: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        max_retries: Optional[int] = None,
        rest_client: Optional[RestClient] = None,
    ):
        if rest_client is None:
            rest_client = RestClient(
                base_url or config.api_base_url,
                key_id or config.key_id,
                key_secret or config.key_secret,
                timeout=timeout if timeout is not None else config.timeout,
                max_retries=max_retries if max_retries is not None else config.max_retries,
            )
            logger.debug(f"RazorpayX client created for {rest_client.base_url}")
        self.client = rest_client
        self.payouts = PayoutClient(self.client)

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
