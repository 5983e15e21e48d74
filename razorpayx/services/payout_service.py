"""
Payout service for RazorpayX.
Binds the /payouts resource: create, list, fetch, and cancel.
"""

import logging
from typing import Optional

from ..config import config
from ..constants import APIEndpoints, IDEMPOTENCY_HEADER
from ..types import Payout, PayoutCollection, PayoutCreateParams, PayoutFilter
from ..utils.validators import validate_payout_id, validate_payout_info

logger = logging.getLogger(__name__)


class PayoutClient:
    """
    Client for the RazorpayX payouts resource.

    Every method is a single request through ``client``, an object with a
    ``load(path, method, data)`` method such as
    :class:`razorpayx.utils.http_client.RestClient`. Errors raised by the
    transport are not caught here.
    """

    def __init__(self, client, validate: Optional[bool] = None):
        """
        Args:
            client: REST transport used for every request
            validate: Check create input locally before sending it.
                When None, the RAZORPAYX_VALIDATE_PAYOUTS setting is read at
                call time, so building a client needs no Django settings.
        """
        self.client = client
        self.validate = validate

    def _should_validate(self) -> bool:
        if self.validate is None:
            return config.validate_payouts
        return self.validate

    def create(
        self,
        payout_info: PayoutCreateParams,
        idempotency_key: Optional[str] = None,
    ) -> Payout:
        """
        Create a payout for the given details.
        https://razorpay.com/docs/api/x/payouts/#create-a-payout

        Args:
            payout_info: amount, currency and mode plus exactly one of
                fund_account or fund_account_id. Sent as the request body as is.
            idempotency_key: Optional value for the X-Payout-Idempotency header

        Returns:
            The created payout as returned by the API

        Raises:
            ValidationError: If local validation is enabled and the input is invalid
        """
        if self._should_validate():
            validate_payout_info(payout_info)

        logger.info(
            f"Creating payout: amount={payout_info.get('amount')} "
            f"mode={payout_info.get('mode')} reference={payout_info.get('reference_id')}"
        )

        if idempotency_key:
            payout = self.client.load(
                APIEndpoints.PAYOUTS,
                'POST',
                payout_info,
                headers={IDEMPOTENCY_HEADER: idempotency_key},
            )
        else:
            payout = self.client.load(APIEndpoints.PAYOUTS, 'POST', payout_info)

        logger.info(f"Payout created: {payout.get('id')} status={payout.get('status')}")
        return payout

    def get_all(
        self,
        account_number: str,
        filters: Optional[PayoutFilter] = None,
    ) -> PayoutCollection:
        """
        Fetch all payouts for a source account.
        https://razorpay.com/docs/api/x/payouts/#fetch-all-payouts

        Args:
            account_number: RazorpayX source account number
            filters: Pagination (count, skip, from, to) and any of
                fund_account_id, contact_id, mode, reference_id, status

        Returns:
            Collection envelope with ``count`` and ``items`` in server order
        """
        params = {'account_number': account_number, **(filters or {})}
        logger.info(f"Fetching payouts with filters: {sorted(params)}")
        return self.client.load(APIEndpoints.PAYOUTS, 'GET', params)

    def get(self, payout_id: str) -> Payout:
        """
        Fetch details of a payout.
        https://razorpay.com/docs/api/x/payouts/#fetch-a-payout-by-id
        """
        validate_payout_id(payout_id)
        logger.info(f"Fetching payout: {payout_id}")
        return self.client.load(APIEndpoints.PAYOUT.format(payout_id=payout_id))

    def cancel(self, payout_id: str) -> None:
        """
        Cancel a queued payout.
        https://razorpay.com/docs/api/x/payouts/#cancel-a-queued-payout

        The API rejects the request if the payout is no longer queued.
        """
        validate_payout_id(payout_id)
        logger.info(f"Cancelling payout: {payout_id}")
        self.client.load(APIEndpoints.CANCEL_PAYOUT.format(payout_id=payout_id), 'POST')
