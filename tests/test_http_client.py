import logging

import pytest
import requests

from razorpayx.exceptions import (
    APIError,
    AuthenticationError,
    BadRequestError,
    ConnectionFailedError,
    NotFoundError,
    ServerError,
)
from razorpayx.services.payout_service import PayoutClient
from razorpayx.utils.http_client import RestClient

from tests.fakes import FakeResponse, FakeSession, make_payout


def _client(outcomes, **kwargs):
    session = FakeSession(outcomes)
    client = RestClient(
        "https://api.razorpay.com/v1/",
        "rzp_test_key",
        "rzp_test_secret",
        session=session,
        **kwargs,
    )
    return client, session


def _error_body(code, description, **extra):
    return {"error": {"code": code, "description": description, **extra}}


def test_get_sends_query_params_with_basic_auth():
    collection = {"entity": "collection", "count": 0, "items": []}
    client, session = _client([FakeResponse(200, collection)])

    result = client.load("/payouts", "GET", {"account_number": "7878780080316316"})

    assert result == collection
    sent = session.requests[0]
    assert sent["method"] == "GET"
    assert sent["url"] == "https://api.razorpay.com/v1/payouts"
    assert sent["params"] == {"account_number": "7878780080316316"}
    assert "json" not in sent
    assert session.auth == ("rzp_test_key", "rzp_test_secret")


def test_post_sends_json_body():
    body = {"amount": 1000, "currency": "INR", "mode": "UPI", "fund_account_id": "fa_1"}
    client, session = _client([FakeResponse(200, make_payout())])

    client.load("/payouts", "POST", body, headers={"X-Payout-Idempotency": "k1"})

    sent = session.requests[0]
    assert sent["method"] == "POST"
    assert sent["json"] == body
    assert sent["headers"]["Content-Type"] == "application/json"
    assert sent["headers"]["X-Payout-Idempotency"] == "k1"
    assert sent["timeout"] == 30


def test_empty_success_body_decodes_to_none():
    client, _ = _client([FakeResponse(204), FakeResponse(200)])

    assert client.load("/payouts/pout_1/cancel", "POST") is None
    assert client.load("/payouts/pout_1/cancel", "POST") is None


def test_default_method_is_get():
    client, session = _client([FakeResponse(200, make_payout())])

    client.load("/payouts/pout_00000000000001")

    assert session.requests[0]["method"] == "GET"
    assert session.requests[0]["params"] is None


@pytest.mark.parametrize(
    "status, error_class",
    [
        (400, BadRequestError),
        (401, AuthenticationError),
        (403, AuthenticationError),
        (404, NotFoundError),
        (409, APIError),
        (500, ServerError),
        (503, ServerError),
    ],
)
def test_error_status_maps_to_exception(status, error_class):
    body = _error_body("SOME_ERROR", "Something went wrong", source="business", reason="x")
    client, _ = _client([FakeResponse(status, body)])

    with pytest.raises(error_class) as excinfo:
        client.load("/payouts")

    error = excinfo.value
    assert error.status_code == status
    assert error.message == "Something went wrong"
    assert error.error_code == "SOME_ERROR"
    assert error.source == "business"
    assert error.reason == "x"


def test_cancel_error_keeps_server_description():
    body = _error_body(
        "BAD_REQUEST_ERROR",
        "Payout can be cancelled only when it is in queued state",
        field=None,
    )
    client, _ = _client([FakeResponse(400, body)])

    with pytest.raises(BadRequestError) as excinfo:
        client.load("/payouts/pout_1/cancel", "POST")

    assert "queued state" in str(excinfo.value)
    assert excinfo.value.error_code == "BAD_REQUEST_ERROR"


def test_error_without_json_body_uses_text():
    client, _ = _client([FakeResponse(502, text="Bad Gateway")])

    with pytest.raises(ServerError) as excinfo:
        client.load("/payouts")

    assert excinfo.value.message == "Bad Gateway"
    assert excinfo.value.error_code is None


def test_undecodable_success_body_raises_api_error():
    client, _ = _client([FakeResponse(200, text="<html>")])

    with pytest.raises(APIError) as excinfo:
        client.load("/payouts")

    assert "Failed to parse API response" in excinfo.value.message


def test_connection_errors_are_retried(caplog):
    caplog.set_level(logging.WARNING)
    payout = make_payout()
    client, session = _client(
        [requests.ConnectionError("reset"), requests.Timeout("slow"), FakeResponse(200, payout)],
        max_retries=3,
    )

    assert client.load("/payouts/pout_00000000000001") == payout
    assert len(session.requests) == 3
    assert any("attempt 1/3" in record.message for record in caplog.records)


def test_connection_failure_after_all_retries():
    client, session = _client(
        [requests.ConnectionError("down"), requests.ConnectionError("down")],
        max_retries=2,
    )

    with pytest.raises(ConnectionFailedError):
        client.load("/payouts")

    assert len(session.requests) == 2


def test_http_errors_are_not_retried():
    client, session = _client([FakeResponse(500, _error_body("SERVER_ERROR", "oops"))])

    with pytest.raises(ServerError):
        client.load("/payouts", "POST", {"amount": 1})

    assert len(session.requests) == 1


def test_authorization_header_is_masked_in_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="razorpayx.utils.http_client")
    client, _ = _client([FakeResponse(200, make_payout())])

    client.load("/payouts/pout_1", headers={"Authorization": "Basic c2VjcmV0"})

    assert "c2VjcmV0" not in caplog.text
    assert "Basic ***" in caplog.text


def test_key_secret_never_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="razorpayx")
    client, session = _client(
        [FakeResponse(200, make_payout()), FakeResponse(400, _error_body("BAD_REQUEST_ERROR", "bad"))]
    )

    client.load("/payouts/pout_1")
    with pytest.raises(BadRequestError):
        client.load("/payouts", "POST", {"amount": 100, "fund_account_id": "fa_1"})

    assert session.auth == ("rzp_test_key", "rzp_test_secret")
    assert caplog.records
    assert "rzp_test_secret" not in caplog.text


def test_context_manager_closes_session():
    client, session = _client([])

    with client:
        pass

    assert session.closed is True


def test_create_is_not_resent_after_read_timeout():
    client, session = _client(
        [requests.ReadTimeout("no response"), FakeResponse(200, make_payout())],
        max_retries=3,
    )
    payouts = PayoutClient(client)

    with pytest.raises(ConnectionFailedError):
        payouts.create({"amount": 1000, "currency": "INR", "mode": "UPI", "fund_account_id": "fa_1"})

    assert len(session.requests) == 1
    assert session.requests[0]["method"] == "POST"


def test_post_is_not_resent_after_connection_error():
    client, session = _client([requests.ConnectionError("reset by peer"), FakeResponse(204)])

    with pytest.raises(ConnectionFailedError):
        client.load("/payouts/pout_1/cancel", "POST")

    assert len(session.requests) == 1


def test_post_is_retried_after_connect_timeout():
    payout = make_payout()
    client, session = _client([requests.ConnectTimeout("no connection"), FakeResponse(200, payout)])

    assert client.load("/payouts", "POST", {"amount": 1000}) == payout
    assert len(session.requests) == 2


def test_post_with_idempotency_key_is_retried_after_read_timeout():
    payout = make_payout()
    client, session = _client([requests.ReadTimeout("no response"), FakeResponse(200, payout)])

    result = client.load(
        "/payouts", "POST", {"amount": 1000}, headers={"X-Payout-Idempotency": "idem-1"}
    )

    assert result == payout
    assert len(session.requests) == 2
    assert all(r["headers"]["X-Payout-Idempotency"] == "idem-1" for r in session.requests)
