import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_jazzcash_client, is_valid_api_key
from src.api.main import app

HEADERS = {"X-API-KEY": "test-key"}


@pytest.fixture
def api_client(monkeypatch, client):
    monkeypatch.setenv("API_KEYS", "test-key,other-key")
    app.dependency_overrides[get_jazzcash_client] = lambda: client
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_is_public(api_client):
    response = api_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_missing_api_key_is_rejected(api_client):
    response = api_client.post("/api/v1/payments/jazzcash/inquire", json={"reference_id": "T1"})
    assert response.status_code == 401


def test_charge_endpoint_success(api_client, gateway):
    response = api_client.post(
        "/api/v1/payments/jazzcash/charge",
        json={"phone_number": "03001234567", "national_id": "3520112223334", "amount": "500.00"},
        headers=HEADERS,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["reference_id"] == "T20240101120000"
    assert gateway.requests[0]["payload"]["pp_Amount"] == "50000"


def test_inquiry_business_failure_is_422(api_client, gateway):
    gateway.script("124", "Invalid Amount")

    response = api_client.post("/api/v1/payments/jazzcash/inquire", json={"reference_id": "T1"}, headers=HEADERS)

    assert response.status_code == 422
    assert response.json() == {"success": False, "message": "Invalid Amount", "error_type": "InvalidAmount"}


def test_refund_when_gateway_down_is_503(api_client, gateway):
    gateway.go_down()

    response = api_client.post(
        "/api/v1/payments/jazzcash/refund",
        json={"reference_id": "T1", "amount": 10},
        headers={"X-API-KEY": "other-key"},
    )

    assert response.status_code == 503
    assert response.json()["error_type"] == "ServiceDown"


def test_invalid_merchant_is_502(api_client, gateway):
    gateway.script("128", "Invalid Merchant")

    response = api_client.post("/api/v1/payments/jazzcash/inquire", json={"reference_id": "T1"}, headers=HEADERS)

    assert response.status_code == 502
    assert response.json()["error_type"] == "InvalidMerchant"


def test_wrong_api_key_is_rejected(api_client):
    response = api_client.post(
        "/api/v1/payments/jazzcash/inquire", json={"reference_id": "T1"}, headers={"X-API-KEY": "nope"}
    )
    assert response.status_code == 401


def test_is_valid_api_key(monkeypatch):
    monkeypatch.setenv("API_KEYS", " k1 , k2,")
    assert is_valid_api_key("k2")
    assert not is_valid_api_key("k3")
    assert not is_valid_api_key("")
    assert not is_valid_api_key(None)


def test_negative_amount_uses_result_shape(api_client, gateway):
    response = api_client.post(
        "/api/v1/payments/jazzcash/refund", json={"reference_id": "T1", "amount": -1}, headers=HEADERS
    )

    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["error_type"] == "InvalidAmount"
    assert body["message"].startswith("amount:")
    assert gateway.requests == []


def test_missing_phone_uses_result_shape(api_client):
    response = api_client.post(
        "/api/v1/payments/jazzcash/charge", json={"national_id": "3520112223334", "amount": 10}, headers=HEADERS
    )

    assert response.status_code == 422
    assert response.json()["error_type"] == "InvalidPhoneNumber"


def test_missing_reference_is_transaction_failed(api_client):
    response = api_client.post("/api/v1/payments/jazzcash/inquire", json={}, headers=HEADERS)

    assert response.status_code == 422
    assert response.json()["error_type"] == "TransactionFailed"


def test_bad_configuration_while_building_client_is_500(monkeypatch):
    from src.integrations.contracts.exceptions import ConfigurationError

    def broken_client():
        raise ConfigurationError("Invalid JazzCash configuration: JAZZCASH_TIMEOUT_SECONDS")

    monkeypatch.setenv("API_KEYS", "test-key")
    app.dependency_overrides[get_jazzcash_client] = broken_client
    try:
        response = TestClient(app).post("/api/v1/payments/jazzcash/inquire", json={"reference_id": "T1"}, headers=HEADERS)
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "Invalid JazzCash configuration: JAZZCASH_TIMEOUT_SECONDS",
        "error_type": "ConfigurationError",
    }
