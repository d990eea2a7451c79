from src.integrations.clients.mocks.jazzcash import INVALID_HASH_CODE, MockJazzCashGateway
from src.integrations.clients.real_http.jazzcash import JazzCashHttpDispatcher
from src.integrations.jazzcash.client import JazzCashClient


def test_scripted_reply_applies_only_to_its_reference(client, gateway):
    gateway.script("125", reference="T-phone")

    scripted = client.inquire(reference_id="T-phone")
    default = client.inquire(reference_id="T-other")

    assert scripted == {"success": False, "error_type": "InvalidPhoneNumber", "message": "Invalid Mobile Number"}
    assert default["success"] is True


def test_wrong_secret_is_rejected_by_gateway(config, fixed_now):
    gateway = MockJazzCashGateway(shared_secret="not-the-merchant-secret")
    dispatcher = JazzCashHttpDispatcher(transport=gateway.transport())
    client = JazzCashClient(config, dispatcher=dispatcher, clock=lambda: fixed_now)

    result = client.inquire(reference_id="T1")

    assert result["success"] is False
    assert result["error_type"] == "TransactionFailed"
    assert result["message"] == "Invalid secure hash"
    assert INVALID_HASH_CODE == "110"


def test_outage_and_recovery(client, gateway, customer):
    gateway.go_down()
    assert client.charge(user=customer, amount=1)["error_type"] == "ServiceDown"

    gateway.recover()
    assert client.charge(user=customer, amount=1)["success"] is True


def test_refund_reply_echoes_amount(client, gateway):
    result = client.refund(reference_id="T1", amount=3)

    assert result["raw_response"]["pp_Amount"] == "300"
    assert "pp_TxnStatus" not in result["raw_response"]


def test_scripted_reply_by_amount(client, gateway, customer):
    gateway.script("124", amount="999.99")

    rejected = client.charge(user=customer, amount=999.99)
    accepted = client.charge(user=customer, amount=10)

    assert rejected == {"success": False, "error_type": "InvalidAmount", "message": "Invalid Amount"}
    assert accepted["success"] is True


def test_scripted_reply_lookup_order(client, gateway):
    gateway.script("128", "Invalid Merchant")
    gateway.script("124", "Invalid Amount", amount=5)
    gateway.script("126", "Invalid CNIC", reference="T-ref")

    assert client.refund(reference_id="T-ref", amount=5)["error_type"] == "InvalidCNIC"
    assert client.refund(reference_id="T-other", amount=5)["error_type"] == "InvalidAmount"
    assert client.refund(reference_id="T-other", amount=6)["error_type"] == "InvalidMerchant"
