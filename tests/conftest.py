"""Pytest fixtures for the JazzCash gateway tests."""

from datetime import datetime

import pytest

from src.integrations.clients.mocks.jazzcash import MockJazzCashGateway
from src.integrations.clients.real_http.jazzcash import JazzCashHttpDispatcher
from src.integrations.contracts.transactions import CustomerRecord
from src.integrations.jazzcash.client import JazzCashClient
from src.integrations.jazzcash.config import JazzCashConfig

FIXED_NOW = datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture
def config():
    return JazzCashConfig(
        base_url="https://sandbox.jazzcash.test",
        charge_path="/ApplicationAPI/API/2.0/Purchase/DoMWalletTransaction",
        inquiry_path="/ApplicationAPI/API/PaymentInquiry/Inquire",
        refund_path="/ApplicationAPI/API/Purchase/domwalletrefundtransaction",
        merchant_id="MC12345",
        merchant_password="pa55word",
        shared_secret="s3cr3t",
    )


@pytest.fixture
def customer():
    return CustomerRecord(phone_number="03001234567", national_id="3520112223334")


@pytest.fixture
def gateway(config):
    return MockJazzCashGateway(shared_secret=config.shared_secret)


@pytest.fixture
def client(config, gateway):
    dispatcher = JazzCashHttpDispatcher(timeout_seconds=5, transport=gateway.transport())
    return JazzCashClient(config, dispatcher=dispatcher, clock=lambda: FIXED_NOW)


@pytest.fixture
def fixed_now():
    return FIXED_NOW
