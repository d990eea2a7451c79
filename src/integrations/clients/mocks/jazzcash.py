"""
JazzCash gateway: MOCK transport.

⚠️  This is a mock implementation for development and testing.
    It plugs into JazzCashHttpDispatcher as an httpx transport, so the real
    payload building, signing and classification code runs unchanged while
    no request leaves the process.

Scenarios are configured per reference number, per amount, or for every
request via ``script``; ``go_down`` makes every call fail at the transport
level.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from src.integrations.contracts.transactions import to_minor_units
from src.integrations.jazzcash.secure_hash import verify_secure_hash

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Thank you for Using JazzCash, your transaction was successful."
INVALID_HASH_CODE = "110"

DEFAULT_MESSAGES: Dict[str, str] = {
    "000": SUCCESS_MESSAGE,
    "110": "Invalid secure hash",
    "124": "Invalid Amount",
    "125": "Invalid Mobile Number",
    "126": "Invalid CNIC",
    "127": "Invalid Credentials",
    "128": "Invalid Merchant",
}


@dataclass
class _Scenario:
    code: str
    message: str
    status_code: int = 200


class MockJazzCashGateway:
    def __init__(self, shared_secret: str, txn_status: str = "Completed") -> None:
        self.shared_secret = shared_secret
        self.txn_status = txn_status
        self.requests: List[Dict[str, Any]] = []
        self._by_reference: Dict[str, _Scenario] = {}
        self._by_amount: Dict[str, _Scenario] = {}
        self._default: Optional[_Scenario] = None
        self._outage: Optional[str] = None

    # -- Configuration --

    def script(
        self,
        code: str,
        message: Optional[str] = None,
        reference: Optional[str] = None,
        amount: Any = None,
        status_code: int = 200,
    ) -> None:
        """
        Answer ``code`` for ``reference``, for ``amount`` (major units, matched
        against ``pp_Amount``), or for every request when neither is given.

        Lookup order: reference, then amount, then the catch-all.
        """
        scenario = _Scenario(
            code=code,
            message=message if message is not None else DEFAULT_MESSAGES.get(code, "Transaction failed"),
            status_code=status_code,
        )
        if reference is not None:
            self._by_reference[reference] = scenario
        elif amount is not None:
            self._by_amount[str(to_minor_units(amount))] = scenario
        else:
            self._default = scenario

    def go_down(self, reason: str = "JazzCash sandbox unreachable") -> None:
        self._outage = reason

    def recover(self) -> None:
        self._outage = None

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    # -- Request handling --

    def handle(self, request: httpx.Request) -> httpx.Response:
        if self._outage:
            logger.info("[MOCK] JazzCash outage: %s", self._outage)
            raise httpx.ConnectTimeout(self._outage, request=request)

        payload = json.loads(request.content or b"{}")
        self.requests.append({"url": str(request.url), "headers": dict(request.headers), "payload": payload})

        reference = payload.get("pp_TxnRefNo")
        logger.info("[MOCK] JazzCash %s for %s", request.url.path, reference)

        if not verify_secure_hash(payload, self.shared_secret):
            return self._reply(reference, _Scenario(INVALID_HASH_CODE, DEFAULT_MESSAGES[INVALID_HASH_CODE]), payload)

        scenario = (
            self._by_reference.get(reference)
            or self._by_amount.get(payload.get("pp_Amount"))
            or self._default
            or _Scenario("000", SUCCESS_MESSAGE)
        )
        return self._reply(reference, scenario, payload)

    def _reply(self, reference: Optional[str], scenario: _Scenario, payload: Dict[str, Any]) -> httpx.Response:
        body: Dict[str, Any] = {
            "pp_ResponseCode": scenario.code,
            "pp_ResponseMessage": scenario.message,
            "pp_TxnRefNo": reference,
        }
        if "pp_Amount" in payload:
            body["pp_Amount"] = payload["pp_Amount"]
        if "pp_RetreivalReferenceNo" in payload:
            body["pp_TxnStatus"] = self.txn_status
        return httpx.Response(scenario.status_code, json=body)
