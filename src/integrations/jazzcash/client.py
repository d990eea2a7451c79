"""
JazzCash client facade.

    client = JazzCashClient.from_env()
    client.charge(user=user, amount=500)
    client.inquire(reference_id="T20240101120000")
    client.refund(reference_id="T20240101120000", amount=500)

Every call returns a plain dict and never raises. The client only holds the
read-only configuration and the dispatcher; each call builds its own
TransactionRequest and payload, so one instance can be shared freely.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from src.error_handler import ErrorHandler
from src.integrations.clients.real_http.jazzcash import JazzCashHttpDispatcher
from src.integrations.contracts.transactions import (
    TransactionOutcome,
    TransactionRequest,
)
from src.integrations.jazzcash.config import JazzCashConfig
from src.integrations.jazzcash.payload_builder import build_payload
from src.integrations.jazzcash.response_classifier import classify_response
from src.integrations.jazzcash.secure_hash import sign_payload

logger = logging.getLogger(__name__)


class JazzCashClient:
    def __init__(
        self,
        config: JazzCashConfig,
        dispatcher: Optional[JazzCashHttpDispatcher] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.config = config
        self.dispatcher = dispatcher or JazzCashHttpDispatcher(timeout_seconds=config.timeout_seconds)
        self.clock = clock or datetime.now
        self.error_handler = ErrorHandler()

    @classmethod
    def from_env(cls) -> "JazzCashClient":
        return cls(JazzCashConfig.from_env())

    def charge(self, user: Any, amount: Any) -> Dict[str, Any]:
        return self._run(lambda: TransactionRequest.for_charge(user, amount, now=self.clock()), operation="charge")

    def inquire(self, reference_id: str) -> Dict[str, Any]:
        return self._run(lambda: TransactionRequest.for_inquiry(reference_id), operation="inquire")

    def refund(self, reference_id: str, amount: Any) -> Dict[str, Any]:
        return self._run(
            lambda: TransactionRequest.for_refund(reference_id, amount, now=self.clock()),
            operation="refund",
        )

    def execute(self, request: TransactionRequest) -> TransactionOutcome:
        """
        Build, sign, send and classify one transaction.

        Business rejections come back as TransactionFailure values; only
        configuration and transport problems raise.
        """
        payload = build_payload(request, self.config)
        signed = sign_payload(payload, self.config.shared_secret)
        url = self.config.url_for(request.kind)

        response = self.dispatcher.dispatch(url, signed)
        outcome = classify_response(request.kind, response)

        if outcome.success:
            logger.info("JazzCash %s %s succeeded", request.kind.value.lower(), request.reference_number)
        else:
            logger.warning(
                "JazzCash %s %s rejected: %s %s",
                request.kind.value.lower(),
                request.reference_number,
                outcome.error_type.value,
                outcome.message,
            )
        return outcome

    def _run(self, make_request: Callable[[], TransactionRequest], operation: str) -> Dict[str, Any]:
        try:
            return self.execute(make_request()).to_dict()
        except Exception as exc:
            return self.error_handler.handle_exception(exc, context={"operation": operation})
