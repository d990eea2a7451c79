"""
Real JazzCash HTTP dispatcher.

Sends one signed payload to the gateway and hands back the parsed reply.
Deciding what the reply *means* is left to
src/integrations/jazzcash/response_classifier.py.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import httpx

from src.integrations.contracts.exceptions import ServiceDown

logger = logging.getLogger(__name__)

_REDACTED_FIELDS = {"pp_Password", "pp_SecureHash"}


@dataclass(frozen=True)
class GatewayResponse:
    status_code: int
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class JazzCashHttpDispatcher:
    def __init__(
        self,
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    def dispatch(self, url: str, payload: Mapping[str, str]) -> GatewayResponse:
        """
        POST ``payload`` as JSON to ``url``.

        Raises:
            ServiceDown: no HTTP response was obtained, or the body is not a
                JSON object, or a non-2xx reply carries no gateway response code.
        """
        headers = {"Content-Type": "application/json"}
        logger.debug("JazzCash request url=%s payload=%s", url, redact(payload))

        try:
            with httpx.Client(timeout=self.timeout_seconds, transport=self.transport) as client:
                response = client.post(url, json=dict(payload), headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("JazzCash request to %s failed: %s", url, exc)
            raise ServiceDown(str(exc) or exc.__class__.__name__) from exc

        logger.debug("JazzCash response status=%s body=%s", response.status_code, response.text)

        try:
            body = response.json()
        except ValueError as exc:
            raise ServiceDown(f"Unreadable JazzCash response (HTTP {response.status_code})") from exc
        if not isinstance(body, dict):
            raise ServiceDown(f"Unexpected JazzCash response (HTTP {response.status_code})")

        if not response.is_success and "pp_ResponseCode" not in body:
            raise ServiceDown(f"JazzCash returned HTTP {response.status_code}")

        return GatewayResponse(status_code=response.status_code, body=body)


def redact(payload: Mapping[str, Any]) -> Dict[str, Any]:
    return {name: ("***" if name in _REDACTED_FIELDS else value) for name, value in payload.items()}
