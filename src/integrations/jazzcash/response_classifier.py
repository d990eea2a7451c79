from __future__ import annotations

from typing import Any, Dict, Optional

from src.integrations.clients.real_http.jazzcash import GatewayResponse
from src.integrations.contracts.exceptions import ErrorType
from src.integrations.contracts.transactions import (
    TransactionFailure,
    TransactionKind,
    TransactionOutcome,
    TransactionSuccess,
)

SUCCESS_CODE = "000"

ERROR_TYPES_BY_CODE: Dict[str, ErrorType] = {
    "124": ErrorType.INVALID_AMOUNT,
    "125": ErrorType.INVALID_PHONE_NUMBER,
    "126": ErrorType.INVALID_CNIC,
    "127": ErrorType.INVALID_CREDENTIALS,
    "128": ErrorType.INVALID_MERCHANT,
}


def classify_failure(code: Optional[str], message: Optional[str]) -> TransactionFailure:
    """Map a non-success gateway code to its failure; unknown codes are TransactionFailed."""
    error_type = ERROR_TYPES_BY_CODE.get(_normalize_code(code), ErrorType.TRANSACTION_FAILED)
    return TransactionFailure(error_type=error_type, message=message or "")


def classify_response(kind: TransactionKind, response: GatewayResponse) -> TransactionOutcome:
    """
    Turn a gateway reply into an outcome.

    The gateway reports business results through ``pp_ResponseCode`` and may
    do so on a 2xx or a non-2xx response; only a 2xx carrying ``"000"`` is a
    success.
    """
    body = response.body
    code = _normalize_code(body.get("pp_ResponseCode"))
    message = body.get("pp_ResponseMessage")

    if response.is_success and code == SUCCESS_CODE:
        return _shape_success(kind, body)
    return classify_failure(code, message)


def _shape_success(kind: TransactionKind, body: Dict[str, Any]) -> TransactionSuccess:
    return TransactionSuccess(
        kind=kind,
        reference_id=body.get("pp_TxnRefNo"),
        message=body.get("pp_ResponseMessage"),
        raw_response=body,
        status=body.get("pp_TxnStatus") if kind == TransactionKind.INQUIRY else None,
    )


def _normalize_code(code: Any) -> Optional[str]:
    if code is None:
        return None
    return str(code).strip()
