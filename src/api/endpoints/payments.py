from decimal import Decimal
from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from src.api.dependencies import get_jazzcash_client
from src.integrations.contracts.exceptions import ErrorType
from src.integrations.contracts.transactions import CustomerRecord, TransactionFailure
from src.integrations.jazzcash.client import JazzCashClient

api = APIRouter()
payments_api = api

STATUS_BY_ERROR_TYPE = {
    ErrorType.INVALID_AMOUNT.value: 422,
    ErrorType.INVALID_PHONE_NUMBER.value: 422,
    ErrorType.INVALID_CNIC.value: 422,
    ErrorType.TRANSACTION_FAILED.value: 422,
    ErrorType.INVALID_CREDENTIALS.value: 502,
    ErrorType.INVALID_MERCHANT.value: 502,
    ErrorType.SERVICE_DOWN.value: 503,
    ErrorType.CONFIGURATION_ERROR.value: 500,
    ErrorType.SYSTEM_ERROR.value: 500,
}


class ChargeRequest(BaseModel):
    phone_number: str = Field(..., description="Wallet MSISDN to debit, e.g. 03001234567")
    national_id: str = Field(..., description="CNIC of the wallet holder, digits only")
    amount: Decimal = Field(..., ge=0, description="Amount in PKR (major units)")


class InquiryRequest(BaseModel):
    reference_id: str


class RefundRequest(BaseModel):
    reference_id: str
    amount: Decimal = Field(..., ge=0, description="Amount in PKR (major units)")


@api.post("/jazzcash/charge", tags=["Payments"])
def charge(request: ChargeRequest, client: JazzCashClient = Depends(get_jazzcash_client)):
    user = CustomerRecord(phone_number=request.phone_number, national_id=request.national_id)
    return to_response(client.charge(user=user, amount=request.amount))


@api.post("/jazzcash/inquire", tags=["Payments"])
def inquire(request: InquiryRequest, client: JazzCashClient = Depends(get_jazzcash_client)):
    return to_response(client.inquire(reference_id=request.reference_id))


@api.post("/jazzcash/refund", tags=["Payments"])
def refund(request: RefundRequest, client: JazzCashClient = Depends(get_jazzcash_client)):
    return to_response(client.refund(reference_id=request.reference_id, amount=request.amount))


def to_response(result: Dict[str, Any]) -> JSONResponse:
    if result.get("success"):
        return JSONResponse(status_code=200, content=result)
    return JSONResponse(status_code=STATUS_BY_ERROR_TYPE.get(result.get("error_type"), 500), content=result)


# Body field -> error type reported when it fails validation.
_ERROR_TYPE_BY_FIELD = {
    "amount": ErrorType.INVALID_AMOUNT,
    "phone_number": ErrorType.INVALID_PHONE_NUMBER,
    "national_id": ErrorType.INVALID_CNIC,
}


def validation_failure(errors: List[Dict[str, Any]]) -> TransactionFailure:
    """Collapse FastAPI body validation errors into one gateway-style failure."""
    for error in errors:
        for part in error.get("loc", ()):
            if part in _ERROR_TYPE_BY_FIELD:
                field = ".".join(str(p) for p in error["loc"] if p != "body")
                return TransactionFailure(error_type=_ERROR_TYPE_BY_FIELD[part], message=f"{field}: {error.get('msg')}")
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body") or "body"
    return TransactionFailure(error_type=ErrorType.TRANSACTION_FAILED, message=f"{field}: {first.get('msg', 'invalid request')}")
