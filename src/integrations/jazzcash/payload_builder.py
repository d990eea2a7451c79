"""Unsigned JazzCash request payloads, one shape per transaction kind."""

from __future__ import annotations

from typing import Dict

from src.integrations.contracts.transactions import TransactionKind, TransactionRequest
from src.integrations.jazzcash.config import JazzCashConfig

# Required by the gateway's charge schema; always sent empty.
CHARGE_PLACEHOLDER_FIELDS = (
    "pp_SubMerchantID",
    "pp_DiscountedAmount",
    "ppmpf_1",
    "ppmpf_2",
    "ppmpf_3",
    "ppmpf_4",
    "ppmpf_5",
)


def build_payload(request: TransactionRequest, config: JazzCashConfig) -> Dict[str, str]:
    """
    Assemble the unsigned field mapping for ``request``.

    Raises:
        ConfigurationError: if the merchant ID, password or shared secret is blank.
    """
    config.require_credentials()

    builders = {
        TransactionKind.CHARGE: _charge_fields,
        TransactionKind.INQUIRY: _inquiry_fields,
        TransactionKind.REFUND: _refund_fields,
    }
    return builders[request.kind](request, config)


def _charge_fields(request: TransactionRequest, config: JazzCashConfig) -> Dict[str, str]:
    subject = request.subject
    fields = {
        "pp_Language": config.language,
        "pp_MerchantID": config.merchant_id,
        "pp_Password": config.merchant_password,
        "pp_TxnRefNo": request.reference_number,
        "pp_MobileNumber": subject.phone_number,
        "pp_CNIC": subject.national_id,
        "pp_Amount": str(request.amount_minor_units),
        "pp_TxnCurrency": config.currency,
        "pp_TxnDateTime": request.txn_datetime,
        "pp_BillReference": config.bill_reference,
        "pp_Description": config.description,
        "pp_TxnExpiryDateTime": request.expiry_datetime,
        "pp_ReturnURL": config.return_url,
    }
    for name in CHARGE_PLACEHOLDER_FIELDS:
        fields[name] = ""
    return fields


def _inquiry_fields(request: TransactionRequest, config: JazzCashConfig) -> Dict[str, str]:
    return {
        "pp_MerchantID": config.merchant_id,
        "pp_Password": config.merchant_password,
        "pp_TxnRefNo": request.reference_number,
        # Gateway's own spelling.
        "pp_RetreivalReferenceNo": request.reference_number,
        "pp_Language": config.language,
        "pp_TxnCurrency": config.currency,
        "pp_TxnType": config.txn_type,
    }


def _refund_fields(request: TransactionRequest, config: JazzCashConfig) -> Dict[str, str]:
    return {
        "pp_MerchantID": config.merchant_id,
        "pp_Password": config.merchant_password,
        "pp_TxnRefNo": request.reference_number,
        "pp_Amount": str(request.amount_minor_units),
        "pp_TxnDateTime": request.txn_datetime,
        "pp_Description": config.refund_description,
        "pp_Language": config.language,
        "pp_TxnCurrency": config.currency,
        "pp_TxnType": config.txn_type,
        "pp_TxnRefundType": config.refund_type,
    }
