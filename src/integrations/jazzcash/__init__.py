"""
JazzCash mobile-wallet gateway.

Pipeline for every transaction:
    payload_builder  -> unsigned pp_* fields for charge / inquiry / refund
    secure_hash      -> pp_SecureHash appended last
    clients/real_http/jazzcash.py -> one JSON POST
    response_classifier -> TransactionSuccess / TransactionFailure

JazzCashClient (client.py) wires these together and is the only entry point
callers should need.
"""

from .client import JazzCashClient
from .config import JazzCashConfig
from .payload_builder import build_payload
from .response_classifier import SUCCESS_CODE, classify_failure, classify_response
from .secure_hash import HASH_FIELDS, generate_secure_hash, sign_payload, verify_secure_hash

__all__ = [
    "JazzCashClient", "JazzCashConfig", "build_payload",
    "SUCCESS_CODE", "classify_failure", "classify_response",
    "HASH_FIELDS", "generate_secure_hash", "sign_payload", "verify_secure_hash",
]
