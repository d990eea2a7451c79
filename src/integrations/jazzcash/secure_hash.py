"""
JazzCash secure hash (``pp_SecureHash``).

The gateway recomputes the hash on its side, so the field order, the ``&``
separator and the leading shared secret are part of the wire contract:

    HMAC-SHA256(key=secret, msg="<secret>&<v1>&<v2>&...")  -> lowercase hex

Only the fields in ``HASH_FIELDS`` take part, in that order. A field missing
from the payload is skipped entirely; an empty string is still joined in.
``pp_ReturnURL`` and the charge placeholders are sent but never hashed.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from typing import Dict, Mapping, Optional

from src.integrations.contracts.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SECURE_HASH_FIELD = "pp_SecureHash"
SEPARATOR = "&"

HASH_FIELDS = (
    "pp_Language",
    "pp_MerchantID",
    "pp_Password",
    "pp_TxnRefNo",
    "pp_MobileNumber",
    "pp_CNIC",
    "pp_Amount",
    "pp_TxnCurrency",
    "pp_TxnDateTime",
    "pp_BillReference",
    "pp_Description",
    "pp_TxnExpiryDateTime",
)


def canonical_message(fields: Mapping[str, Optional[str]], shared_secret: str) -> str:
    values = [str(fields[name]) for name in HASH_FIELDS if fields.get(name) is not None]
    return SEPARATOR.join([shared_secret, *values])


def generate_secure_hash(fields: Mapping[str, Optional[str]], shared_secret: str) -> str:
    if not shared_secret or not shared_secret.strip():
        raise ConfigurationError("JazzCash shared secret is not configured")

    message = canonical_message(fields, shared_secret)
    digest = hmac.new(shared_secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()
    logger.debug("JazzCash secure hash computed for %s", fields.get("pp_TxnRefNo"))
    return digest


def sign_payload(fields: Mapping[str, str], shared_secret: str) -> Dict[str, str]:
    """Return a copy of ``fields`` with ``pp_SecureHash`` appended as the last key."""
    signed = {name: value for name, value in fields.items() if name != SECURE_HASH_FIELD}
    signed[SECURE_HASH_FIELD] = generate_secure_hash(signed, shared_secret)
    return signed


def verify_secure_hash(fields: Mapping[str, Optional[str]], shared_secret: str) -> bool:
    """
    Check the ``pp_SecureHash`` carried by a gateway-originated payload
    (e.g. a callback posted to the return URL).
    """
    received = str(fields.get(SECURE_HASH_FIELD) or "").strip().lower()
    if not received:
        return False
    unsigned = {name: value for name, value in fields.items() if name != SECURE_HASH_FIELD}
    expected = generate_secure_hash(unsigned, shared_secret)
    return hmac.compare_digest(expected, received)
