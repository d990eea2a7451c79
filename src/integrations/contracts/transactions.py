"""
Transaction contracts for the JazzCash mobile-wallet gateway.

Defines the per-call request value, the outcome shapes returned to callers,
and the small conversions (amounts, timestamps, reference numbers) the
gateway's wire format depends on.

Every object here is built fresh for a single charge / inquiry / refund and
discarded once the outcome is produced. Nothing is stored on the client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import ROUND_DOWN, Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Optional, Union

from src.integrations.contracts.exceptions import (
    ErrorType,
    InvalidAmount,
    InvalidCNIC,
    InvalidPhoneNumber,
    TransactionFailed,
)

GATEWAY_DATETIME_FORMAT = "%Y%m%d%H%M%S"
REFERENCE_PREFIX = "T"
EXPIRY_WINDOW = timedelta(days=2)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class TransactionKind(str, Enum):
    CHARGE = "CHARGE"
    INQUIRY = "INQUIRY"
    REFUND = "REFUND"


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

def to_minor_units(amount: Any) -> int:
    """
    Convert a major-unit amount (rupees) into minor units (paisa).

    Fractions below one paisa are truncated, never rounded:
    ``12.50 -> 1250``, ``10 -> 1000``, ``9.999 -> 999``.
    """
    try:
        value = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmount(f"Invalid amount: {amount!r}") from exc
    if not value.is_finite():
        raise InvalidAmount(f"Invalid amount: {amount!r}")
    if value < 0:
        raise InvalidAmount(f"Amount must be >= 0; got {amount}.")
    return int((value * 100).to_integral_value(rounding=ROUND_DOWN))


def format_gateway_datetime(moment: datetime) -> str:
    return moment.strftime(GATEWAY_DATETIME_FORMAT)


def generate_reference_number(now: datetime) -> str:
    return f"{REFERENCE_PREFIX}{format_gateway_datetime(now)}"


def _require_reference(reference_number: Optional[str]) -> str:
    reference = (reference_number or "").strip()
    if not reference:
        raise TransactionFailed("Reference number is required")
    return reference


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CustomerRecord:
    """The paying party of a charge."""
    phone_number: str
    national_id: str                     # CNIC, digits only

    @classmethod
    def from_user(cls, user: Any) -> "CustomerRecord":
        """
        Accept any user-like object.

        Reads ``phone_number`` / ``national_id`` and falls back to the
        ``phone_no`` / ``id_card`` attribute names used by older user records.
        """
        if isinstance(user, dict):
            phone = user.get("phone_number", user.get("phone_no"))
            national_id = user.get("national_id", user.get("id_card"))
        else:
            phone = getattr(user, "phone_number", getattr(user, "phone_no", None))
            national_id = getattr(user, "national_id", getattr(user, "id_card", None))

        phone = str(phone or "").strip()
        national_id = str(national_id or "").strip()
        if not phone:
            raise InvalidPhoneNumber("Customer phone number is required")
        if not national_id:
            raise InvalidCNIC("Customer CNIC is required")
        return cls(phone_number=phone, national_id=national_id)


@dataclass(frozen=True)
class TransactionRequest:
    kind: TransactionKind
    reference_number: str
    amount_minor_units: Optional[int] = None
    txn_datetime: Optional[str] = None        # YYYYMMDDHHMMSS
    expiry_datetime: Optional[str] = None     # charge only
    subject: Optional[CustomerRecord] = None  # charge only

    def __post_init__(self) -> None:
        if not isinstance(self.reference_number, str) or not self.reference_number.strip():
            raise TransactionFailed("Reference number is required")
        if self.kind == TransactionKind.INQUIRY:
            return

        amount = self.amount_minor_units
        if not isinstance(amount, int) or isinstance(amount, bool) or amount < 0:
            raise InvalidAmount(f"Amount in minor units must be an integer >= 0; got {amount!r}.")
        if not self.txn_datetime:
            raise TransactionFailed("Transaction datetime is required")

        if self.kind == TransactionKind.CHARGE:
            if not self.expiry_datetime:
                raise TransactionFailed("Expiry datetime is required for a charge")
            if self.subject is None or not (self.subject.phone_number or "").strip():
                raise InvalidPhoneNumber("Customer phone number is required")
            if not (self.subject.national_id or "").strip():
                raise InvalidCNIC("Customer CNIC is required")

    @classmethod
    def for_charge(cls, user: Any, amount: Any, now: Optional[datetime] = None) -> "TransactionRequest":
        now = now or datetime.now()
        return cls(
            kind=TransactionKind.CHARGE,
            reference_number=generate_reference_number(now),
            amount_minor_units=to_minor_units(amount),
            txn_datetime=format_gateway_datetime(now),
            expiry_datetime=format_gateway_datetime(now + EXPIRY_WINDOW),
            subject=CustomerRecord.from_user(user),
        )

    @classmethod
    def for_inquiry(cls, reference_number: str) -> "TransactionRequest":
        return cls(
            kind=TransactionKind.INQUIRY,
            reference_number=_require_reference(reference_number),
        )

    @classmethod
    def for_refund(cls, reference_number: str, amount: Any, now: Optional[datetime] = None) -> "TransactionRequest":
        now = now or datetime.now()
        return cls(
            kind=TransactionKind.REFUND,
            reference_number=_require_reference(reference_number),
            amount_minor_units=to_minor_units(amount),
            txn_datetime=format_gateway_datetime(now),
        )


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TransactionSuccess:
    kind: TransactionKind
    reference_id: Optional[str]
    message: Optional[str]
    raw_response: Dict[str, Any] = field(default_factory=dict)
    status: Optional[str] = None              # inquiry only

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "success": True,
            "reference_id": self.reference_id,
            "message": self.message,
            "raw_response": self.raw_response,
        }
        if self.kind == TransactionKind.INQUIRY:
            result["status"] = self.status
        return result


@dataclass(frozen=True)
class TransactionFailure:
    error_type: ErrorType
    message: str

    @property
    def success(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": False,
            "message": self.message,
            "error_type": self.error_type.value,
        }


TransactionOutcome = Union[TransactionSuccess, TransactionFailure]
