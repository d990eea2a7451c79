"""
Gateway error taxonomy.

Every failure the JazzCash integration can surface has exactly one class here.
Each class carries the ``error_type`` name that callers branch on, so the
boundary (src/error_handler.py) can turn any of them into the uniform
``{success: False, message, error_type}`` shape without a lookup table.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Dict, Type

if TYPE_CHECKING:
    from src.integrations.contracts.transactions import TransactionFailure


class ErrorType(str, Enum):
    CONFIGURATION_ERROR = "ConfigurationError"
    SERVICE_DOWN = "ServiceDown"
    INVALID_AMOUNT = "InvalidAmount"
    INVALID_PHONE_NUMBER = "InvalidPhoneNumber"
    INVALID_CNIC = "InvalidCNIC"
    INVALID_CREDENTIALS = "InvalidCredentials"
    INVALID_MERCHANT = "InvalidMerchant"
    TRANSACTION_FAILED = "TransactionFailed"
    SYSTEM_ERROR = "SystemError"


class JazzCashError(Exception):
    error_type: ErrorType = ErrorType.SYSTEM_ERROR

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    @classmethod
    def from_failure(cls, failure: "TransactionFailure") -> "JazzCashError":
        """Rebuild the exception matching a classified failure."""
        exc_type = EXCEPTIONS_BY_ERROR_TYPE.get(failure.error_type, GatewaySystemError)
        return exc_type(failure.message)


class ConfigurationError(JazzCashError):
    """Merchant credentials are blank or a JAZZCASH_* variable is unusable; nothing may be sent."""

    error_type = ErrorType.CONFIGURATION_ERROR


class ServiceDown(JazzCashError):
    """No usable response was obtained from the gateway."""

    error_type = ErrorType.SERVICE_DOWN


class InvalidAmount(JazzCashError):
    error_type = ErrorType.INVALID_AMOUNT


class InvalidPhoneNumber(JazzCashError):
    error_type = ErrorType.INVALID_PHONE_NUMBER


class InvalidCNIC(JazzCashError):
    error_type = ErrorType.INVALID_CNIC


class InvalidCredentials(JazzCashError):
    error_type = ErrorType.INVALID_CREDENTIALS


class InvalidMerchant(JazzCashError):
    error_type = ErrorType.INVALID_MERCHANT


class TransactionFailed(JazzCashError):
    error_type = ErrorType.TRANSACTION_FAILED


class GatewaySystemError(JazzCashError):
    # Reported as "SystemError"; the class name avoids the builtin.
    error_type = ErrorType.SYSTEM_ERROR


EXCEPTIONS_BY_ERROR_TYPE: Dict[ErrorType, Type[JazzCashError]] = {
    ErrorType.CONFIGURATION_ERROR: ConfigurationError,
    ErrorType.SERVICE_DOWN: ServiceDown,
    ErrorType.INVALID_AMOUNT: InvalidAmount,
    ErrorType.INVALID_PHONE_NUMBER: InvalidPhoneNumber,
    ErrorType.INVALID_CNIC: InvalidCNIC,
    ErrorType.INVALID_CREDENTIALS: InvalidCredentials,
    ErrorType.INVALID_MERCHANT: InvalidMerchant,
    ErrorType.TRANSACTION_FAILED: TransactionFailed,
    ErrorType.SYSTEM_ERROR: GatewaySystemError,
}
