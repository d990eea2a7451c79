"""
Integrations layer.
This package contains all code used to communicate with external systems, i.e.
the JazzCash mobile-wallet payment gateway (charge, inquiry, refund).

Key rule:
- Callers MUST NOT talk to the gateway directly.
- They go through JazzCashClient (src/integrations/jazzcash/client.py), which
  builds, signs, sends and classifies every transaction.
- The HTTP exchange itself lives in clients/real_http; clients/mocks holds an
  in-process stand-in for development and tests.
"""

from .contracts.exceptions import (
    ConfigurationError,
    ErrorType,
    GatewaySystemError,
    InvalidAmount,
    InvalidCNIC,
    InvalidCredentials,
    InvalidMerchant,
    InvalidPhoneNumber,
    JazzCashError,
    ServiceDown,
    TransactionFailed,
)
from .contracts.transactions import (
    CustomerRecord,
    TransactionFailure,
    TransactionKind,
    TransactionOutcome,
    TransactionRequest,
    TransactionSuccess,
    to_minor_units,
)

__all__ = [
    # errors
    "ConfigurationError", "ErrorType", "GatewaySystemError", "InvalidAmount",
    "InvalidCNIC", "InvalidCredentials", "InvalidMerchant", "InvalidPhoneNumber",
    "JazzCashError", "ServiceDown", "TransactionFailed",
    # transactions
    "CustomerRecord", "TransactionFailure", "TransactionKind", "TransactionOutcome",
    "TransactionRequest", "TransactionSuccess", "to_minor_units",
]
