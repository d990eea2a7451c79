"""Error handling helpers for the JazzCash client boundary."""
from typing import Any, Dict
import logging

from src.integrations.contracts.exceptions import ErrorType, JazzCashError
from src.integrations.contracts.transactions import TransactionFailure

logger = logging.getLogger(__name__)


class ErrorHandler:
    def to_failure(self, exc: Exception, context: Dict[str, Any] = None) -> TransactionFailure:
        if isinstance(exc, JazzCashError):
            logger.warning("JazzCash %s: %s (context=%s)", exc.error_type.value, exc.message, context or {})
            return TransactionFailure(error_type=exc.error_type, message=exc.message)

        logger.error("Unhandled exception in JazzCash client: %s", exc, exc_info=True)
        return TransactionFailure(error_type=ErrorType.SYSTEM_ERROR, message=str(exc) or exc.__class__.__name__)

    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        return self.to_failure(exc, context).to_dict()
