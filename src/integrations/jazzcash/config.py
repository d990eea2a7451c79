"""
JazzCash merchant configuration.

Loaded once per process from environment variables (a local ``.env`` file is
honoured through python-dotenv) and never mutated afterwards.
"""

from __future__ import annotations

import logging
import os
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.integrations.contracts.exceptions import ConfigurationError
from src.integrations.contracts.transactions import TransactionKind

logger = logging.getLogger(__name__)

# Model field -> environment variable.
ENV_VARIABLES = {
    "base_url": "JAZZCASH_URL",
    "charge_path": "JAZZCASH_CHARGE_PATH",
    "inquiry_path": "JAZZCASH_INQUIRY_PATH",
    "refund_path": "JAZZCASH_REFUND_PATH",
    "merchant_id": "JAZZCASH_MERCHANT_ID",
    "merchant_password": "JAZZCASH_MERCHANT_PASSWORD",
    "shared_secret": "JAZZCASH_SHARED_SECRET",
    "timeout_seconds": "JAZZCASH_TIMEOUT_SECONDS",
    "return_url": "JAZZCASH_RETURN_URL",
    "description": "JAZZCASH_DESCRIPTION",
    "refund_description": "JAZZCASH_REFUND_DESCRIPTION",
    "bill_reference": "JAZZCASH_BILL_REFERENCE",
}


class JazzCashConfig(BaseModel):
    """Endpoint, credentials and fixed gateway literals for one merchant."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default="", description="Sandbox or production host, e.g. https://sandbox.jazzcash.com.pk")
    charge_path: str = ""
    inquiry_path: str = ""
    refund_path: str = ""

    merchant_id: str = ""
    merchant_password: str = Field(default="", repr=False)
    shared_secret: str = Field(default="", repr=False)

    timeout_seconds: float = Field(default=30.0, gt=0)

    language: str = "EN"
    currency: str = "PKR"
    txn_type: str = "MWALLET"
    refund_type: str = "FULL"
    bill_reference: str = "billref"
    description: str = "Snooker Slam Payment"
    refund_description: str = "Refund for Snooker Slam Payment"
    return_url: str = "https://snookerslam.com/jazzcash/callback"

    @classmethod
    def from_env(cls) -> "JazzCashConfig":
        """
        Load configuration from environment variables.

        Raises:
            ConfigurationError: if a variable holds an unusable value
                (e.g. a non-numeric or non-positive JAZZCASH_TIMEOUT_SECONDS).
        """
        load_dotenv()

        values = {field: os.getenv(env_name) for field, env_name in ENV_VARIABLES.items()}
        try:
            return cls(**{field: value for field, value in values.items() if value is not None})
        except ValidationError as exc:
            names = sorted({ENV_VARIABLES.get(str(error["loc"][0]), str(error["loc"][0])) for error in exc.errors()})
            logger.error("Invalid JazzCash configuration: %s", ", ".join(names))
            raise ConfigurationError(f"Invalid JazzCash configuration: {', '.join(names)}") from exc

    def missing_credentials(self) -> List[str]:
        missing = []
        if not self.merchant_id.strip():
            missing.append("JAZZCASH_MERCHANT_ID")
        if not self.merchant_password.strip():
            missing.append("JAZZCASH_MERCHANT_PASSWORD")
        if not self.shared_secret.strip():
            missing.append("JAZZCASH_SHARED_SECRET")
        return missing

    def require_credentials(self) -> None:
        missing = self.missing_credentials()
        if missing:
            logger.error("JazzCash credentials are not configured: %s", ", ".join(missing))
            raise ConfigurationError(f"JazzCash credentials are not configured: {', '.join(missing)}")

    def url_for(self, kind: TransactionKind) -> str:
        paths = {
            TransactionKind.CHARGE: self.charge_path,
            TransactionKind.INQUIRY: self.inquiry_path,
            TransactionKind.REFUND: self.refund_path,
        }
        return f"{self.base_url}{paths[kind]}"
