import hmac
import logging
import os
from functools import lru_cache
from typing import List, Optional

from fastapi import Header, HTTPException, Request, status

from src.integrations.jazzcash.client import JazzCashClient

logger = logging.getLogger(__name__)

# Reachable without X-API-KEY.
PUBLIC_PATHS = frozenset({"/health", "/docs", "/docs/oauth2-redirect", "/openapi.json", "/redoc"})


def configured_api_keys() -> List[str]:
    """Comma-separated ``API_KEYS``; read per request so rotation needs no restart."""
    return [key.strip() for key in os.getenv("API_KEYS", "").split(",") if key.strip()]


def is_valid_api_key(candidate: Optional[str]) -> bool:
    candidate = (candidate or "").strip()
    if not candidate:
        return False
    return any(hmac.compare_digest(candidate, key) for key in configured_api_keys())


async def api_key_protection(
    request: Request,
    x_api_key: Optional[str] = Header(default=None, alias="X-API-KEY"),
):
    if request.url.path in PUBLIC_PATHS:
        return
    if not is_valid_api_key(x_api_key):
        logger.info("Rejected %s %s: %s X-API-KEY", request.method, request.url.path, "bad" if x_api_key else "no")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API Key",
        )


@lru_cache(maxsize=1)
def get_jazzcash_client() -> JazzCashClient:
    """One process-wide client; its configuration is read once and never changes."""
    return JazzCashClient.from_env()
