"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError

from src.api.dependencies import api_key_protection
from src.api.endpoints.payments import payments_api, to_response, validation_failure
from src.error_handler import ErrorHandler
from src.integrations.contracts.exceptions import JazzCashError

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="JazzCash Gateway API",
    description="Charge, inquiry and refund against the JazzCash mobile-wallet gateway",
    version="1.0.0",
    dependencies=[Depends(api_key_protection)],  # protect everything by default
)

# Register payments API router
app.include_router(payments_api, prefix="/api/v1/payments", tags=["Payments"])

error_handler = ErrorHandler()


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    failure = validation_failure(list(exc.errors()))
    logger.info("Rejected %s body: %s", request.url.path, failure.message)
    return to_response(failure.to_dict())


# Raised outside JazzCashClient, e.g. by JazzCashConfig.from_env() while
# resolving the client dependency.
@app.exception_handler(JazzCashError)
async def jazzcash_error_handler(request: Request, exc: JazzCashError):
    return to_response(error_handler.handle_exception(exc, context={"path": request.url.path}))


@app.get("/health")
def health():
    return {"status": "ok"}
