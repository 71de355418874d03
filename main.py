"""
FastAPI application for verifying OCR output.
Compares recognized text with embedded reference text and mines document metadata.
"""
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from src.api.routes import health, verification
from src.core.logging import setup_logging
from src.core.error_handling import http_exception_handler, validation_exception_handler
from src.core.middleware import RequestIDMiddleware

# Configure logging
setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="OCR Verification",
    description="API for verifying OCR text against embedded text and extracting document metadata",
    version="1.0.0"
)

# Middleware
app.add_middleware(RequestIDMiddleware)

# Add exception handlers
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Include routers
app.include_router(health.router)
app.include_router(verification.router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000, workers=1)
