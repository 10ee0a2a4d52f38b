"""
FastAPI application for the pet companion AI features.

Features:
- Pet health advisor chat backed by Gemini
- Child-image generation from two parent pets (Gemini vision + Hugging Face SDXL)
- Session-scoped pet listing for the Generate page
"""
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import time
import json
from typing import Any

from config import Config
from common.error_messages import ErrorCode, get_error_response
from common.exceptions import ConfigurationError, PetServiceError
from pets.routes import router as pets_router
from utils.logger import get_logger

logger = get_logger("main")

# Sensitive fields that should be masked in logs
SENSITIVE_FIELDS = {
    'access_token', 'token', 'password', 'refresh_token',
    'api_key', 'secret', 'authorization'
}

MAX_LOGGED_BODY = 2000


def mask_sensitive_data(data: Any, mask_value: str = "***MASKED***") -> Any:
    """
    Recursively mask sensitive fields in data structures.

    Args:
        data: Data to mask (dict, list, or string)
        mask_value: Value to replace sensitive data with

    Returns:
        Data with sensitive fields masked
    """
    if isinstance(data, dict):
        return {
            key: mask_value if key.lower() in SENSITIVE_FIELDS else mask_sensitive_data(value, mask_value)
            for key, value in data.items()
        }
    elif isinstance(data, list):
        return [mask_sensitive_data(item, mask_value) for item in data]
    elif isinstance(data, str):
        # Try to parse as JSON and mask if successful
        try:
            parsed = json.loads(data)
        except (json.JSONDecodeError, ValueError):
            return data
        if isinstance(parsed, (dict, list)):
            return json.dumps(mask_sensitive_data(parsed, mask_value))
        return data
    return data


def _loggable_body(body_bytes: bytes) -> str:
    try:
        text = body_bytes.decode('utf-8')
    except UnicodeDecodeError:
        return f"[{len(body_bytes)} bytes of binary data]"
    masked = mask_sensitive_data(text)
    if len(masked) > MAX_LOGGED_BODY:
        masked = masked[:MAX_LOGGED_BODY] + "... [truncated]"
    return masked


# Validate configuration on startup
try:
    Config.validate()
    logger.info("Configuration validated successfully")
except ConfigurationError as e:
    # Endpoints fail closed per request, so the app still starts
    logger.error(f"Configuration error: {e}")
    logger.error("Please set required environment variables in .env file")

app = FastAPI(
    title="Pet Companion AI API",
    description="Pet health advisor chat and AI child-image generation for the pet management app.",
    version="1.0.0"
)


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------- Error handlers ----------
# Every error body has the shape {"error": "<message>"}.
@app.exception_handler(PetServiceError)
async def pet_service_error_handler(request: Request, exc: PetServiceError):
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.detail or exc.public_message}")
    else:
        logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc.public_message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Request validation failed on {request.url.path}: {exc.errors()}")
    message, status_code = get_error_response(ErrorCode.INVALID_PARAMETER)
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions globally."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    message, status_code = get_error_response(ErrorCode.UNKNOWN_ERROR)
    return JSONResponse(status_code=status_code, content={"error": message})


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests with timing and masked request/response bodies."""
    start_time = time.time()
    full_url = str(request.url)

    log_msg = f"→ {request.method} {full_url} - Client: {request.client.host if request.client else 'unknown'}"
    if request.method in ["POST", "PUT", "PATCH"]:
        body_bytes = await request.body()
        if body_bytes:
            log_msg += f"\n  Request Body: {_loggable_body(body_bytes)}"
    logger.info(log_msg)

    try:
        response = await call_next(request)
    except Exception as e:
        process_time = (time.time() - start_time) * 1000
        logger.error(f"← {request.method} {full_url} - Error: {str(e)} - Time: {process_time:.2f}ms")
        raise

    # Buffer the body so it can be logged, then hand back an equivalent response
    response_body_bytes = b""
    async for chunk in response.body_iterator:
        response_body_bytes += chunk
    response = Response(
        content=response_body_bytes,
        status_code=response.status_code,
        headers=dict(response.headers),
        media_type=response.media_type
    )

    process_time = (time.time() - start_time) * 1000
    log_msg = f"← {request.method} {full_url} - Status: {response.status_code} - Time: {process_time:.2f}ms"
    if response_body_bytes:
        log_msg += f"\n  Response Body: {_loggable_body(response_body_bytes)}"
    logger.info(log_msg)

    return response


app.include_router(pets_router)
logger.info("Pets router included")


@app.on_event("startup")
async def startup_event():
    """Log startup event."""
    logger.info("=" * 80)
    logger.info("Pet Companion AI API starting up")
    logger.info(f"Host: {Config.HOST}:{Config.PORT}")
    logger.info(f"Gemini model: {Config.GEMINI_TEXT_MODEL}")
    logger.info(f"Image model: {Config.HUGGINGFACE_MODEL_URL}")
    logger.info("=" * 80)


@app.on_event("shutdown")
async def shutdown_event():
    """Log shutdown event."""
    logger.info("Pet Companion AI API shutting down")


@app.get("/healthz")
def health():
    """Health check endpoint."""
    return {"status": "ok"}


# Run server directly
if __name__ == "__main__":
    logger.info(f"Starting server on {Config.HOST}:{Config.PORT}")
    uvicorn.run(
        "app:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=True,
        log_level="info"
    )
