"""
User-facing error messages and status codes.

This module provides centralized error message definitions so that route
handlers never leak technical implementation details to the client.
"""
from typing import Tuple
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for different types of failures."""

    # Session Errors (401)
    INVALID_TOKEN = "INVALID_TOKEN"

    # Validation Errors (400)
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_PARAMETER = "INVALID_PARAMETER"

    # External API Errors
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"

    # Generation Errors (500)
    CHAT_FAILED = "CHAT_FAILED"
    IMAGE_GENERATION_FAILED = "IMAGE_GENERATION_FAILED"

    # Configuration Errors (500)
    MISSING_API_KEY = "MISSING_API_KEY"

    # Generic Errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


ERROR_MESSAGES = {
    ErrorCode.INVALID_TOKEN: "Your session is invalid. Please log in again.",

    ErrorCode.MISSING_FIELD: "Required information is missing. Please check your input and try again.",
    ErrorCode.INVALID_PARAMETER: "One or more parameters are invalid. Please review your request and try again.",

    ErrorCode.EXTERNAL_SERVICE_ERROR: "An external service is temporarily unavailable. Please try again later.",

    ErrorCode.CHAT_FAILED: "Failed to get response",
    ErrorCode.IMAGE_GENERATION_FAILED: "Failed to generate child image",

    ErrorCode.MISSING_API_KEY: "API key not configured",

    ErrorCode.UNKNOWN_ERROR: "Something unexpected happened. Please try again.",
}


# Upstream failures are reported as 500 to the client; the upstream status
# travels in the message where a route chooses to expose it.
ERROR_STATUS_CODES = {
    ErrorCode.INVALID_TOKEN: 401,

    ErrorCode.MISSING_FIELD: 400,
    ErrorCode.INVALID_PARAMETER: 400,

    ErrorCode.EXTERNAL_SERVICE_ERROR: 500,

    ErrorCode.CHAT_FAILED: 500,
    ErrorCode.IMAGE_GENERATION_FAILED: 500,

    ErrorCode.MISSING_API_KEY: 500,

    ErrorCode.UNKNOWN_ERROR: 500,
}


def get_error_response(error_code: ErrorCode) -> Tuple[str, int]:
    """
    Get user-facing error message and HTTP status code.

    Args:
        error_code: The error code enum

    Returns:
        Tuple of (error_message, status_code)
    """
    message = ERROR_MESSAGES.get(error_code, ERROR_MESSAGES[ErrorCode.UNKNOWN_ERROR])
    status_code = ERROR_STATUS_CODES.get(error_code, 500)
    return message, status_code
