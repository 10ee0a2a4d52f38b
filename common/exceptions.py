"""Exception types raised by services and rendered by the app's error handlers."""
from typing import Optional

from common.error_messages import ErrorCode, get_error_response


class PetServiceError(Exception):
    """Base error carrying an ErrorCode and a client-facing message."""

    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR

    def __init__(self, detail: Optional[str] = None, public_message: Optional[str] = None):
        self.detail = detail
        message, status_code = get_error_response(self.error_code)
        self.public_message = public_message or message
        self.status_code = status_code
        super().__init__(detail or self.public_message)


class ConfigurationError(PetServiceError):
    """A required API key or setting is missing."""

    error_code = ErrorCode.MISSING_API_KEY


class ValidationError(PetServiceError):
    """The request body is missing fields or malformed."""

    error_code = ErrorCode.MISSING_FIELD

    def __init__(self, message: str):
        super().__init__(detail=message, public_message=message)


class UpstreamError(PetServiceError):
    """A third-party API returned a non-success response or was unreachable."""

    error_code = ErrorCode.EXTERNAL_SERVICE_ERROR

    def __init__(
        self,
        detail: Optional[str] = None,
        upstream_status: Optional[int] = None,
        upstream_body: Optional[str] = None,
        public_message: Optional[str] = None,
    ):
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body
        super().__init__(detail=detail, public_message=public_message)


class InvalidSessionError(PetServiceError):
    """The bearer token is missing, expired or malformed."""

    error_code = ErrorCode.INVALID_TOKEN


class ChatFailedError(UpstreamError):
    """The advisor answer could not be produced."""

    error_code = ErrorCode.CHAT_FAILED


class ImageGenerationError(UpstreamError):
    """The child image could not be produced."""

    error_code = ErrorCode.IMAGE_GENERATION_FAILED
