"""
Custom exceptions for DNSimple API operations
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Failure classes a dispatch can end with"""

    CREDENTIALS_MISSING = "CredentialsMissing"
    TIMEOUT = "Timeout"
    CONNECTION_DROPPED = "ConnectionDropped"
    REQUEST_FAILED = "RequestFailed"
    INVALID_RESPONSE_BODY = "InvalidResponseBody"
    OTP_REQUIRED = "OtpRequired"
    API_ERROR = "ApiError"


class DNSimpleError(Exception):
    """Base exception for all DNSimple client errors"""

    kind: ErrorKind = ErrorKind.API_ERROR

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Any = None,
        error: Any = None,
        meta: Any = None,
        cause: Optional[BaseException] = None
    ):
        self.message = message
        self.status_code = status_code
        self.response_data = response_data
        # Message extracted from the server payload, if any
        self.error = error
        self.meta = meta
        self.cause = cause
        super().__init__(self.message)

    @property
    def http_status(self) -> Optional[int]:
        return self.status_code

    def __str__(self):
        text = self.message
        if self.error:
            text = f"{text}: {self.error}"
        if self.status_code:
            return f"{self.kind.value} (HTTP {self.status_code}): {text}"
        return f"{self.kind.value}: {text}"


class CredentialsMissingError(DNSimpleError):
    """Raised when no usable authentication is configured"""
    kind = ErrorKind.CREDENTIALS_MISSING


class RequestTimeoutError(DNSimpleError):
    """Raised when the socket timer fired or the connection was reset"""
    kind = ErrorKind.TIMEOUT


class ConnectionDroppedError(DNSimpleError):
    """Raised when the response stream closed before completion"""
    kind = ErrorKind.CONNECTION_DROPPED


class RequestFailedError(DNSimpleError):
    """Raised on any other transport-level error"""
    kind = ErrorKind.REQUEST_FAILED


class InvalidResponseError(DNSimpleError):
    """Raised when the response body is not valid JSON"""
    kind = ErrorKind.INVALID_RESPONSE_BODY


class OtpRequiredError(DNSimpleError):
    """Raised when the server asks for a two-factor one-time password"""
    kind = ErrorKind.OTP_REQUIRED


class APIError(DNSimpleError):
    """Raised when the API answers with a status code of 300 or above"""
    kind = ErrorKind.API_ERROR
