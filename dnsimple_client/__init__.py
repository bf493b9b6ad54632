"""
DNSimple v1 API client
"""

__version__ = "1.0.0"

from dnsimple_client.api import (
    ApiResponse,
    Outcome,
    ResponseMeta,
    DNSimpleClient,
    create_client,
    ErrorKind,
    DNSimpleError,
    CredentialsMissingError,
    RequestTimeoutError,
    ConnectionDroppedError,
    RequestFailedError,
    InvalidResponseError,
    OtpRequiredError,
    APIError
)
from dnsimple_client.utils.config import ClientConfig

__all__ = [
    "__version__",
    "ApiResponse",
    "Outcome",
    "ResponseMeta",
    "DNSimpleClient",
    "ClientConfig",
    "create_client",
    "ErrorKind",
    "DNSimpleError",
    "CredentialsMissingError",
    "RequestTimeoutError",
    "ConnectionDroppedError",
    "RequestFailedError",
    "InvalidResponseError",
    "OtpRequiredError",
    "APIError",
]
