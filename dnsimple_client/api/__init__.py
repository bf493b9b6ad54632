"""
API Layer - DNSimple v1 client core
Request building, dispatch and response interpretation
"""

# Value types
from dnsimple_client.api.models import (
    ApiResponse,
    Completion,
    Outcome,
    RequestDescriptor,
    ResponseMeta
)

# Client
from dnsimple_client.api.dnsimple_client import DNSimpleClient, SUCCESS_OVERRIDES
from dnsimple_client.api.base_resource import BaseResource

# Factory
from dnsimple_client.api.client_factory import create_client

# Exceptions
from dnsimple_client.api.exceptions import (
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

__all__ = [
    # Models
    "ApiResponse",
    "Completion",
    "Outcome",
    "RequestDescriptor",
    "ResponseMeta",

    # Client
    "DNSimpleClient",
    "SUCCESS_OVERRIDES",
    "BaseResource",

    # Factory
    "create_client",

    # Exceptions
    "ErrorKind",
    "DNSimpleError",
    "CredentialsMissingError",
    "RequestTimeoutError",
    "ConnectionDroppedError",
    "RequestFailedError",
    "InvalidResponseError",
    "OtpRequiredError",
    "APIError"
]
