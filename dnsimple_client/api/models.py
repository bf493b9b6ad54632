"""
Value types passed through the request pipeline
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, NamedTuple, Optional, Tuple

from dnsimple_client.api.exceptions import DNSimpleError


REQUEST_ID_HEADER = "X-Request-Id"
RUNTIME_HEADER = "X-Runtime"
OTP_TOKEN_HEADER = "X-DNSimple-OTP-Token"


@dataclass(frozen=True)
class RequestDescriptor:
    """One outbound request, built fresh per call"""

    method: str
    path: str
    url: str
    headers: Dict[str, str]
    body: Dict[str, Any] = field(default_factory=dict)
    payload: Optional[bytes] = None
    auth: Optional[Tuple[str, str]] = None


@dataclass(frozen=True)
class ResponseMeta:
    """Status and tracing headers of one response"""

    status_code: int
    request_id: Optional[str] = None
    runtime: Optional[str] = None
    # Only set when the server issued an OTP exchange token
    two_factor_token: Optional[str] = None

    @classmethod
    def from_response(cls, status_code: int, headers) -> "ResponseMeta":
        token = headers.get(OTP_TOKEN_HEADER)
        return cls(
            status_code=status_code,
            request_id=headers.get(REQUEST_ID_HEADER),
            runtime=headers.get(RUNTIME_HEADER),
            two_factor_token=token if isinstance(token, str) else None
        )


class ApiResponse(NamedTuple):
    """Successful result: parsed data plus response metadata"""

    data: Any
    meta: Optional[ResponseMeta]


class Outcome(NamedTuple):
    """Terminal result of a dispatch; error is None on success"""

    error: Optional[DNSimpleError]
    data: Any
    meta: Optional[ResponseMeta]

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ApiResponse:
        """
        Return the data and meta, or raise the error.

        Raises:
            DNSimpleError: The failure this outcome carries
        """
        if self.error is not None:
            raise self.error
        return ApiResponse(self.data, self.meta)


class Completion:
    """
    One-shot latch for a dispatch outcome.

    The first settle() wins; later ones are rejected and report False.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._outcome: Optional[Outcome] = None

    def settle(self, outcome: Outcome) -> bool:
        with self._lock:
            if self._outcome is not None:
                return False
            self._outcome = outcome
            return True

    def fail(self, error: DNSimpleError, meta: Optional[ResponseMeta] = None) -> bool:
        if error.meta is None:
            error.meta = meta
        return self.settle(Outcome(error, None, meta))

    def succeed(self, data: Any, meta: ResponseMeta) -> bool:
        return self.settle(Outcome(None, data, meta))

    def result(self) -> Outcome:
        if self._outcome is None:
            raise RuntimeError("request finished without an outcome")
        return self._outcome
