"""
DNSimple API Client
Builds authenticated requests for the DNSimple v1 API and interprets responses
"""

import json
from typing import Any, Dict, Optional, Tuple

import requests
from urllib3.exceptions import ReadTimeoutError

from dnsimple_client import __version__
from dnsimple_client.api.exceptions import (
    APIError,
    ConnectionDroppedError,
    CredentialsMissingError,
    InvalidResponseError,
    OtpRequiredError,
    RequestFailedError,
    RequestTimeoutError
)
from dnsimple_client.api.models import (
    ApiResponse,
    Completion,
    Outcome,
    RequestDescriptor,
    ResponseMeta
)
from dnsimple_client.utils.config import ClientConfig, get_settings
from dnsimple_client.utils.logger import get_logger

logger = get_logger(__name__)


METHODS = ("GET", "POST", "PUT", "DELETE")
BODY_METHODS = ("POST", "PUT", "DELETE")

TOKEN_HEADER = "X-DNSimple-Token"
DOMAIN_TOKEN_HEADER = "X-DNSimple-Domain-Token"
OTP_HEADER = "X-DNSimple-OTP"
STRICT_2FA_HEADER = "X-DNSimple-2FA-Strict"
TWO_FACTOR_PASSWORD = "x-2fa-basic"
USER_AGENT = f"python-dnsimple-client/{__version__}"

NO_CONTENT = 204
CHUNK_SIZE = 8192

# Logical operations for which listed error statuses still mean success.
# A 404 from the availability check means the name is free.
SUCCESS_OVERRIDES = {
    "domains.check": frozenset({404}),
}


def extract_error_message(data: Any) -> Any:
    """
    Pick the server's error message from a parsed body.

    Priority: message, error, then the first entry of the errors mapping.
    """
    if not isinstance(data, dict):
        return None
    if data.get("message"):
        return data["message"]
    if data.get("error"):
        return data["error"]
    errors = data.get("errors")
    if isinstance(errors, dict) and errors:
        return next(iter(errors.values()))
    return None


def _caused_by(error: BaseException, types: Tuple[type, ...]) -> bool:
    """Walk an exception's args, reason and cause chain looking for types"""
    seen = set()
    stack = [error]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        if isinstance(current, types):
            return True
        stack.extend(arg for arg in current.args if isinstance(arg, BaseException))
        for attr in ("reason", "__cause__", "__context__"):
            nested = getattr(current, attr, None)
            if isinstance(nested, BaseException):
                stack.append(nested)
    return False


class DNSimpleClient:
    """
    DNSimple API client.

    Every call goes through dispatch(), which sends exactly one request and
    always returns exactly one Outcome. The resource groups (dns, domains,
    templates, contacts, services, account) are thin wrappers around it.

    Documentation: https://developer.dnsimple.com/v1/
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        """
        Initialize DNSimple client.

        Args:
            config: Optional ClientConfig instance. Uses the env-loaded config if None.
        """
        self.config = config or get_settings()

        # Imported here: the services package imports dnsimple_client.api
        from dnsimple_client.services import (
            AccountService,
            CatalogService,
            ContactService,
            DnsService,
            DomainService,
            TemplateService
        )

        self.dns = DnsService(self)
        self.domains = DomainService(self)
        self.templates = TemplateService(self)
        self.contacts = ContactService(self)
        self.services = CatalogService(self)
        self.account = AccountService(self)

        logger.info(f"DNSimple client initialized - Host: {self.config.hostname}")
        logger.debug(f"Timeout: {self.config.timeout} ms")

    def _build_headers(self) -> Tuple[Dict[str, str], Optional[Tuple[str, str]]]:
        """
        Select the authentication mode and assemble the headers.

        Primary credential, first match wins: email + API token header,
        OTP exchange token, email + password. The domain token header is
        added on top of whichever primary mode applies; password auth is
        only used when no token of any kind is configured.

        Returns:
            (headers, basic auth pair or None)
        """
        config = self.config
        headers = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT
        }
        auth = None

        if config.token and config.email:
            headers[TOKEN_HEADER] = f"{config.email}:{config.token}"
        elif config.two_factor_token:
            auth = (config.two_factor_token, TWO_FACTOR_PASSWORD)
            headers[STRICT_2FA_HEADER] = "1"
        elif config.password and config.email and not config.token and not config.domain_token:
            auth = (config.email, config.password)
            if config.two_factor_otp:
                headers[STRICT_2FA_HEADER] = "1"
                headers[OTP_HEADER] = config.two_factor_otp

        if config.domain_token:
            headers[DOMAIN_TOKEN_HEADER] = config.domain_token

        return headers, auth

    def build_request(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None
    ) -> RequestDescriptor:
        """
        Build the request descriptor for one call.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path without the /v1/ prefix (e.g. 'domains/example.com')
            body: JSON body, sent for POST, PUT and DELETE

        Returns:
            RequestDescriptor

        Raises:
            ValueError: If the method is not supported
        """
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        body = body if body is not None else {}
        path = path.lstrip("/")
        headers, auth = self._build_headers()

        payload = None
        if method in BODY_METHODS:
            payload = json.dumps(body).encode("utf-8")
            headers["Content-Type"] = "application/json"
            headers["Content-Length"] = str(len(payload))

        return RequestDescriptor(
            method=method,
            path=path,
            url=f"{self.config.base_url}{path}",
            headers=headers,
            body=body,
            payload=payload,
            auth=auth
        )

    def dispatch(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None
    ) -> Outcome:
        """
        Send one request to the DNSimple API.

        Never raises for API or transport failures: the error is returned in
        the Outcome together with whatever response metadata exists.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path without the /v1/ prefix
            body: JSON body, defaults to {}
            operation: Logical operation name, looked up in SUCCESS_OVERRIDES

        Returns:
            Outcome(error, data, meta)
        """
        completion = Completion()

        if not self.config.has_credentials():
            completion.fail(CredentialsMissingError("credentials missing"))
            return completion.result()

        request = self.build_request(method, path, body)
        logger.debug(f"{request.method} {request.url}")

        try:
            response = requests.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                data=request.payload,
                auth=request.auth,
                timeout=self.config.timeout_seconds,
                stream=True
            )
        except requests.exceptions.Timeout as e:
            completion.fail(RequestTimeoutError("request timeout", cause=e))
        except requests.exceptions.RequestException as e:
            if _caused_by(e, (ConnectionResetError,)):
                completion.fail(RequestTimeoutError("request timeout", cause=e))
            else:
                completion.fail(RequestFailedError("request failed", cause=e))
        except UnicodeEncodeError as e:
            # Header values and basic auth must be latin-1
            completion.fail(RequestFailedError("request failed", cause=e))
        else:
            with response:
                self._interpret(request, response, operation, completion)

        outcome = completion.result()
        if outcome.error is not None:
            logger.warning(f"{request.method} {request.path} failed: {outcome.error}")
        return outcome

    def _read_body(self, response: requests.Response, completion: Completion) -> Optional[str]:
        """Buffer the whole response stream; None when it broke off"""
        chunks = []
        try:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                if chunk:
                    chunks.append(chunk)
        except requests.exceptions.RequestException as e:
            if _caused_by(e, (ReadTimeoutError, ConnectionResetError)):
                completion.fail(RequestTimeoutError("request timeout", cause=e))
            else:
                completion.fail(ConnectionDroppedError("connection dropped", cause=e))
            return None

        return b"".join(chunks).decode("utf-8", errors="replace").strip()

    def _interpret(
        self,
        request: RequestDescriptor,
        response: requests.Response,
        operation: Optional[str],
        completion: Completion
    ):
        """Classify a response into success data or a typed error"""
        text = self._read_body(response, completion)
        if text is None:
            return

        status = response.status_code
        meta = ResponseMeta.from_response(status, response.headers)
        logger.debug(f"{request.method} {request.path} -> {status} (request id {meta.request_id})")

        succeeded = status < 300 or status in SUCCESS_OVERRIDES.get(operation, ())

        if status == NO_CONTENT:
            data: Any = True
        elif not text and succeeded:
            data = None
        else:
            try:
                data = json.loads(text)
            except ValueError as e:
                completion.fail(
                    InvalidResponseError(
                        "not json",
                        status_code=status,
                        response_data=text,
                        cause=e
                    ),
                    meta
                )
                return

        if succeeded:
            completion.succeed(data, meta)
            return

        if status == 401 and response.headers.get(OTP_HEADER) == "required":
            error_class = OtpRequiredError
            message = "two-factor OTP required"
        else:
            error_class = APIError
            message = "API error"

        completion.fail(
            error_class(
                message,
                status_code=status,
                response_data=data,
                error=extract_error_message(data)
            ),
            meta
        )

    def request(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None
    ) -> ApiResponse:
        """
        Dispatch a request and unwrap the outcome.

        Returns:
            ApiResponse(data, meta)

        Raises:
            DNSimpleError: Subclass matching the failure kind
        """
        return self.dispatch(method, path, body, operation=operation).unwrap()
