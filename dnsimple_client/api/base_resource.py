"""
Base Resource
Shared plumbing for the DNSimple resource groups
"""

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Union

from dnsimple_client.api.models import ApiResponse
from dnsimple_client.utils.validators import path_segment

if TYPE_CHECKING:
    from dnsimple_client.api.dnsimple_client import DNSimpleClient


# Status codes a DELETE answers with on success
DELETED_STATUSES = (200, 204)


class BaseResource:
    """
    Base class for resource groups.
    A resource builds a path and a body, calls the client and unwraps the
    JSON envelope the v1 API puts around every object.
    """

    def __init__(self, client: "DNSimpleClient"):
        self.client = client

    @staticmethod
    def path(*parts: Union[str, int]) -> str:
        """
        Join path parts. Literal parts pass through, values are encoded.

        Every odd-positioned part is treated as a value (domain name, id),
        e.g. path("domains", name, "records", record_id).
        """
        segments = []
        for index, part in enumerate(parts):
            segments.append(path_segment(part) if index % 2 else str(part))
        return "/".join(segments)

    def _call(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None
    ) -> ApiResponse:
        return self.client.request(method, path, body, operation=operation)

    @staticmethod
    def unwrap(data: Any, key: str) -> Any:
        """Pull one object out of its envelope, e.g. {"domain": {...}}"""
        if isinstance(data, dict):
            return data.get(key)
        return None

    @staticmethod
    def unwrap_list(data: Optional[Iterable[Any]], key: str) -> List[Any]:
        """Pull objects out of a list of envelopes"""
        return [
            item.get(key) if isinstance(item, dict) else item
            for item in (data or [])
        ]

    @staticmethod
    def deleted(response: ApiResponse) -> ApiResponse:
        """Reduce a DELETE response to True/False"""
        status = response.meta.status_code if response.meta else None
        return ApiResponse(status in DELETED_STATUSES, response.meta)

    def get_one(self, path: str, key: str) -> ApiResponse:
        data, meta = self._call("GET", path)
        return ApiResponse(self.unwrap(data, key), meta)

    def get_list(self, path: str, key: str) -> ApiResponse:
        data, meta = self._call("GET", path)
        return ApiResponse(self.unwrap_list(data, key), meta)

    def send_one(
        self,
        method: str,
        path: str,
        key: str,
        body: Optional[Dict[str, Any]] = None
    ) -> ApiResponse:
        """POST/PUT and unwrap the returned object"""
        data, meta = self._call(method, path, body)
        return ApiResponse(self.unwrap(data, key), meta)

    def delete_path(self, path: str) -> ApiResponse:
        return self.deleted(self._call("DELETE", path))

