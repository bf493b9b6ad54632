"""
Catalog Service
One-click services DNSimple supports
"""

from typing import Union

from dnsimple_client.api.base_resource import BaseResource
from dnsimple_client.api.models import ApiResponse


class CatalogService(BaseResource):
    """Supported services (applying them is done per domain)"""

    def list(self) -> ApiResponse:
        return self.get_list("services", "service")

    def show(self, service_id: Union[str, int]) -> ApiResponse:
        return self.get_one(self.path("services", service_id), "service")
