"""
DNS Service
Record CRUD for a domain's zone
"""

from typing import Any, Dict, Union

from dnsimple_client.api.base_resource import BaseResource
from dnsimple_client.api.models import ApiResponse


class DnsService(BaseResource):
    """
    DNS records of one domain.

    Record fields: name, record_type, content (required); ttl, prio (optional).
    """

    def list(self, domain: Union[str, int]) -> ApiResponse:
        """List all records of a domain"""
        return self.get_list(self.path("domains", domain, "records"), "record")

    def show(self, domain: Union[str, int], record_id: Union[str, int]) -> ApiResponse:
        return self.get_one(self.path("domains", domain, "records", record_id), "record")

    def add(self, domain: Union[str, int], record: Dict[str, Any]) -> ApiResponse:
        """
        Create a record.

        Args:
            domain: Domain name or id
            record: Record fields

        Returns:
            ApiResponse with the created record
        """
        return self.send_one(
            "POST",
            self.path("domains", domain, "records"),
            "record",
            {"record": record}
        )

    def update(
        self,
        domain: Union[str, int],
        record_id: Union[str, int],
        record: Dict[str, Any]
    ) -> ApiResponse:
        return self.send_one(
            "PUT",
            self.path("domains", domain, "records", record_id),
            "record",
            {"record": record}
        )

    def delete(self, domain: Union[str, int], record_id: Union[str, int]) -> ApiResponse:
        """Delete a record; data is True when the API confirmed it"""
        return self.delete_path(self.path("domains", domain, "records", record_id))
