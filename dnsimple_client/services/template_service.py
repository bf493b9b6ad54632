"""
Template Service
Custom DNS templates and their records
"""

from typing import Any, Dict, Union

from dnsimple_client.api.base_resource import BaseResource
from dnsimple_client.api.models import ApiResponse

TemplateRef = Union[str, int]


class TemplateRecordService(BaseResource):
    """Records inside a template"""

    def list(self, template_id: TemplateRef) -> ApiResponse:
        return self.get_list(self.path("templates", template_id, "records"), "dns_template_record")

    def show(self, template_id: TemplateRef, record_id: Union[str, int]) -> ApiResponse:
        return self.get_one(
            self.path("templates", template_id, "records", record_id),
            "dns_template_record"
        )

    def add(self, template_id: TemplateRef, record: Dict[str, Any]) -> ApiResponse:
        """
        Add a record to a template.

        Args:
            template_id: Template id or short name
            record: name, record_type, content (required); ttl, prio (optional)
        """
        return self.send_one(
            "POST",
            self.path("templates", template_id, "records"),
            "dns_template_record",
            {"dns_template_record": record}
        )

    def delete(self, template_id: TemplateRef, record_id: Union[str, int]) -> ApiResponse:
        return self.delete_path(self.path("templates", template_id, "records", record_id))


class TemplateService(BaseResource):
    """Custom templates in the account"""

    def __init__(self, client):
        super().__init__(client)
        self.records = TemplateRecordService(client)

    def list(self) -> ApiResponse:
        return self.get_list("templates", "dns_template")

    def show(self, template_id: TemplateRef) -> ApiResponse:
        return self.get_one(self.path("templates", template_id), "dns_template")

    def add(self, template: Dict[str, Any]) -> ApiResponse:
        """
        Create a template.

        Args:
            template: name, short_name (required); description (optional)
        """
        return self.send_one("POST", "templates", "dns_template", {"dns_template": template})

    def delete(self, template_id: TemplateRef) -> ApiResponse:
        return self.delete_path(self.path("templates", template_id))

    def apply(self, domain: Union[str, int], template_id: TemplateRef) -> ApiResponse:
        """Apply a template to a domain; data is the domain when returned"""
        data, meta = self._call("POST", self.path("domains", domain, "templates", template_id, "apply"))
        if isinstance(data, dict) and data.get("domain"):
            data = data["domain"]
        return ApiResponse(data, meta)
