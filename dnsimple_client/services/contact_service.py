"""
Contact Service
Registrant contacts in the account
"""

from typing import Any, Dict, Union

from dnsimple_client.api.base_resource import BaseResource
from dnsimple_client.api.models import ApiResponse


class ContactService(BaseResource):
    """
    Contacts used as registrant for registrations, transfers and
    certificates.

    Contact fields: first_name, last_name, address1, city, state_province,
    postal_code, country, email_address, phone (required);
    organization_name, job_title, fax, phone_ext, label (optional).

    Documentation: https://developer.dnsimple.com/v1/contacts/
    """

    def list(self) -> ApiResponse:
        return self.get_list("contacts", "contact")

    def show(self, contact_id: Union[str, int]) -> ApiResponse:
        return self.get_one(self.path("contacts", contact_id), "contact")

    def add(self, contact: Dict[str, Any]) -> ApiResponse:
        return self.send_one("POST", "contacts", "contact", {"contact": contact})

    def update(self, contact_id: Union[str, int], contact: Dict[str, Any]) -> ApiResponse:
        return self.send_one("PUT", self.path("contacts", contact_id), "contact", {"contact": contact})

    def delete(self, contact_id: Union[str, int]) -> ApiResponse:
        return self.delete_path(self.path("contacts", contact_id))
