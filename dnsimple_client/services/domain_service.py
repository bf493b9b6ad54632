"""
Domain Service
Domain lifecycle: listing, registration, transfers, renewals, name servers,
zones and the per-domain sub-resources (memberships, applied services,
email forwards, certificates)
"""

import re
from typing import Any, Dict, List, Optional, Union

from dnsimple_client.api.base_resource import BaseResource
from dnsimple_client.api.models import ApiResponse
from dnsimple_client.utils.logger import get_logger
from dnsimple_client.utils.validators import validate_domain, validate_email

logger = get_logger(__name__)

DomainRef = Union[str, int]


class MembershipService(BaseResource):
    """Users sharing a domain"""

    def list(self, domain: DomainRef) -> ApiResponse:
        return self.get_list(self.path("domains", domain, "memberships"), "membership")

    def add(self, domain: DomainRef, email: str) -> ApiResponse:
        email = validate_email(email)
        return self.send_one(
            "POST",
            self.path("domains", domain, "memberships"),
            "membership",
            {"membership": {"email": email}}
        )

    def delete(self, domain: DomainRef, member: Union[str, int]) -> ApiResponse:
        return self.delete_path(self.path("domains", domain, "memberships", member))


class AppliedServiceService(BaseResource):
    """One-click services applied to a domain"""

    def list(self, domain: DomainRef) -> ApiResponse:
        """Services already applied to the domain"""
        return self.get_list(self.path("domains", domain, "applied_services"), "service")

    def available(self, domain: DomainRef) -> ApiResponse:
        """Services that can still be applied to the domain"""
        return self.get_list(self.path("domains", domain, "available_services"), "service")

    def add(
        self,
        domain: DomainRef,
        service_id: Union[str, int],
        settings: Optional[Dict[str, Any]] = None
    ) -> ApiResponse:
        """
        Apply a service to a domain.

        Args:
            domain: Domain name or id
            service_id: Service id or short name
            settings: Optional service settings

        Returns:
            ApiResponse with the applied service, None if the API returned none
        """
        body: Dict[str, Any] = {"service": {"id": service_id}}
        if settings:
            body["settings"] = settings

        data, meta = self._call("POST", self.path("domains", domain, "applied_services"), body)

        service = None
        if isinstance(data, list) and data and isinstance(data[0], dict):
            service = data[0].get("service")
        return ApiResponse(service, meta)

    def delete(self, domain: DomainRef, service_id: Union[str, int]) -> ApiResponse:
        return self._call("DELETE", self.path("domains", domain, "applied_services", service_id))


class EmailForwardService(BaseResource):
    """Email forwards of a domain"""

    def list(self, domain: DomainRef) -> ApiResponse:
        return self.get_list(self.path("domains", domain, "email_forwards"), "email_forward")

    def add(self, domain: DomainRef, from_: str, to: str) -> ApiResponse:
        """
        Create an email forward.

        Args:
            domain: Domain name or id
            from_: Local part or full address to forward from
            to: Destination address
        """
        return self.send_one(
            "POST",
            self.path("domains", domain, "email_forwards"),
            "email_forward",
            {"email_forward": {"from": from_, "to": to}}
        )

    def show(self, domain: DomainRef, forward_id: Union[str, int]) -> ApiResponse:
        return self.get_one(self.path("domains", domain, "email_forwards", forward_id), "email_forward")

    def delete(self, domain: DomainRef, forward_id: Union[str, int]) -> ApiResponse:
        return self.delete_path(self.path("domains", domain, "email_forwards", forward_id))


class CertificateService(BaseResource):
    """SSL certificates of a domain"""

    def list(self, domain: DomainRef) -> ApiResponse:
        return self.get_list(self.path("domains", domain, "certificates"), "certificate")

    def show(self, domain: DomainRef, certificate_id: Union[str, int]) -> ApiResponse:
        return self.get_one(self.path("domains", domain, "certificates", certificate_id), "certificate")

    def add(
        self,
        domain: DomainRef,
        subdomain: Optional[str],
        contact_id: Union[str, int],
        csr: Optional[str] = None
    ) -> ApiResponse:
        """
        Purchase a certificate.

        Args:
            domain: Domain name or id
            subdomain: Subdomain the certificate is for, '' or None for the apex
            contact_id: Contact id
            csr: Optional certificate signing request
        """
        certificate: Dict[str, Any] = {
            "name": subdomain or "",
            "contact_id": contact_id
        }
        if csr:
            certificate["csr"] = csr

        return self.send_one(
            "POST",
            self.path("domains", domain, "certificates"),
            "certificate",
            {"certificate": certificate}
        )

    def configure(self, domain: DomainRef, certificate_id: Union[str, int]) -> ApiResponse:
        return self.send_one(
            "PUT",
            self.path("domains", domain, "certificates", certificate_id, "configure"),
            "certificate"
        )

    def submit(
        self,
        domain: DomainRef,
        certificate_id: Union[str, int],
        approver_email: str
    ) -> ApiResponse:
        """Submit a configured certificate for approval"""
        return self.send_one(
            "PUT",
            self.path("domains", domain, "certificates", certificate_id, "submit"),
            "certificate",
            {"certificate": {"approver_email": approver_email}}
        )


class DomainService(BaseResource):
    """
    Domains in the account.

    Methods marked auto-payment charge the account's card on success.
    """

    def __init__(self, client):
        super().__init__(client)
        self.memberships = MembershipService(client)
        self.services = AppliedServiceService(client)
        self.email_forwards = EmailForwardService(client)
        self.certificates = CertificateService(client)

    def list(self, simple: bool = False) -> ApiResponse:
        """
        List domains.

        Args:
            simple: Return only the domain names

        Returns:
            ApiResponse with domain dicts, or names when simple is True
        """
        domains, meta = self.get_list("domains", "domain")
        if simple:
            domains = [domain.get("name") for domain in domains if domain]
        return ApiResponse(domains, meta)

    def find_by_regex(self, pattern: Union[str, "re.Pattern"]) -> ApiResponse:
        """List domains whose name matches a regular expression"""
        regexp = re.compile(pattern)
        domains, meta = self.list()
        found: List[Dict[str, Any]] = [
            domain for domain in domains
            if domain and regexp.search(domain.get("name") or "")
        ]
        return ApiResponse(found, meta)

    def show(self, domain: DomainRef) -> ApiResponse:
        return self.get_one(self.path("domains", domain), "domain")

    def add(self, name: str) -> ApiResponse:
        """Add a domain to the account (no registration)"""
        name = validate_domain(name)
        return self.send_one("POST", "domains", "domain", {"domain": {"name": name}})

    def delete(self, domain: DomainRef) -> ApiResponse:
        """Remove a domain; data is True when the API confirmed it"""
        return self.delete_path(self.path("domains", domain))

    def reset_token(self, domain: DomainRef) -> ApiResponse:
        """Generate a new domain token"""
        return self.send_one("POST", self.path("domains", domain, "token"), "domain")

    def push(self, domain: DomainRef, email: str, contact_id: Union[str, int]) -> ApiResponse:
        """Move a domain to another account"""
        email = validate_email(email)
        return self.send_one(
            "POST",
            self.path("domains", domain, "push"),
            "domain",
            {"push": {"new_user_email": email, "contact_id": contact_id}}
        )

    def vanity_name_servers(
        self,
        domain: DomainRef,
        enable: bool,
        nameservers: Optional[Dict[str, Any]] = None
    ) -> ApiResponse:
        """
        Enable or disable vanity name servers.

        Args:
            domain: Domain name or id
            enable: True to enable, False to disable
            nameservers: External name servers (ns1..ns4); DNSimple's own when None
        """
        path = self.path("domains", domain, "vanity_name_servers")
        if not enable:
            return self._call("DELETE", path)

        configuration: Dict[str, Any] = {"server_source": "dnsimple"}
        if nameservers:
            configuration = dict(nameservers, server_source="external")
        return self._call("POST", path, {"vanity_nameserver_configuration": configuration})

    def check(self, domain: str) -> ApiResponse:
        """
        Check if a domain is available for registration.
        A 404 from the API means the name is available and is not an error.
        """
        domain = validate_domain(domain)
        logger.info(f"Checking availability: {domain}")
        return self._call("GET", self.path("domains", domain, "check"), operation="domains.check")

    def register(
        self,
        domain: str,
        registrant_id: Union[str, int],
        extended_attribute: Optional[Dict[str, Any]] = None
    ) -> ApiResponse:
        """
        Register a domain. Auto-payment!

        Args:
            domain: Domain to register
            registrant_id: Contact id of the registrant
            extended_attribute: TLD specific attributes

        Returns:
            ApiResponse with the registered domain
        """
        domain = validate_domain(domain)
        logger.warning(f"Registering {domain} - this charges the account")

        body: Dict[str, Any] = {"domain": {"name": domain, "registrant_id": registrant_id}}
        if extended_attribute is not None:
            body["domain"]["extended_attribute"] = extended_attribute

        return self.send_one("POST", "domain_registrations", "domain", body)

    def transfer(
        self,
        domain: str,
        registrant_id: Union[str, int],
        authinfo: Optional[str] = None,
        extended_attribute: Optional[Dict[str, Any]] = None
    ) -> ApiResponse:
        """
        Transfer a domain in. Auto-payment!

        Args:
            domain: Domain to transfer
            registrant_id: Contact id of the registrant
            authinfo: Transfer auth code, when the registry needs one
            extended_attribute: TLD specific attributes
        """
        domain = validate_domain(domain)
        logger.warning(f"Transferring {domain} - this charges the account")

        body: Dict[str, Any] = {"domain": {"name": domain, "registrant_id": registrant_id}}
        if extended_attribute is not None:
            body["extended_attribute"] = extended_attribute
        if authinfo:
            body["transfer_order"] = {"authinfo": authinfo}

        return self._call("POST", "domain_transfers", body)

    def renew(self, domain: str, whois_privacy: Optional[bool] = None) -> ApiResponse:
        """
        Renew a domain registration. Auto-payment!

        Args:
            domain: Domain to renew
            whois_privacy: Also renew WHOIS privacy; left to the API when None
        """
        body: Dict[str, Any] = {"domain": {"name": domain}}
        if whois_privacy is not None:
            body["domain"]["renew_whois_privacy"] = "true" if whois_privacy else "false"
        return self.send_one("POST", "domain_renewals", "domain", body)

    def autorenew(self, domain: DomainRef, enable: bool) -> ApiResponse:
        method = "POST" if enable else "DELETE"
        return self.send_one(method, self.path("domains", domain, "auto_renewal"), "domain")

    def transfer_out(self, domain: DomainRef) -> ApiResponse:
        """Prepare a domain for transferring out"""
        return self._call("POST", self.path("domains", domain, "transfer_outs"))

    def whois_privacy(self, domain: DomainRef, enable: bool) -> ApiResponse:
        method = "POST" if enable else "DELETE"
        return self.send_one(method, self.path("domains", domain, "whois_privacy"), "whois_privacy")

    def name_servers(self, domain: DomainRef, nameservers: Optional[Dict[str, str]] = None) -> ApiResponse:
        """
        Get or set the name servers at the registry.

        Args:
            domain: Domain name or id
            nameservers: e.g. {"ns1": "...", "ns2": "..."}; reads them when None
        """
        path = self.path("domains", domain, "name_servers")
        if nameservers:
            return self._call("POST", path, {"name_servers": nameservers})
        return self._call("GET", path)

    def register_name_server(self, domain: DomainRef, name: str, ip: str) -> ApiResponse:
        """Register a glue name server at the registry"""
        return self._call(
            "POST",
            self.path("domains", domain, "registry_name_servers"),
            {"name_server": {"name": name, "ip": ip}}
        )

    def deregister_name_server(self, domain: DomainRef, name: str) -> ApiResponse:
        return self._call("DELETE", self.path("domains", domain, "registry_name_servers", name))

    def zone(self, domain: DomainRef) -> ApiResponse:
        """Get the zone file"""
        return self.get_one(self.path("domains", domain, "zone"), "zone")

    def import_zone(self, domain: DomainRef, zone: str) -> ApiResponse:
        """Import records from zone file text"""
        return self.send_one(
            "POST",
            self.path("domains", domain, "zone_imports"),
            "zone_import",
            {"zone_import": {"zone_data": zone}}
        )

    def apply_template(self, domain: DomainRef, template_id: Union[str, int]) -> ApiResponse:
        """Alias for templates.apply"""
        return self.client.templates.apply(domain, template_id)
