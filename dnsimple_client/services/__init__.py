"""
Resource layer - one service per DNSimple resource group
"""

from dnsimple_client.services.dns_service import DnsService
from dnsimple_client.services.domain_service import (
    DomainService,
    MembershipService,
    AppliedServiceService,
    EmailForwardService,
    CertificateService
)
from dnsimple_client.services.template_service import TemplateService, TemplateRecordService
from dnsimple_client.services.contact_service import ContactService
from dnsimple_client.services.catalog_service import CatalogService
from dnsimple_client.services.account_service import AccountService

__all__ = [
    # DNS records
    "DnsService",
    # Domains and per-domain resources
    "DomainService",
    "MembershipService",
    "AppliedServiceService",
    "EmailForwardService",
    "CertificateService",
    # Templates
    "TemplateService",
    "TemplateRecordService",
    # Contacts
    "ContactService",
    # Supported services
    "CatalogService",
    # Account
    "AccountService",
]
