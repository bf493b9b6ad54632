"""
Tests for the resource services: paths, bodies and envelope unwrapping.
The transport is mocked; each test checks what was sent and what came back.
"""

import json

import pytest

from conftest import DOMAIN, reply


def _sent(mock_request):
    kwargs = mock_request.call_args[1]
    body = json.loads(kwargs["data"]) if kwargs["data"] else None
    return kwargs["method"], kwargs["url"].split("/v1/", 1)[1], body


# ===========================================================================
# 1. DNS records
# ===========================================================================

class TestDnsService:

    def test_list_unwraps_records(self, token_client, mock_request):
        reply(mock_request, 200, [
            {"record": {"id": 1, "name": "www"}},
            {"record": {"id": 2, "name": ""}},
        ])

        records, meta = token_client.dns.list(DOMAIN)

        assert records == [{"id": 1, "name": "www"}, {"id": 2, "name": ""}]
        assert meta.status_code == 200
        assert _sent(mock_request)[:2] == ("GET", f"domains/{DOMAIN}/records")

    def test_add_wraps_record(self, token_client, mock_request):
        record = {"name": "www", "record_type": "A", "content": "1.2.3.4", "ttl": 600}
        reply(mock_request, 201, {"record": dict(record, id=7)})

        created, meta = token_client.dns.add(DOMAIN, record)

        assert created["id"] == 7
        assert _sent(mock_request) == ("POST", f"domains/{DOMAIN}/records", {"record": record})

    def test_update(self, token_client, mock_request):
        reply(mock_request, 200, {"record": {"id": 7, "ttl": 60}})

        updated, _ = token_client.dns.update(DOMAIN, 7, {"ttl": 60})

        assert updated == {"id": 7, "ttl": 60}
        assert _sent(mock_request) == ("PUT", f"domains/{DOMAIN}/records/7", {"record": {"ttl": 60}})

    def test_show(self, token_client, mock_request):
        reply(mock_request, 200, {"record": {"id": 7}})
        assert token_client.dns.show(DOMAIN, 7).data == {"id": 7}

    @pytest.mark.parametrize("status", [200, 204])
    def test_delete_is_true(self, token_client, mock_request, status):
        reply(mock_request, status, b"")

        deleted, meta = token_client.dns.delete(DOMAIN, 7)

        assert deleted is True
        assert meta.status_code == status
        assert _sent(mock_request)[:2] == ("DELETE", f"domains/{DOMAIN}/records/7")

    def test_errors_are_raised(self, token_client, mock_request):
        from dnsimple_client import APIError

        reply(mock_request, 404, {"message": "Record not found"})

        with pytest.raises(APIError) as exc_info:
            token_client.dns.show(DOMAIN, 999)

        assert exc_info.value.status_code == 404
        assert exc_info.value.meta.status_code == 404


# ===========================================================================
# 2. Domains
# ===========================================================================

class TestDomainService:

    DOMAINS = [
        {"domain": {"id": 1, "name": "alpha.com"}},
        {"domain": {"id": 2, "name": "beta.net"}},
        {"domain": {"id": 3, "name": "alphabet.org"}},
    ]

    def test_list(self, token_client, mock_request):
        reply(mock_request, 200, self.DOMAINS)

        domains, _ = token_client.domains.list()

        assert [d["id"] for d in domains] == [1, 2, 3]

    def test_list_simple(self, token_client, mock_request):
        reply(mock_request, 200, self.DOMAINS)
        assert token_client.domains.list(simple=True).data == ["alpha.com", "beta.net", "alphabet.org"]

    def test_find_by_regex(self, token_client, mock_request):
        reply(mock_request, 200, self.DOMAINS)

        found, _ = token_client.domains.find_by_regex(r"^alpha")

        assert [d["name"] for d in found] == ["alpha.com", "alphabet.org"]

    def test_add(self, token_client, mock_request):
        """Adding a domain returns 201 and the created domain."""
        reply(mock_request, 201, {"domain": {"id": 9, "name": DOMAIN}})

        domain, meta = token_client.domains.add(DOMAIN.upper())

        assert meta.status_code == 201
        assert domain["name"] == DOMAIN
        assert _sent(mock_request) == ("POST", "domains", {"domain": {"name": DOMAIN}})

    def test_add_invalid_name(self, token_client, mock_request):
        from dnsimple_client.utils.validators import ValidationError

        with pytest.raises(ValidationError):
            token_client.domains.add("not a domain")
        mock_request.assert_not_called()

    @pytest.mark.parametrize("status", [200, 204])
    def test_delete(self, token_client, mock_request, status):
        reply(mock_request, status, b"")

        deleted, meta = token_client.domains.delete(DOMAIN)

        assert deleted is True
        assert _sent(mock_request)[:2] == ("DELETE", f"domains/{DOMAIN}")

    def test_check_available_on_404(self, token_client, mock_request):
        body = {"name": DOMAIN, "status": "available", "price": "14.00"}
        reply(mock_request, 404, body)

        data, meta = token_client.domains.check(DOMAIN)

        assert data == body
        assert meta.status_code == 404
        assert _sent(mock_request) == ("GET", f"domains/{DOMAIN}/check", None)

    def test_check_punycode_domain(self, token_client, mock_request):
        """IDN names in their xn-- form reach the API."""
        name = "xn--e1afmkfd.xn--p1ai"
        reply(mock_request, 404, {"name": name, "status": "available"})

        data, _ = token_client.domains.check(name)

        assert data["status"] == "available"
        assert _sent(mock_request) == ("GET", f"domains/{name}/check", None)

    def test_check_taken(self, token_client, mock_request):
        reply(mock_request, 200, {"name": DOMAIN, "status": "unavailable"})
        assert token_client.domains.check(DOMAIN).data["status"] == "unavailable"

    def test_register(self, token_client, mock_request):
        reply(mock_request, 201, {"domain": {"name": DOMAIN, "state": "registered"}})

        domain, _ = token_client.domains.register(DOMAIN, 10, {"x-eu-lang": "en"})

        assert domain["state"] == "registered"
        assert _sent(mock_request) == ("POST", "domain_registrations", {
            "domain": {"name": DOMAIN, "registrant_id": 10, "extended_attribute": {"x-eu-lang": "en"}}
        })

    def test_transfer_with_authinfo(self, token_client, mock_request):
        reply(mock_request, 201, {"transfer_order": {"id": 1}})

        token_client.domains.transfer(DOMAIN, 10, authinfo="secret-code", extended_attribute={"a": "b"})

        assert _sent(mock_request)[2] == {
            "domain": {"name": DOMAIN, "registrant_id": 10},
            "extended_attribute": {"a": "b"},
            "transfer_order": {"authinfo": "secret-code"}
        }

    @pytest.mark.parametrize("privacy,expected", [(True, "true"), (False, "false")])
    def test_renew_whois_privacy_flag(self, token_client, mock_request, privacy, expected):
        reply(mock_request, 201, {"domain": {"name": DOMAIN}})

        token_client.domains.renew(DOMAIN, privacy)

        assert _sent(mock_request)[2] == {"domain": {"name": DOMAIN, "renew_whois_privacy": expected}}

    def test_renew_without_flag(self, token_client, mock_request):
        reply(mock_request, 201, {"domain": {"name": DOMAIN}})
        token_client.domains.renew(DOMAIN)
        assert _sent(mock_request)[2] == {"domain": {"name": DOMAIN}}

    @pytest.mark.parametrize("enable,method", [(True, "POST"), (False, "DELETE")])
    def test_autorenew(self, token_client, mock_request, enable, method):
        reply(mock_request, 200, {"domain": {"auto_renew": enable}})

        domain, _ = token_client.domains.autorenew(DOMAIN, enable)

        assert domain == {"auto_renew": enable}
        assert _sent(mock_request)[:2] == (method, f"domains/{DOMAIN}/auto_renewal")

    def test_whois_privacy(self, token_client, mock_request):
        reply(mock_request, 200, {"whois_privacy": {"enabled": True}})
        assert token_client.domains.whois_privacy(DOMAIN, True).data == {"enabled": True}

    def test_vanity_name_servers_external(self, token_client, mock_request):
        reply(mock_request, 200, {})

        token_client.domains.vanity_name_servers(DOMAIN, True, {"ns1": "ns1.example.org"})

        assert _sent(mock_request) == ("POST", f"domains/{DOMAIN}/vanity_name_servers", {
            "vanity_nameserver_configuration": {"ns1": "ns1.example.org", "server_source": "external"}
        })

    def test_vanity_name_servers_disable(self, token_client, mock_request):
        reply(mock_request, 204)
        assert token_client.domains.vanity_name_servers(DOMAIN, False).data is True
        assert _sent(mock_request)[0] == "DELETE"

    def test_name_servers_get_and_set(self, token_client, mock_request):
        reply(mock_request, 200, ["ns1.dnsimple.com"])

        assert token_client.domains.name_servers(DOMAIN).data == ["ns1.dnsimple.com"]
        assert _sent(mock_request)[0] == "GET"

        token_client.domains.name_servers(DOMAIN, {"ns1": "a.example.org"})
        assert _sent(mock_request) == ("POST", f"domains/{DOMAIN}/name_servers", {"name_servers": {"ns1": "a.example.org"}})

    def test_registry_name_servers(self, token_client, mock_request):
        reply(mock_request, 201, {})

        token_client.domains.register_name_server(DOMAIN, "ns1", "1.2.3.4")
        assert _sent(mock_request)[2] == {"name_server": {"name": "ns1", "ip": "1.2.3.4"}}

        token_client.domains.deregister_name_server(DOMAIN, "ns1")
        assert _sent(mock_request)[:2] == ("DELETE", f"domains/{DOMAIN}/registry_name_servers/ns1")

    def test_zone_import(self, token_client, mock_request):
        reply(mock_request, 201, {"zone_import": {"imported": [], "not_imported": []}})

        data, _ = token_client.domains.import_zone(DOMAIN, "www 3600 IN A 1.2.3.4")

        assert data == {"imported": [], "not_imported": []}
        assert _sent(mock_request)[2] == {"zone_import": {"zone_data": "www 3600 IN A 1.2.3.4"}}

    def test_reset_token_and_push(self, token_client, mock_request):
        reply(mock_request, 200, {"domain": {"token": "new"}})
        assert token_client.domains.reset_token(DOMAIN).data == {"token": "new"}

        token_client.domains.push(DOMAIN, "new@example.com", 5)
        assert _sent(mock_request)[2] == {"push": {"new_user_email": "new@example.com", "contact_id": 5}}

    def test_transfer_out(self, token_client, mock_request):
        reply(mock_request, 200, b"")

        data, meta = token_client.domains.transfer_out(DOMAIN)

        assert data is None
        assert meta.status_code == 200


# ===========================================================================
# 3. Per-domain sub-resources
# ===========================================================================

class TestDomainSubResources:

    def test_memberships(self, token_client, mock_request):
        reply(mock_request, 201, {"membership": {"id": 3}})
        assert token_client.domains.memberships.add(DOMAIN, "friend@example.com").data == {"id": 3}

        reply(mock_request, 204)
        assert token_client.domains.memberships.delete(DOMAIN, 3).data is True

    def test_applied_services(self, token_client, mock_request):
        reply(mock_request, 200, [{"service": {"id": 1, "short_name": "heroku"}}])

        service, _ = token_client.domains.services.add(DOMAIN, "heroku", {"app": "my-app"})

        assert service == {"id": 1, "short_name": "heroku"}
        assert _sent(mock_request)[2] == {"service": {"id": "heroku"}, "settings": {"app": "my-app"}}

    def test_available_services(self, token_client, mock_request):
        reply(mock_request, 200, [{"service": {"id": 2}}])
        assert token_client.domains.services.available(DOMAIN).data == [{"id": 2}]
        assert _sent(mock_request)[1] == f"domains/{DOMAIN}/available_services"

    def test_email_forwards(self, token_client, mock_request):
        reply(mock_request, 201, {"email_forward": {"id": 4}})

        token_client.domains.email_forwards.add(DOMAIN, "info", "me@example.com")

        assert _sent(mock_request)[2] == {"email_forward": {"from": "info", "to": "me@example.com"}}

    def test_certificates(self, token_client, mock_request):
        reply(mock_request, 201, {"certificate": {"id": 5}})

        token_client.domains.certificates.add(DOMAIN, "www", 10, "CSR")
        assert _sent(mock_request)[2] == {"certificate": {"name": "www", "contact_id": 10, "csr": "CSR"}}

        token_client.domains.certificates.add(DOMAIN, None, 10)
        assert _sent(mock_request)[2] == {"certificate": {"name": "", "contact_id": 10}}

        token_client.domains.certificates.configure(DOMAIN, 5)
        assert _sent(mock_request)[:2] == ("PUT", f"domains/{DOMAIN}/certificates/5/configure")

        token_client.domains.certificates.submit(DOMAIN, 5, "admin@example-test.com")
        assert _sent(mock_request)[2] == {"certificate": {"approver_email": "admin@example-test.com"}}


# ===========================================================================
# 4. Templates, contacts, services, account
# ===========================================================================

class TestOtherServices:

    def test_templates(self, token_client, mock_request):
        reply(mock_request, 200, [{"dns_template": {"id": 1}}])
        assert token_client.templates.list().data == [{"id": 1}]

        reply(mock_request, 200, b"")
        assert token_client.templates.delete(1).data is True

    def test_template_apply(self, token_client, mock_request):
        reply(mock_request, 200, {"domain": {"name": DOMAIN}})

        data, _ = token_client.domains.apply_template(DOMAIN, "googleapps")

        assert data == {"name": DOMAIN}
        assert _sent(mock_request)[:2] == ("POST", f"domains/{DOMAIN}/templates/googleapps/apply")

    def test_template_records(self, token_client, mock_request):
        record = {"name": "", "record_type": "MX", "content": "mx.example.com", "prio": 10}
        reply(mock_request, 201, {"dns_template_record": record})

        assert token_client.templates.records.add(1, record).data == record
        assert _sent(mock_request)[1:] == ("templates/1/records", {"dns_template_record": record})

    def test_contacts(self, token_client, mock_request):
        reply(mock_request, 200, {"contact": {"id": 1, "first_name": "Jane"}})

        contact, _ = token_client.contacts.update(1, {"first_name": "Jane"})

        assert contact["first_name"] == "Jane"
        assert _sent(mock_request) == ("PUT", "contacts/1", {"contact": {"first_name": "Jane"}})

        reply(mock_request, 204)
        assert token_client.contacts.delete(1).data is True

    def test_catalog(self, token_client, mock_request):
        reply(mock_request, 200, {"service": {"id": 1}})
        assert token_client.services.show(1).data == {"id": 1}

    def test_prices(self, token_client, mock_request):
        reply(mock_request, 200, [{"price": {"tld": "com"}}])

        prices, meta = token_client.account.prices()

        assert prices == [{"tld": "com"}]
        assert meta.status_code == 200

    def test_subscription_get_and_update(self, token_client, mock_request):
        reply(mock_request, 200, {"subscription": {"plan": "Silver"}})

        assert token_client.account.subscription().data == {"plan": "Silver"}
        assert _sent(mock_request)[0] == "GET"

        token_client.account.subscription({"plan": "Gold"})
        assert _sent(mock_request) == ("PUT", "subscription", {"subscription": {"plan": "Gold"}})

    def test_user_and_extended_attributes(self, token_client, mock_request):
        reply(mock_request, 201, {"user": {"id": 1}})
        assert token_client.account.user({"email": "a@example.com"}).data == {"id": 1}

        reply(mock_request, 200, [{"name": "x-eu-lang"}])
        assert token_client.account.extended_attributes(".eu").data == [{"name": "x-eu-lang"}]
        assert _sent(mock_request)[1] == "extended_attributes/eu"
