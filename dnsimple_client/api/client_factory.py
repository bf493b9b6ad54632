"""
Client Factory
Creates DNSimple client instances from an options mapping
"""

from typing import Any, Mapping, Optional

from dnsimple_client.api.dnsimple_client import DNSimpleClient
from dnsimple_client.utils.config import ClientConfig
from dnsimple_client.utils.logger import get_logger

logger = get_logger(__name__)


def create_client(
    setup: Optional[Mapping[str, Any]] = None,
    config: Optional[ClientConfig] = None,
    **options: Any
) -> DNSimpleClient:
    """
    Factory function to create DNSimple clients.

    Args:
        setup: Optional options mapping with keys hostname, email, token,
               domainToken, password, twoFactorOTP, twoFactorToken, timeout.
               Omitted options keep their defaults.
        config: Optional ClientConfig instance, used as-is.
        **options: Same options as keyword arguments.

    Returns:
        DNSimpleClient instance

    Raises:
        ValueError: If both config and options are given

    Example:
        # Token auth
        client = create_client({"email": "me@example.com", "token": "abc"})

        # Password auth with a one-time password
        client = create_client(email="me@example.com", password="pw", twoFactorOTP="123456")

        # Sandbox host
        client = create_client(hostname="api.sandbox.dnsimple.com", domainToken="xyz")
    """
    if config is not None:
        if setup or options:
            raise ValueError("Pass either a ClientConfig or options, not both")
        return DNSimpleClient(config)

    config = ClientConfig.from_mapping(setup, **options)
    logger.debug(f"Creating DNSimple client for {config.hostname}")
    return DNSimpleClient(config)
