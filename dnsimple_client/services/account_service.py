"""
Account Service
Subscription, prices, user sign-up and TLD extended attributes
"""

from typing import Any, Dict, Optional

from dnsimple_client.api.base_resource import BaseResource
from dnsimple_client.api.models import ApiResponse
from dnsimple_client.utils.validators import path_segment


class AccountService(BaseResource):
    """Account level calls"""

    def subscription(self, subscription: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """
        Get the subscription, or update it when data is given.

        Args:
            subscription: e.g. {"plan": "Silver"}; reads the current one when None

        Returns:
            ApiResponse with the subscription
        """
        if subscription is None:
            return self.get_one("subscription", "subscription")
        return self.send_one("PUT", "subscription", "subscription", {"subscription": subscription})

    def prices(self) -> ApiResponse:
        """Registration, transfer and renewal prices per TLD"""
        return self.get_list("prices", "price")

    def user(self, user: Dict[str, Any]) -> ApiResponse:
        """
        Create a user account.

        Args:
            user: email, password, password_confirmation
        """
        return self.send_one("POST", "users", "user", {"user": user})

    def extended_attributes(self, tld: str) -> ApiResponse:
        """Extra registrant fields a TLD requires"""
        return self._call("GET", f"extended_attributes/{path_segment(tld.lstrip('.'))}")
