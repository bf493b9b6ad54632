"""
Input validation utilities for domain names, emails and URL path segments
"""

import re
from typing import Union
from urllib.parse import quote


class ValidationError(ValueError):
    """Custom exception for validation errors"""
    pass


class DomainValidator:
    """Validator for domain names"""

    # RFC-compliant domain regex; the TLD may be an IDN A-label (xn--)
    DOMAIN_REGEX = re.compile(
        r'^(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?\.)+'
        r'(?:[a-zA-Z]{2,63}|xn--[a-zA-Z0-9-]{1,59})$'
    )

    @classmethod
    def validate(cls, domain: str) -> str:
        """
        Validate a domain name.

        Args:
            domain: Domain name to validate

        Returns:
            Cleaned domain name (lowercase, stripped)

        Raises:
            ValidationError: If domain is invalid
        """
        if not domain:
            raise ValidationError("Domain name cannot be empty")

        domain = domain.strip().lower()
        domain = re.sub(r'^https?://', '', domain)
        domain = domain.rstrip('/')

        if len(domain) > 253:  # RFC 1035
            raise ValidationError("Domain name too long (max 253 characters)")

        if not cls.DOMAIN_REGEX.match(domain):
            raise ValidationError(
                f"Invalid domain format: {domain}. "
                "Domain must contain only letters, numbers, and hyphens."
            )

        return domain


class EmailValidator:
    """Validator for email addresses"""

    EMAIL_REGEX = re.compile(
        r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    )

    @classmethod
    def validate(cls, email: str) -> str:
        """
        Validate an email address.

        Args:
            email: Email address to validate

        Returns:
            Cleaned email address (stripped)

        Raises:
            ValidationError: If email is invalid
        """
        if not email:
            raise ValidationError("Email address cannot be empty")

        email = email.strip()

        if not cls.EMAIL_REGEX.match(email):
            raise ValidationError(f"Invalid email format: {email}")

        return email


def validate_domain(domain: str) -> str:
    """Convenience function for domain validation"""
    return DomainValidator.validate(domain)


def validate_email(email: str) -> str:
    """Convenience function for email validation"""
    return EmailValidator.validate(email)


def path_segment(value: Union[str, int]) -> str:
    """
    Encode one URL path segment (domain name, numeric id, record name).

    Raises:
        ValidationError: If the value is empty
    """
    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValidationError("Path segment cannot be empty")
    return quote(text, safe="")
