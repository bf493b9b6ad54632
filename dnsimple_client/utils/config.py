"""
Configuration management using Pydantic Settings
Holds the connection settings and credentials for one DNSimple client
"""

from typing import Any, Dict, Mapping, Optional, Tuple, Type
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


DEFAULT_HOSTNAME = "api.dnsimple.com"
DEFAULT_TIMEOUT_MS = 30000

# Option names accepted by from_mapping() besides the field names themselves
OPTION_ALIASES = {
    "domainToken": "domain_token",
    "twoFactorOTP": "two_factor_otp",
    "twoFactorToken": "two_factor_token",
}


class ClientConfig(BaseSettings):
    """
    Connection settings for a DNSimple client.

    ClientConfig() reads keyword arguments first, then DNSIMPLE_* environment
    variables, then an optional .env file. from_mapping() only uses the
    options it is given. Instances are immutable: a client captures its
    config at construction and never changes it.
    """

    model_config = SettingsConfigDict(
        env_prefix="DNSIMPLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True
    )

    hostname: str = Field(
        default=DEFAULT_HOSTNAME,
        description="API host, without scheme"
    )
    email: Optional[str] = Field(
        default=None,
        description="Account email, used with token or password auth"
    )
    token: Optional[str] = Field(
        default=None,
        repr=False,
        description="Account-wide API token"
    )
    domain_token: Optional[str] = Field(
        default=None,
        repr=False,
        description="Token scoped to a single domain"
    )
    password: Optional[str] = Field(
        default=None,
        repr=False,
        description="Account password for HTTP basic auth"
    )
    two_factor_otp: Optional[str] = Field(
        default=None,
        repr=False,
        description="One-time password sent along with password auth"
    )
    two_factor_token: Optional[str] = Field(
        default=None,
        repr=False,
        description="OTP exchange token issued by the server"
    )
    timeout: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        ge=0,
        description="Socket timeout in milliseconds, 0 disables it"
    )

    @field_validator(
        "email",
        "token",
        "domain_token",
        "password",
        "two_factor_otp",
        "two_factor_token",
        mode="before"
    )
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Treat empty strings (e.g. unset .env entries) as not configured"""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("hostname", mode="before")
    @classmethod
    def validate_hostname(cls, v: Any) -> Any:
        """Strip a scheme and trailing slashes from the hostname"""
        if v is None:
            return DEFAULT_HOSTNAME
        if isinstance(v, str):
            v = v.strip()
            for scheme in ("https://", "http://"):
                if v.lower().startswith(scheme):
                    v = v[len(scheme):]
            v = v.rstrip("/")
            if not v:
                raise ValueError("hostname cannot be empty")
        return v

    @field_validator("timeout", mode="before")
    @classmethod
    def validate_timeout(cls, v: Any) -> Any:
        if v is None:
            return 0
        return v

    @classmethod
    def from_mapping(cls, setup: Optional[Mapping[str, Any]] = None, **overrides: Any) -> "ClientConfig":
        """
        Build a config from an options mapping.

        Accepts both the field names and the camelCase option names
        (domainToken, twoFactorOTP, twoFactorToken). Keyword overrides win
        over the mapping. Omitted options keep their defaults; the
        environment and .env are not read.

        Args:
            setup: Options mapping
            **overrides: Extra options, same names as the mapping

        Returns:
            ClientConfig instance
        """
        options: Dict[str, Any] = {}
        for source in (setup or {}, overrides):
            for key, value in source.items():
                options[OPTION_ALIASES.get(key, key)] = value
        return OptionsConfig(**options)

    @property
    def base_url(self) -> str:
        """Versioned API root URL"""
        return f"https://{self.hostname}/v1/"

    @property
    def timeout_seconds(self) -> Optional[float]:
        """Timeout in seconds for the transport, None when disabled"""
        if not self.timeout:
            return None
        return self.timeout / 1000.0

    def has_credentials(self) -> bool:
        """Check if any usable authentication is configured"""
        return bool(
            (self.email and self.token)
            or (self.email and self.password)
            or self.domain_token
            or self.two_factor_token
        )


class OptionsConfig(ClientConfig):
    """ClientConfig built from explicit options only"""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)


# Default instance loaded from the environment
_settings: Optional[ClientConfig] = None


def get_settings() -> ClientConfig:
    """
    Get or create the default config loaded from DNSIMPLE_* environment
    variables and the .env file.

    Returns:
        ClientConfig instance
    """
    global _settings

    if _settings is None:
        _settings = ClientConfig()

    return _settings


def reset_settings():
    """
    Reset the cached default config (useful for testing)
    """
    global _settings
    _settings = None
