"""Domain models for authn"""

from authn.domain.models.provider_info import ProviderInfo, describe_providers
from authn.domain.models.provider_type import (
    CLIENT_PROVIDERS,
    LOCAL_PROVIDERS,
    METHOD_2FA_PROVIDERS,
    PROVIDER_ACCESS_TOKEN,
    PROVIDER_APPLICATION,
    PROVIDER_CLIENT,
    PROVIDER_CLIENT_CREDENTIALS,
    PROVIDER_DEFAULT,
    PROVIDER_LDAP,
    PROVIDER_LINK,
    PROVIDER_LOCAL,
    PROVIDER_NONE,
    PROVIDER_TYPES,
    PROVIDER_UNDEFINED,
    REMOTE_PROVIDERS,
    ProviderType,
    provider,
)

__all__ = [
    # Provider types
    "ProviderType",
    "provider",
    "PROVIDER_UNDEFINED",
    "PROVIDER_DEFAULT",
    "PROVIDER_CLIENT",
    "PROVIDER_CLIENT_CREDENTIALS",
    "PROVIDER_APPLICATION",
    "PROVIDER_ACCESS_TOKEN",
    "PROVIDER_LOCAL",
    "PROVIDER_LDAP",
    "PROVIDER_LINK",
    "PROVIDER_NONE",
    "PROVIDER_TYPES",
    # Capability sets
    "REMOTE_PROVIDERS",
    "LOCAL_PROVIDERS",
    "METHOD_2FA_PROVIDERS",
    "CLIENT_PROVIDERS",
    # Descriptions
    "ProviderInfo",
    "describe_providers",
]
