"""Authentication provider types.

Normalizes and classifies authentication provider identifiers:
- provider(): parse loosely formatted names and legacy aliases
- ProviderType: open string type with capability predicates
- ProviderInfo: display and capability summary for a provider
"""

from authn.core.providers import get_configured_provider, provider_allows_2fa
from authn.domain.models import (
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
    ProviderInfo,
    ProviderType,
    describe_providers,
    provider,
)

__all__ = [
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
    "REMOTE_PROVIDERS",
    "LOCAL_PROVIDERS",
    "METHOD_2FA_PROVIDERS",
    "CLIENT_PROVIDERS",
    "ProviderInfo",
    "describe_providers",
    "get_configured_provider",
    "provider_allows_2fa",
]
