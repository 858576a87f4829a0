"""Configured authentication provider

Resolves the provider type selected for this deployment.
"""

import logging
from typing import Optional, Union

from authn.config.settings import get_settings
from authn.domain.models.provider_type import PROVIDER_TYPES, ProviderType, provider

logger = logging.getLogger(__name__)

# Resolved provider (initialized on first call)
_provider_instance: Optional[ProviderType] = None


def get_configured_provider() -> ProviderType:
    """Get the configured authentication provider type.

    Provider is selected via AUTH_PROVIDER environment variable, e.g.:
    - default: Built-in account authentication (used when unset)
    - local: Username/password
    - ldap: LDAP/AD directory (aliases: ad, ldap/ad)

    Unknown identifiers are returned as they are.

    Returns:
        Normalized ProviderType
    """
    global _provider_instance

    # Return cached instance
    if _provider_instance is not None:
        return _provider_instance

    configured = get_settings().auth_provider

    if configured not in PROVIDER_TYPES:
        logger.warning(
            f"Unknown AUTH_PROVIDER: {configured}. "
            f"Built-in options: {', '.join(str(p) for p in PROVIDER_TYPES)}"
        )

    _provider_instance = configured
    logger.info(f"Auth provider initialized: {configured} ({configured.pretty()})")
    return _provider_instance


def reset_provider() -> None:
    """Reset the cached provider type (for testing)."""
    global _provider_instance
    _provider_instance = None


def provider_allows_2fa(value: Union[ProviderType, str, None]) -> bool:
    """Check if a stored or user-supplied provider supports two-factor auth."""
    if not isinstance(value, ProviderType):
        value = provider(value)

    allowed = value.supports_2fa()
    logger.debug(f"2FA for provider {value}: {'allowed' if allowed else 'not available'}")
    return allowed
