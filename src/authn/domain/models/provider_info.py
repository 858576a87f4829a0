"""Provider Description Models

Pydantic models that summarize a provider type for storage, logging and
UI display. All fields are derived from the ProviderType predicates.
"""

from typing import Iterable, List, Optional, Union

from pydantic import BaseModel, Field

from authn.domain.models.provider_type import PROVIDER_TYPES, ProviderType, provider


class ProviderInfo(BaseModel):
    """Provider type with its display forms and capabilities

    Attributes:
        provider: Provider type (serialized in canonical form)
        name: Canonical identifier
        label: Human-readable label
        remote: Authentication is handled by an external directory
        local: Local authentication is possible
        supports_2fa: Two-factor authentication with a passcode is available
        client: Authentication is provided for a client
        application: Authentication is provided for an application
        default: This is the default provider
    """

    provider: ProviderType
    name: str = Field(..., description="Canonical identifier", examples=["ldap"])
    label: str = Field(..., description="Human-readable label", examples=["LDAP/AD"])
    remote: bool = False
    local: bool = False
    supports_2fa: bool = False
    client: bool = False
    application: bool = False
    default: bool = False

    @classmethod
    def from_provider(cls, value: Union[ProviderType, str, None]) -> "ProviderInfo":
        """Describe a provider type.

        Plain strings are parsed with provider() first, ProviderType values
        are described as they are.
        """
        if not isinstance(value, ProviderType):
            value = provider(value)

        # model_construct keeps the ProviderType as given instead of re-parsing it
        return cls.model_construct(
            provider=value,
            name=value.string(),
            label=value.pretty(),
            remote=value.is_remote(),
            local=value.is_local(),
            supports_2fa=value.supports_2fa(),
            client=value.is_client(),
            application=value.is_application(),
            default=value.is_default(),
        )


def describe_providers(
    values: Optional[Iterable[Union[ProviderType, str]]] = None,
) -> List[ProviderInfo]:
    """Describe the given provider types, or all built-in types if omitted"""
    if values is None:
        values = PROVIDER_TYPES
    return [ProviderInfo.from_provider(v) for v in values]
