"""Authentication Provider Types

Purpose: Identify, classify and normalize authentication providers

A provider type is an open string value: the built-in identifiers below are
the canonical vocabulary, but unknown identifiers are kept as they are rather
than rejected. Values may come from user input, configuration or records
written by older releases that used legacy names such as "token" or
"password", so both the parser (provider) and the string form (string)
map those names onto their canonical identifiers.

Key Components:
- ProviderType: str subclass with classification and formatting helpers
- provider: Normalizing constructor for loosely formatted input
- REMOTE_PROVIDERS, LOCAL_PROVIDERS, METHOD_2FA_PROVIDERS, CLIENT_PROVIDERS:
  Immutable capability sets used by the predicates
"""

from typing import Any, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from authn.core.text import clean_type_lower, upper_first


class ProviderType(str):
    """Authentication provider identifier

    ProviderType("token") keeps the raw value; use provider() to parse and
    normalize untrusted input. Equality, hashing and the predicates work on
    the raw value, while str(), format() and equal() use the canonical form.
    """

    __slots__ = ()

    def _raw(self) -> str:
        return str.__str__(self)

    def is_type(self, other: str) -> bool:
        """Check if the provider is exactly the given type"""
        return self._raw() == other

    def is_not(self, other: str) -> bool:
        """Check if the provider is not the given type"""
        return not self.is_type(other)

    def is_undefined(self) -> bool:
        """Check if the provider is undefined"""
        return self._raw() == ""

    def is_remote(self) -> bool:
        """Check if authentication is handled by an external directory"""
        return self._raw() in REMOTE_PROVIDERS

    def is_local(self) -> bool:
        """Check if local authentication is possible"""
        return self._raw() in LOCAL_PROVIDERS

    def supports_2fa(self) -> bool:
        """Check if the provider supports two-factor authentication with a passcode"""
        return self._raw() in METHOD_2FA_PROVIDERS

    def is_client(self) -> bool:
        """Check if the authentication is provided for a client"""
        return self._raw() in CLIENT_PROVIDERS

    def is_application(self) -> bool:
        """Check if the authentication is provided for an application"""
        return self._raw() == "application"

    def is_default(self) -> bool:
        """Check if this is the default provider (compares canonical forms)"""
        return self.string() == PROVIDER_DEFAULT.string()

    def string(self) -> str:
        """Return the canonical identifier.

        Legacy names are mapped even when they were stored without going
        through provider(): "" -> default, token -> link, password -> local,
        oauth2 and "client credentials" -> client_credentials.
        """
        raw = self._raw()

        if raw == "":
            return "default"
        elif raw == "token":
            return "link"
        elif raw == "password":
            return "local"
        elif raw in ("oauth2", "client credentials"):
            return "client_credentials"

        return raw

    def equal(self, s: Optional[str]) -> bool:
        """Check if s matches the canonical identifier, ignoring case"""
        if not isinstance(s, str):
            s = ""
        return str.__str__(s).lower() == self.string().lower()

    def not_equal(self, s: Optional[str]) -> bool:
        """Check if s does not match the canonical identifier"""
        return not self.equal(s)

    def pretty(self) -> str:
        """Return the identifier in an easy-to-read format"""
        raw = self._raw()

        if raw == "ldap":
            return "LDAP/AD"
        elif raw == "client":
            return "Client"
        elif raw == "access_token":
            return "Access Token"
        elif raw == "client_credentials":
            return "Client Credentials"

        return upper_first(self.string())

    def __str__(self) -> str:
        return self.string()

    def __format__(self, format_spec: str) -> str:
        return format(self.string(), format_spec)

    def __repr__(self) -> str:
        return f"ProviderType({self._raw()!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate fields through provider() and serialize the canonical form"""
        return core_schema.no_info_after_validator_function(
            provider,
            core_schema.str_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )


# Standard authentication provider types
PROVIDER_UNDEFINED = ProviderType("")
PROVIDER_DEFAULT = ProviderType("default")
PROVIDER_CLIENT = ProviderType("client")
PROVIDER_CLIENT_CREDENTIALS = ProviderType("client_credentials")
PROVIDER_APPLICATION = ProviderType("application")
PROVIDER_ACCESS_TOKEN = ProviderType("access_token")
PROVIDER_LOCAL = ProviderType("local")
PROVIDER_LDAP = ProviderType("ldap")
PROVIDER_LINK = ProviderType("link")
PROVIDER_NONE = ProviderType("none")

# Built-in identifiers in declaration order (undefined excluded)
PROVIDER_TYPES = (
    PROVIDER_DEFAULT,
    PROVIDER_CLIENT,
    PROVIDER_CLIENT_CREDENTIALS,
    PROVIDER_APPLICATION,
    PROVIDER_ACCESS_TOKEN,
    PROVIDER_LOCAL,
    PROVIDER_LDAP,
    PROVIDER_LINK,
    PROVIDER_NONE,
)

# Remote auth providers
REMOTE_PROVIDERS = frozenset({
    str(PROVIDER_LDAP),
})

# Local auth providers
LOCAL_PROVIDERS = frozenset({
    str(PROVIDER_LOCAL),
})

# Auth providers that support two-factor authentication
METHOD_2FA_PROVIDERS = frozenset({
    str(PROVIDER_DEFAULT),
    str(PROVIDER_LOCAL),
    str(PROVIDER_LDAP),
})

# Client auth providers
CLIENT_PROVIDERS = frozenset({
    str(PROVIDER_CLIENT),
    str(PROVIDER_CLIENT_CREDENTIALS),
    str(PROVIDER_APPLICATION),
    str(PROVIDER_ACCESS_TOKEN),
})

# Aliases recognized by provider(), keyed by cleaned lower-case input
_ALIASES = {
    "": PROVIDER_DEFAULT,
    "-": PROVIDER_DEFAULT,
    "null": PROVIDER_DEFAULT,
    "nil": PROVIDER_DEFAULT,
    "0": PROVIDER_DEFAULT,
    "false": PROVIDER_DEFAULT,
    "token": PROVIDER_LINK,
    "url": PROVIDER_LINK,
    "pass": PROVIDER_LOCAL,
    "passwd": PROVIDER_LOCAL,
    "password": PROVIDER_LOCAL,
    "ldap": PROVIDER_LDAP,
    "ad": PROVIDER_LDAP,
    "ldap/ad": PROVIDER_LDAP,
    "ldap\\ad": PROVIDER_LDAP,
    "oauth2": PROVIDER_CLIENT_CREDENTIALS,
    "client credentials": PROVIDER_CLIENT_CREDENTIALS,
}


def provider(s: Optional[str]) -> ProviderType:
    """Parse a string into a normalized provider type.

    Input is lower-cased and cleaned, known aliases map to their canonical
    identifier and anything else is returned as is. Never raises.

    Args:
        s: Raw provider name from user input, configuration or storage

    Returns:
        Normalized ProviderType
    """
    if isinstance(s, str):
        s = str.__str__(s)
    else:
        s = ""

    s = clean_type_lower(s)
    return _ALIASES.get(s, ProviderType(s))
