from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Mapping

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import InvalidConfigurationError, MissingConfigurationError
from .scopes import DEFAULT_AUTHORITY, authority_host, join_authority

TENANT_KEY: Final[str] = "TENANT"
APP_ID_KEY: Final[str] = "AAD_APP_ID"
APP_KEY_KEY: Final[str] = "AAD_APP_KEY"
AUTHORITY_KEY: Final[str] = "AUTH_AUTHORITY"

REQUIRED_KEYS: Final[tuple[str, ...]] = (TENANT_KEY, APP_ID_KEY, APP_KEY_KEY)


class ClientConfiguration(BaseModel):
    """Resolved configuration for a confidential client.

    Built by :func:`resolve`; immutable once constructed. ``app_secret`` is a
    :class:`~pydantic.SecretStr` so it never shows up in reprs or logs.
    """

    model_config = ConfigDict(frozen=True)

    tenant: str
    app_id: str
    app_secret: SecretStr
    authority: str = DEFAULT_AUTHORITY

    @property
    def authority_host(self) -> str:
        """``scheme://host`` of the authority base URL."""
        return _authority_host(self.authority)

    @property
    def authority_endpoint(self) -> str:
        """Authority base URL joined with the tenant identifier."""
        return join_authority(self.authority, self.tenant)

    def credential(self) -> "ClientCredential":
        return ClientCredential(app_id=self.app_id, app_secret=self.app_secret)


@dataclass(frozen=True)
class ClientCredential:
    """Application identity (app id + secret) used for the client credential flow."""

    app_id: str
    app_secret: SecretStr


class EnvironmentSettings(BaseSettings):
    """Configuration keys read from the process environment.

    Environment variables:
        - TENANT
        - AAD_APP_ID
        - AAD_APP_KEY
        - AUTH_AUTHORITY (optional)
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    tenant: str | None = Field(
        default=None, validation_alias=AliasChoices("tenant", TENANT_KEY)
    )
    app_id: str | None = Field(
        default=None, validation_alias=AliasChoices("app_id", APP_ID_KEY)
    )
    app_key: SecretStr | None = Field(
        default=None, validation_alias=AliasChoices("app_key", APP_KEY_KEY)
    )
    authority: str | None = Field(
        default=None, validation_alias=AliasChoices("authority", AUTHORITY_KEY)
    )

    def to_mapping(self) -> dict[str, str]:
        """Return the configured keys as a raw configuration mapping."""
        values = {
            TENANT_KEY: self.tenant,
            APP_ID_KEY: self.app_id,
            APP_KEY_KEY: self.app_key.get_secret_value() if self.app_key else None,
            AUTHORITY_KEY: self.authority,
        }
        return {k: v for k, v in values.items() if v is not None}


def _authority_host(authority: str) -> str:
    try:
        return authority_host(authority)
    except ValueError as e:
        raise InvalidConfigurationError(AUTHORITY_KEY, str(e)) from e


def _is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


def resolve(raw_config: Mapping[str, str] | None) -> ClientConfiguration:
    """Validate a raw configuration mapping and build a :class:`ClientConfiguration`.

    Args:
        raw_config: Mapping with ``TENANT``, ``AAD_APP_ID``, ``AAD_APP_KEY`` and
            optionally ``AUTH_AUTHORITY``.

    Returns:
        The resolved configuration. ``authority`` falls back to
        :data:`~intuneauth.auth.scopes.DEFAULT_AUTHORITY` when not set.

    Raises:
        MissingConfigurationError: If the mapping is ``None`` or a required key
            is absent, empty or whitespace-only.
        InvalidConfigurationError: If ``AUTH_AUTHORITY`` is not an absolute URL
            or includes a path.
    """
    if raw_config is None:
        raise MissingConfigurationError("configuration")

    for key in REQUIRED_KEYS:
        if _is_blank(raw_config.get(key)):
            raise MissingConfigurationError(key)

    authority = raw_config.get(AUTHORITY_KEY)
    if _is_blank(authority):
        authority = DEFAULT_AUTHORITY
    _authority_host(authority)

    return ClientConfiguration(
        tenant=raw_config[TENANT_KEY],
        app_id=raw_config[APP_ID_KEY],
        app_secret=SecretStr(raw_config[APP_KEY_KEY]),
        authority=authority,
    )


def resolve_from_environment() -> ClientConfiguration:
    """Resolve configuration from environment variables (see :class:`EnvironmentSettings`)."""
    return resolve(EnvironmentSettings().to_mapping())
