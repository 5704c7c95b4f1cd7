"""Authority contexts: the network layer that talks to the identity authority.

:class:`TokenClient` and :func:`acquire_user_token` only depend on the
protocols below, so tests can pass a double instead of the
``azure-identity`` backed implementations.
"""

from __future__ import annotations

import logging
from typing import Protocol

from azure.identity import (
    ClientSecretCredential,
    InteractiveBrowserCredential,
    UsernamePasswordCredential,
)
from pydantic import SecretStr

from .config import ClientCredential
from .models import TokenResult
from .scopes import (
    COMMON_AUTHORITY,
    OOB_REDIRECT_URI,
    authority_from_url,
    scope_from_resource,
    tenant_from_endpoint,
)

logger = logging.getLogger(__name__)


class AuthorityContext(Protocol):
    """Exchanges an application credential for a token."""

    def acquire_token(
        self, resource: str, credential: ClientCredential
    ) -> TokenResult | None:
        """Acquire a token for ``resource`` with the client credential flow."""
        raise NotImplementedError


class UserAuthorityContext(Protocol):
    """Exchanges end-user identity for a token using a public client."""

    def acquire_token_interactive(
        self, resource: str, client_id: str, redirect_uri: str, login_hint: str
    ) -> TokenResult | None:
        """Let the authority prompt the user identified by ``login_hint``."""
        raise NotImplementedError

    def acquire_token_by_password(
        self, resource: str, client_id: str, username: str, password: SecretStr
    ) -> TokenResult | None:
        """Resource-owner password credential grant."""
        raise NotImplementedError


class ClientSecretAuthorityContext:
    """:class:`AuthorityContext` backed by ``azure.identity.ClientSecretCredential``.

    Args:
        authority: Authority host, e.g. ``https://login.microsoftonline.com``.
        tenant_id: Directory the credential is scoped to.
    """

    def __init__(self, authority: str, tenant_id: str) -> None:
        self.authority = authority
        self.tenant_id = tenant_id
        logger.debug(
            "Client context bound to %s (tenant %s)", self.authority, self.tenant_id
        )

    def acquire_token(
        self, resource: str, credential: ClientCredential
    ) -> TokenResult | None:
        with ClientSecretCredential(
            tenant_id=self.tenant_id,
            client_id=credential.app_id,
            client_secret=credential.app_secret.get_secret_value(),
            authority=self.authority,
        ) as cred:
            token = cred.get_token(scope_from_resource(resource))
        return TokenResult.from_access_token(token) if token else None


class PublicClientAuthorityContext:
    """:class:`UserAuthorityContext` backed by ``azure-identity`` public client credentials.

    The interactive flow opens the system browser through
    ``InteractiveBrowserCredential``. ``azure-identity`` has no listener for the
    out-of-band redirect, so that URI lets it pick its own loopback redirect.
    """

    def __init__(self, authority_endpoint: str = COMMON_AUTHORITY) -> None:
        self.authority = authority_from_url(authority_endpoint)
        self.tenant_id = tenant_from_endpoint(authority_endpoint)

    def acquire_token_interactive(
        self, resource: str, client_id: str, redirect_uri: str, login_hint: str
    ) -> TokenResult | None:
        kwargs = {
            "tenant_id": self.tenant_id,
            "client_id": client_id,
            "authority": self.authority,
            "login_hint": login_hint,
        }
        if redirect_uri != OOB_REDIRECT_URI:
            kwargs["redirect_uri"] = redirect_uri
        with InteractiveBrowserCredential(**kwargs) as cred:
            token = cred.get_token(scope_from_resource(resource))
        return TokenResult.from_access_token(token) if token else None

    def acquire_token_by_password(
        self, resource: str, client_id: str, username: str, password: SecretStr
    ) -> TokenResult | None:
        with UsernamePasswordCredential(
            client_id=client_id,
            username=username,
            password=password.get_secret_value(),
            tenant_id=self.tenant_id,
            authority=self.authority,
        ) as cred:
            token = cred.get_token(scope_from_resource(resource))
        return TokenResult.from_access_token(token) if token else None
