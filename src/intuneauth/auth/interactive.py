"""Token acquisition on behalf of an end user.

Uses a fixed public client registration against the ``common`` authority.
With a password the resource-owner password grant is used directly;
without one the authority drives an interactive sign-in, pre-filled with
the username as a login hint.
"""

from __future__ import annotations

import logging

from pydantic import SecretStr

from .context import PublicClientAuthorityContext, UserAuthorityContext
from .errors import InvalidArgumentError
from .models import TokenResult, UserCredential
from .scopes import GRAPH_RESOURCE, OOB_REDIRECT_URI, PUBLIC_CLIENT_ID

logger = logging.getLogger(__name__)


def _as_user_credential(
    username: str, password: str | SecretStr | None
) -> UserCredential:
    if username is None or not username.strip():
        raise InvalidArgumentError("username")
    if isinstance(password, str):
        password = SecretStr(password)
    return UserCredential(username=username, password=password)


def acquire_user_token(
    username: str,
    password: str | SecretStr | None = None,
    *,
    resource: str = GRAPH_RESOURCE,
    authority_context: UserAuthorityContext | None = None,
) -> TokenResult | None:
    """Acquire a token for ``username``.

    Args:
        username: User principal name, also used as the login hint.
        password: Optional password. When absent (or empty) the interactive flow is used.
        resource: Resource to request a token for.
        authority_context: Network layer override. Defaults to a
            :class:`PublicClientAuthorityContext` on the ``common`` authority.

    Returns:
        Whatever the authority returned; call
        :func:`~intuneauth.auth.validation.is_valid` before using it.

    Raises:
        InvalidArgumentError: If ``username`` or ``resource`` is empty.
    """
    user = _as_user_credential(username, password)
    if resource is None or not resource.strip():
        raise InvalidArgumentError("resource")

    ctx = authority_context or PublicClientAuthorityContext()

    if not user.has_password:
        logger.info("Acquiring token for %s interactively", user.username)
        return ctx.acquire_token_interactive(
            resource, PUBLIC_CLIENT_ID, OOB_REDIRECT_URI, user.username
        )

    logger.warning(
        "Acquiring token for %s with the password grant; MFA-enabled accounts "
        "will be rejected",
        user.username,
    )
    return ctx.acquire_token_by_password(
        resource, PUBLIC_CLIENT_ID, user.username, user.password
    )
