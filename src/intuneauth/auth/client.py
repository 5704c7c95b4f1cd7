from __future__ import annotations

import logging
from typing import Any, Mapping

from .config import ClientConfiguration, resolve, resolve_from_environment
from .context import AuthorityContext, ClientSecretAuthorityContext
from .errors import AuthenticationFailureError, InvalidArgumentError
from .models import TokenResult

logger = logging.getLogger(__name__)


class TokenClient:
    """Acquires application tokens with the client credential flow.

    The client owns one :class:`ClientCredential` and one
    :class:`AuthorityContext` for its whole lifetime. It may be reused for
    sequential calls but does no locking of its own.
    """

    def __init__(
        self,
        config: ClientConfiguration | Mapping[str, str] | None,
        *,
        trace: logging.Logger | None = None,
        authority_context: AuthorityContext | None = None,
    ) -> None:
        """Build a client from resolved or raw configuration.

        Args:
            config: A :class:`ClientConfiguration` or a raw mapping, which is
                passed through :func:`~intuneauth.auth.config.resolve`.
            trace: Tracing sink. Defaults to this module's logger.
            authority_context: Network layer override. Defaults to a
                :class:`ClientSecretAuthorityContext` bound to the tenant endpoint.

        Raises:
            MissingConfigurationError: If required configuration is missing.
            InvalidConfigurationError: If the authority is not an absolute URL
                without a path.
        """
        cfg = config if isinstance(config, ClientConfiguration) else resolve(config)

        self._log = trace or logger
        self._credential = cfg.credential()
        self.authority_endpoint = cfg.authority_endpoint
        self._context = authority_context or ClientSecretAuthorityContext(
            cfg.authority_host, cfg.tenant
        )

    @classmethod
    def from_environment(cls, **kwargs: Any) -> "TokenClient":
        """Build a client from ``TENANT`` / ``AAD_APP_ID`` / ``AAD_APP_KEY`` env vars."""
        return cls(resolve_from_environment(), **kwargs)

    @property
    def app_id(self) -> str:
        return self._credential.app_id

    def acquire_token(self, resource: str) -> TokenResult:
        """Acquire an access token for ``resource``.

        Args:
            resource: Identifier of the downstream API (e.g. "https://graph.microsoft.com").

        Returns:
            The token returned by the authority.

        Raises:
            InvalidArgumentError: If ``resource`` is empty or whitespace-only.
            AuthenticationFailureError: If the authority returned no result, or a
                result without an access token or expiry.
        """
        if resource is None or not resource.strip():
            raise InvalidArgumentError("resource")

        self._log.info(
            "Acquiring token for %s from %s (app %s)",
            resource,
            self.authority_endpoint,
            self._credential.app_id,
        )
        result = self._context.acquire_token(resource, self._credential)
        if result is None:
            self._log.warning("Authority %s returned no result", self.authority_endpoint)
            raise AuthenticationFailureError("Authentication result was null")
        if not result.access_token or result.expires_on is None:
            self._log.warning(
                "Authority %s returned an incomplete token", self.authority_endpoint
            )
            raise AuthenticationFailureError("Authentication result was incomplete")
        return result
