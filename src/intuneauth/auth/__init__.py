"""Access token acquisition against an Entra ID authority.

Public API:
- resolve() → ClientConfiguration (configuration keys → typed settings)
- TokenClient (client credential flow)
- acquire_user_token() (interactive / password flows)
- is_valid() (token usability check)
- TokenResult, ClientCredential, UserCredential
- AuthorityContext, UserAuthorityContext (network layer protocols)
- MissingConfigurationError, InvalidConfigurationError, InvalidArgumentError,
  AuthenticationFailureError
"""

from .client import TokenClient
from .config import (
    ClientConfiguration,
    ClientCredential,
    EnvironmentSettings,
    resolve,
    resolve_from_environment,
)
from .context import (
    AuthorityContext,
    ClientSecretAuthorityContext,
    PublicClientAuthorityContext,
    UserAuthorityContext,
)
from .errors import (
    AuthenticationFailureError,
    AuthError,
    InvalidArgumentError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from .interactive import acquire_user_token
from .models import TokenResult, UserCredential
from .scopes import DEFAULT_AUTHORITY, GRAPH_RESOURCE, scope_from_resource
from .validation import is_valid

__all__ = [
    "TokenClient",
    "ClientConfiguration",
    "ClientCredential",
    "EnvironmentSettings",
    "resolve",
    "resolve_from_environment",
    "AuthorityContext",
    "UserAuthorityContext",
    "ClientSecretAuthorityContext",
    "PublicClientAuthorityContext",
    "AuthError",
    "MissingConfigurationError",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    "AuthenticationFailureError",
    "acquire_user_token",
    "TokenResult",
    "UserCredential",
    "DEFAULT_AUTHORITY",
    "GRAPH_RESOURCE",
    "scope_from_resource",
    "is_valid",
]
