from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from pydantic import SecretStr

from .errors import AuthenticationFailureError

if TYPE_CHECKING:
    from azure.core.credentials import AccessToken


@dataclass(frozen=True)
class TokenResult:
    """Outcome of a single token exchange with the authority."""

    access_token: str | None = field(default=None, repr=False)
    expires_on: datetime | None = None
    token_type: str = "Bearer"

    @classmethod
    def from_access_token(cls, token: "AccessToken") -> "TokenResult":
        """Build a result from an ``azure.core`` :class:`AccessToken` (epoch seconds)."""
        return cls(
            access_token=token.token,
            expires_on=datetime.fromtimestamp(token.expires_on, tz=timezone.utc),
        )

    def authorization_header(self) -> str:
        """Return the value for an ``Authorization`` request header.

        Raises:
            AuthenticationFailureError: If the result carries no access token.
        """
        if not self.access_token:
            raise AuthenticationFailureError("Token result has no access token")
        return f"{self.token_type} {self.access_token}"


@dataclass(frozen=True)
class UserCredential:
    """End-user identity for the interactive and password flows."""

    username: str
    password: SecretStr | None = None

    @property
    def has_password(self) -> bool:
        return self.password is not None and bool(self.password.get_secret_value())
