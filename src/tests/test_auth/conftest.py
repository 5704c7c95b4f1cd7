from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from typing import Any, Iterator

import pytest
from azure.core.credentials import AccessToken

from intuneauth.auth import context as context_module
from intuneauth.auth.config import ClientCredential
from intuneauth.auth.models import TokenResult

NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def clear_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove all environment variables to prevent cross-test leakage.

    Yields:
        Iterator[None]: Context manager semantics for pytest.
    """
    to_clear = [k for k in os.environ.keys()]
    for k in to_clear:
        monkeypatch.delenv(k, raising=False)
    yield


@pytest.fixture()
def now() -> datetime:
    return NOW


class StubAuthorityContext:
    """AuthorityContext double that records calls and returns a canned result."""

    def __init__(self, result: TokenResult | None = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, ClientCredential]] = []

    def acquire_token(self, resource: str, credential: ClientCredential) -> TokenResult | None:
        self.calls.append((resource, credential))
        if self.error is not None:
            raise self.error
        return self.result


class StubUserAuthorityContext:
    """UserAuthorityContext double recording which flow was taken."""

    def __init__(self, result: TokenResult | None = None) -> None:
        self.result = result
        self.interactive_calls: list[tuple[Any, ...]] = []
        self.password_calls: list[tuple[Any, ...]] = []

    def acquire_token_interactive(self, resource, client_id, redirect_uri, login_hint):
        self.interactive_calls.append((resource, client_id, redirect_uri, login_hint))
        return self.result

    def acquire_token_by_password(self, resource, client_id, username, password):
        self.password_calls.append((resource, client_id, username, password))
        return self.result


@pytest.fixture()
def stub_context() -> StubAuthorityContext:
    return StubAuthorityContext(
        TokenResult(access_token="X", expires_on=NOW + timedelta(seconds=3600))
    )


@pytest.fixture()
def stub_user_context() -> StubUserAuthorityContext:
    return StubUserAuthorityContext(
        TokenResult(access_token="U", expires_on=NOW + timedelta(seconds=3600))
    )


@pytest.fixture()
def stub_identity(monkeypatch: pytest.MonkeyPatch) -> dict[str, Any]:
    """Replace the azure-identity credentials used by the context module with recorders.

    Returns:
        dict[str, Any]: Exposes recorder classes for assertion (e.g., call kwargs).
    """

    class _Recorder:
        """Factory to create recorder classes that capture init kwargs."""

        def __init__(self, name: str) -> None:
            self.name = name
            self.cls = self._make(name)

        @staticmethod
        def _make(name: str):
            class _C:
                last_kwargs: dict[str, Any] | None = None
                last_scopes: tuple[str, ...] | None = None
                call_count: int = 0
                closed: bool = False
                expires_on: int = int(NOW.timestamp()) + 3600

                def __init__(self, **kwargs: Any) -> None:
                    type(self).last_kwargs = dict(kwargs)
                    type(self).call_count += 1

                def __enter__(self):
                    return self

                def __exit__(self, *args: Any) -> None:
                    type(self).closed = True

                def get_token(self, *scopes: str, **kwargs: Any) -> AccessToken:
                    type(self).last_scopes = scopes
                    return AccessToken("tok-" + name, type(self).expires_on)

            _C.__name__ = name
            _C.__qualname__ = name
            return _C

    names = [
        "ClientSecretCredential",
        "InteractiveBrowserCredential",
        "UsernamePasswordCredential",
    ]
    recorders = {n: _Recorder(n) for n in names}
    for n, rec in recorders.items():
        monkeypatch.setattr(context_module, n, rec.cls)

    return {n: rec.cls for n, rec in recorders.items()}
