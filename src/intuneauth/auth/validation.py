from __future__ import annotations

from datetime import datetime, timezone

from .models import TokenResult


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_valid(token: TokenResult | None, now: datetime) -> bool:
    """Return True if ``token`` carries an access token that is still valid at ``now``.

    Naive datetimes are read as UTC.
    """
    if token is None or token.access_token is None or token.expires_on is None:
        return False
    return _as_utc(token.expires_on) > _as_utc(now)
