from typing import Final
from urllib.parse import urlparse

DEFAULT_AUTHORITY: Final[str] = "https://login.microsoftonline.com/"
COMMON_AUTHORITY: Final[str] = "https://login.microsoftonline.com/common"
GRAPH_RESOURCE: Final[str] = "https://graph.microsoft.com"

# Well-known public client registration used for user sign-in.
PUBLIC_CLIENT_ID: Final[str] = "1950a258-227b-4e31-a9cf-717495945fc2"
OOB_REDIRECT_URI: Final[str] = "urn:ietf:wg:oauth:2.0:oob"


def authority_from_url(url: str) -> str:
    """Return the URL authority (scheme + host).

    Args:
        url: Absolute URL (e.g., "https://login.microsoftonline.com/contoso").

    Returns:
        The "<scheme>://<host>" portion of the URL.

    Raises:
        ValueError: If ``url`` is not absolute or lacks a host.
    """
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError("url must be an absolute URL")
    return f"{parsed.scheme}://{parsed.netloc}"


def authority_host(authority: str) -> str:
    """Return ``scheme://host`` for an authority base URL.

    Raises:
        ValueError: If ``authority`` is not absolute or carries a path.
    """
    host = authority_from_url(authority)
    if urlparse(authority).path.strip("/"):
        raise ValueError("authority must not include a path")
    return host


def tenant_from_endpoint(endpoint: str) -> str:
    """Return the tenant segment of an authority endpoint.

    Raises:
        ValueError: If ``endpoint`` is not absolute or has no tenant segment.
    """
    authority_from_url(endpoint)
    tenant = urlparse(endpoint).path.strip("/").split("/")[0]
    if not tenant:
        raise ValueError("endpoint must include a tenant segment")
    return tenant


def join_authority(authority: str, tenant: str) -> str:
    """Concatenate an authority base URL and a tenant identifier."""
    if not authority.endswith("/"):
        authority += "/"
    return f"{authority}{tenant}"


def scope_from_resource(resource: str) -> str:
    """Turn a v1 resource identifier into its v2 ``/.default`` scope."""
    return f"{resource.rstrip('/')}/.default"
