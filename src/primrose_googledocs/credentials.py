"""
Per-request tenant credentials.

Each inbound request carries its own Google OAuth access token in the
X-Google-Access-Token header. Nothing is stored between requests.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from primrose_googledocs.config import ACCESS_TOKEN_HEADER
from primrose_googledocs.errors import AuthenticationError


@dataclass(frozen=True)
class TenantCredentials:
    """Credentials for a single request."""

    access_token: str | None = None


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def parse_tenant_credentials(headers: Mapping[str, str]) -> TenantCredentials:
    """Copy the access token header, if present. Never fails."""
    return TenantCredentials(access_token=_get_header(headers, ACCESS_TOKEN_HEADER))


def validate_credentials(credentials: TenantCredentials) -> None:
    """
    Check that an access token is present.

    Raises:
        AuthenticationError: If the token is missing, empty or whitespace
    """
    if not credentials.access_token or not credentials.access_token.strip():
        raise AuthenticationError(
            f"Missing Google access token. Provide it in the {ACCESS_TOKEN_HEADER} header."
        )


def resolve_credentials(headers: Mapping[str, str]) -> TenantCredentials:
    """Parse and validate credentials from request headers."""
    credentials = parse_tenant_credentials(headers)
    validate_credentials(credentials)
    return credentials
