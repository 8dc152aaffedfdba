from __future__ import annotations

import logging

from requests.auth import AuthBase

from createsend_client.config import AppSettings
from createsend_client.models import ApiKeyCredentials, Credentials, OAuthCredentials

logger = logging.getLogger(__name__)

PLACEHOLDER_REFRESHED_TOKENS = ("new access token", "new refresh token")


class AuthManager:
    """Holds the credentials used by one client.

    The state is a single immutable value, so switching between API key
    and OAuth never leaves fields from the previous mode behind.
    """

    def __init__(self, credentials: Credentials | None = None):
        self._credentials = credentials

    @staticmethod
    def from_settings(settings: AppSettings) -> "AuthManager":
        if settings.api_key:
            return AuthManager(ApiKeyCredentials(settings.api_key))
        if settings.access_token:
            return AuthManager(OAuthCredentials(settings.access_token, settings.refresh_token or None))
        return AuthManager()

    @property
    def credentials(self) -> Credentials | None:
        return self._credentials

    def reset(self) -> None:
        self._credentials = None

    def set_api_key(self, api_key: str) -> None:
        self._credentials = ApiKeyCredentials(api_key)
        logger.debug("Authenticating with API key")

    def get_api_key(self) -> str | None:
        if isinstance(self._credentials, ApiKeyCredentials):
            return self._credentials.api_key
        return None

    def set_oauth(self, access_token: str, refresh_token: str | None = None) -> None:
        # An omitted refresh token clears the previous one.
        self._credentials = OAuthCredentials(access_token, refresh_token or None)
        logger.debug("Authenticating with OAuth access token")

    def get_oauth(self) -> tuple[str | None, str | None]:
        if isinstance(self._credentials, OAuthCredentials):
            return self._credentials.access_token, self._credentials.refresh_token
        return None, None

    def refresh_oauth(self, refresh_token: str | None = None) -> tuple[str, str]:
        """Placeholder for the OAuth token refresh exchange.

        No request is made and the stored credentials are left alone; the
        returned pair is a fixed placeholder, not usable tokens.
        """
        logger.warning("OAuth token refresh is not implemented; returning placeholder tokens")
        return PLACEHOLDER_REFRESHED_TOKENS

    def requests_auth(self) -> AuthBase | None:
        if self._credentials is None:
            return None
        return self._credentials.to_requests_auth()
