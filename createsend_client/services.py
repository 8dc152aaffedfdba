from __future__ import annotations

from typing import Any

import requests

from createsend_client.apis import AccountApi, TransactionalBasicEmailApi
from createsend_client.auth import AuthManager
from createsend_client.config import AppSettings
from createsend_client.http import HttpClient
from createsend_client.logging_utils import configure_logging
from createsend_client.models import Credentials


class CreateSend:
    """Entry point bundling settings, credentials, the HTTP client and the accessors."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        auth_manager: AuthManager | None = None,
        session: requests.Session | None = None,
    ):
        self._settings = settings or AppSettings()
        self._session = session
        self._auth_manager = auth_manager or AuthManager.from_settings(self._settings)
        self._http_client = HttpClient(self._settings, self._auth_manager, session=session)
        self.account = AccountApi(self._http_client)
        self.transactional = TransactionalBasicEmailApi(self._http_client)

    @staticmethod
    def from_env(session: requests.Session | None = None) -> "CreateSend":
        settings = AppSettings.from_env()
        configure_logging(settings.log_level)
        return CreateSend(settings, session=session)

    def with_credentials(self, credentials: Credentials) -> "CreateSend":
        """Return an independent client sharing these settings and session but using ``credentials``."""
        return CreateSend(self._settings, AuthManager(credentials), session=self._session)

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def http_client(self) -> HttpClient:
        return self._http_client

    def request(self, method: str, path: str, **options: Any) -> Any:
        return self._http_client.request(method, path, **options)

    def set_api_key(self, api_key: str) -> None:
        self._auth_manager.set_api_key(api_key)

    def get_api_key(self) -> str | None:
        return self._auth_manager.get_api_key()

    def set_oauth(self, access_token: str, refresh_token: str | None = None) -> None:
        self._auth_manager.set_oauth(access_token, refresh_token)

    def get_oauth(self) -> tuple[str | None, str | None]:
        return self._auth_manager.get_oauth()

    def refresh_oauth(self, refresh_token: str | None = None) -> tuple[str, str]:
        return self._auth_manager.refresh_oauth(refresh_token)
