from __future__ import annotations

import logging
from typing import Any

import requests
from requests.auth import AuthBase, HTTPBasicAuth

from createsend_client import __version__
from createsend_client.auth import AuthManager
from createsend_client.config import AppSettings
from createsend_client.decoding import decode_body
from createsend_client.errors import raise_for_status

logger = logging.getLogger(__name__)

USER_AGENT = f"createsend-python-{__version__}"
BODY_METHODS = ("POST", "PUT")
SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")


class HttpClient:
    def __init__(
        self,
        settings: AppSettings,
        auth_manager: AuthManager,
        session: requests.Session | None = None,
    ):
        self._settings = settings
        self._auth_manager = auth_manager
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": USER_AGENT,
                "Content-Type": "application/json; charset=utf-8",
                "Accept-Encoding": "gzip, deflate",
            }
        )

    @property
    def auth_manager(self) -> AuthManager:
        return self._auth_manager

    def build_url(self, path: str, use_oauth_base: bool = False) -> str:
        base_url = self._settings.oauth_base_url if use_oauth_base else self._settings.base_url
        return f"{base_url.rstrip('/')}{path}"

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: Any = None,
        use_oauth_base: bool = False,
        auth: AuthBase | None = None,
    ) -> Any:
        """Send one request and return the decoded body.

        ``auth`` replaces the client's active credentials for this call only.
        Non-2xx/3xx responses raise the matching ``ApiHttpError`` subclass.
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = self.build_url(path, use_oauth_base)
        request_auth = auth if auth is not None else self._auth_manager.requests_auth()
        if request_auth is None:
            logger.debug("No credentials configured for %s %s", method, url)

        filtered_params = None
        if params:
            filtered_params = {key: value for key, value in params.items() if value is not None}

        response = self._session.request(
            method,
            url,
            params=filtered_params or None,
            json=body if method in BODY_METHODS else None,
            auth=request_auth,
            timeout=self._settings.timeout_seconds,
        )
        logger.debug("%s %s -> %s", method, url, response.status_code)

        content_type = response.headers.get("Content-Type")
        return raise_for_status(
            response.status_code,
            lambda: decode_body(response.content, content_type),
        )

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Any = None, params: dict[str, Any] | None = None) -> Any:
        return self.request("POST", path, params=params, body=body)

    def put(self, path: str, body: Any = None, params: dict[str, Any] | None = None) -> Any:
        return self.request("PUT", path, params=params, body=body)

    def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("DELETE", path, params=params)

    def exchange_api_key(self, site_url: str, username: str, password: str) -> Any:
        """Trade a site URL plus login for the account's API key.

        The login is used for this call only; the client's credentials are
        not touched.
        """
        if not site_url.strip():
            raise ValueError("Site URL is required")
        return self.request(
            "GET",
            "/apikey.json",
            params={"SiteUrl": site_url},
            use_oauth_base=True,
            auth=HTTPBasicAuth(username, password),
        )
