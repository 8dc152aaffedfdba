"""Python client for the CreateSend email marketing API."""

__version__ = "0.1.0"

from createsend_client.auth import AuthManager
from createsend_client.config import AppSettings, ConfigurationError
from createsend_client.decoding import ResponseDecodeError, decode_body
from createsend_client.errors import (
    ApiHttpError,
    BadRequest,
    ClientError,
    CreateSendError,
    ExpiredOAuthToken,
    NotFound,
    ServerError,
    Unauthorized,
)
from createsend_client.http import HttpClient
from createsend_client.logging_utils import configure_logging
from createsend_client.models import ApiErrorPayload, ApiKeyCredentials, OAuthCredentials
from createsend_client.services import CreateSend

__all__ = [
    "ApiErrorPayload",
    "ApiHttpError",
    "ApiKeyCredentials",
    "AppSettings",
    "AuthManager",
    "BadRequest",
    "ClientError",
    "ConfigurationError",
    "CreateSend",
    "CreateSendError",
    "ExpiredOAuthToken",
    "HttpClient",
    "NotFound",
    "OAuthCredentials",
    "ResponseDecodeError",
    "ServerError",
    "Unauthorized",
    "configure_logging",
    "decode_body",
]
