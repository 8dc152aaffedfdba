from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from requests.auth import AuthBase, HTTPBasicAuth

# The API ignores the password half of basic auth when the username is an API key.
API_KEY_PASSWORD = "x"


class BearerAuth(AuthBase):
    def __init__(self, token: str):
        self.token = token

    def __call__(self, request):
        request.headers["Authorization"] = f"Bearer {self.token}"
        return request

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BearerAuth) and other.token == self.token


@dataclass(frozen=True)
class ApiKeyCredentials:
    api_key: str

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValueError("API key must be a non-empty string")

    def to_requests_auth(self) -> AuthBase:
        return HTTPBasicAuth(self.api_key, API_KEY_PASSWORD)

    def __repr__(self) -> str:
        return "ApiKeyCredentials(api_key='***')"


@dataclass(frozen=True)
class OAuthCredentials:
    access_token: str
    refresh_token: str | None = None

    def __post_init__(self) -> None:
        if not self.access_token:
            raise ValueError("OAuth access token must be a non-empty string")

    def to_requests_auth(self) -> AuthBase:
        return BearerAuth(self.access_token)

    def __repr__(self) -> str:
        refresh = "'***'" if self.refresh_token else "None"
        return f"OAuthCredentials(access_token='***', refresh_token={refresh})"


Credentials = Union[ApiKeyCredentials, OAuthCredentials]


@dataclass(frozen=True)
class ApiErrorPayload:
    code: int
    message: str
    result_data: Any = None

    @staticmethod
    def from_body(body: Any) -> "ApiErrorPayload":
        if not isinstance(body, dict):
            return ApiErrorPayload(code=0, message="" if body is None else str(body))

        raw_code = body.get("Code", body.get("code", 0))
        try:
            code = int(raw_code)
        except (TypeError, ValueError):
            code = 0
        message = body.get("Message", body.get("message", ""))
        result_data = body.get("ResultData", body.get("resultData"))
        return ApiErrorPayload(code=code, message=str(message), result_data=result_data)


# Account records


@dataclass(frozen=True)
class ClientSummary:
    client_id: str
    name: str

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "ClientSummary":
        return ClientSummary(client_id=str(data.get("ClientID", "")), name=str(data.get("Name", "")))


@dataclass(frozen=True)
class BillingDetails:
    credits: int

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "BillingDetails":
        return BillingDetails(credits=int(data.get("Credits", 0)))


@dataclass(frozen=True)
class SystemDate:
    system_date: str

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "SystemDate":
        return SystemDate(system_date=str(data.get("SystemDate", "")))


@dataclass(frozen=True)
class Administrator:
    email_address: str
    name: str
    status: str | None = None

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Administrator":
        return Administrator(
            email_address=str(data.get("EmailAddress", "")),
            name=str(data.get("Name", "")),
            status=data.get("Status"),
        )


@dataclass(frozen=True)
class PrimaryContact:
    email_address: str

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "PrimaryContact":
        return PrimaryContact(email_address=str(data.get("EmailAddress", "")))


@dataclass(frozen=True)
class ApiKeyResult:
    api_key: str

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "ApiKeyResult":
        return ApiKeyResult(api_key=str(data.get("ApiKey", "")))

    def __repr__(self) -> str:
        return "ApiKeyResult(api_key='***')"


# Transactional records


@dataclass(frozen=True)
class TransactionalGroup:
    group: str
    created_at: str | None = None

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "TransactionalGroup":
        return TransactionalGroup(group=str(data.get("Group", "")), created_at=data.get("CreatedAt"))


@dataclass(frozen=True)
class SendResult:
    message_id: str
    recipient: str
    status: str
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "SendResult":
        known = {"MessageID", "Recipient", "Status"}
        return SendResult(
            message_id=str(data.get("MessageID", "")),
            recipient=str(data.get("Recipient", "")),
            status=str(data.get("Status", "")),
            extra={key: value for key, value in data.items() if key not in known},
        )
