from __future__ import annotations

from typing import Any

from createsend_client.http import HttpClient
from createsend_client.models import (
    Administrator,
    ApiKeyResult,
    BillingDetails,
    ClientSummary,
    PrimaryContact,
    SystemDate,
)


class AccountApi:
    def __init__(self, http_client: HttpClient):
        self._http_client = http_client

    def api_key(self, site_url: str, username: str, password: str) -> ApiKeyResult:
        return ApiKeyResult.from_dict(self._http_client.exchange_api_key(site_url, username, password) or {})

    def clients(self) -> list[ClientSummary]:
        return [ClientSummary.from_dict(item) for item in (self._http_client.get("/clients.json") or [])]

    def billing_details(self) -> BillingDetails:
        return BillingDetails.from_dict(self._http_client.get("/billingdetails.json") or {})

    def countries(self) -> list[str]:
        return list(self._http_client.get("/countries.json") or [])

    def system_date(self) -> SystemDate:
        return SystemDate.from_dict(self._http_client.get("/systemdate.json") or {})

    def timezones(self) -> list[str]:
        return list(self._http_client.get("/timezones.json") or [])

    def administrators(self) -> list[Administrator]:
        return [Administrator.from_dict(item) for item in (self._http_client.get("/admins.json") or [])]

    def get_primary_contact(self) -> PrimaryContact:
        return PrimaryContact.from_dict(self._http_client.get("/primarycontact.json") or {})

    def set_primary_contact(self, email: str) -> PrimaryContact:
        email = email.strip()
        if not email:
            raise ValueError("Primary contact email is required")
        response: Any = self._http_client.put("/primarycontact.json", params={"email": email})
        return PrimaryContact.from_dict(response or {})
