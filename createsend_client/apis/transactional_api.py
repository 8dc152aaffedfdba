from __future__ import annotations

from typing import Any

from createsend_client.http import HttpClient
from createsend_client.models import SendResult, TransactionalGroup


class TransactionalBasicEmailApi:
    groups_path = "/transactional/basicemail/groups"
    send_path = "/transactional/basicemail/send"

    def __init__(self, http_client: HttpClient, client_id: str | None = None):
        self._http_client = http_client
        self._client_id = client_id

    @property
    def client_id(self) -> str | None:
        return self._client_id

    def for_client(self, client_id: str) -> "TransactionalBasicEmailApi":
        return TransactionalBasicEmailApi(self._http_client, client_id)

    def groups(self, **filters: Any) -> list[TransactionalGroup]:
        response = self._http_client.get(self.groups_path, params=filters or None)
        return [TransactionalGroup.from_dict(item) for item in response or []]

    def send(self, payload: dict[str, Any], client_id: str | None = None) -> list[SendResult]:
        if not payload:
            raise ValueError("Email payload is required")
        client_id = client_id or self._client_id
        params = {"client_id": client_id} if client_id else None
        response = self._http_client.post(self.send_path, payload, params=params)
        return [SendResult.from_dict(item) for item in response or []]
