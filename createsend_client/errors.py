from __future__ import annotations

import logging
from typing import Any, Callable

from createsend_client.decoding import ResponseDecodeError
from createsend_client.models import ApiErrorPayload

logger = logging.getLogger(__name__)

ERROR_PREAMBLE = "The CreateSend API responded with the following error"
EXPIRED_OAUTH_TOKEN_CODE = 121


class ApiHttpError(RuntimeError):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class CreateSendError(ApiHttpError):
    """An error response that carries the API's Code/Message/ResultData body."""

    def __init__(self, status_code: int, payload: ApiErrorPayload):
        super().__init__(status_code, format_error_message(payload))
        self.payload = payload

    @property
    def code(self) -> int:
        return self.payload.code

    @property
    def result_data(self) -> Any:
        return self.payload.result_data


class BadRequest(CreateSendError):
    pass


class Unauthorized(CreateSendError):
    pass


class ExpiredOAuthToken(Unauthorized):
    pass


class ClientError(ApiHttpError):
    pass


class NotFound(ClientError):
    pass


class ServerError(ApiHttpError):
    pass


def format_error_message(payload: ApiErrorPayload) -> str:
    extra = ""
    if payload.result_data is not None:
        extra = f"\nExtra result data: {payload.result_data}"
    return f"{ERROR_PREAMBLE} - {payload.code}: {payload.message}{extra}"


def raise_for_status(status_code: int, decode: Callable[[], Any]) -> Any:
    """Return the decoded body for non-error codes, raise a classified error otherwise.

    ``decode`` is only called when the body is needed, so error pages on
    404 and 5xx responses are never parsed.
    """
    if status_code == 400:
        error: ApiHttpError = BadRequest(status_code, _error_payload(decode))
    elif status_code == 401:
        payload = _error_payload(decode)
        if payload.code == EXPIRED_OAUTH_TOKEN_CODE:
            error = ExpiredOAuthToken(status_code, payload)
        else:
            error = Unauthorized(status_code, payload)
    elif status_code == 404:
        error = NotFound(status_code, f"HTTP {status_code}: Not Found")
    elif 400 <= status_code < 500:
        error = ClientError(status_code, f"HTTP {status_code}: Client Error")
    elif 500 <= status_code < 600:
        error = ServerError(status_code, f"HTTP {status_code}: Server Error")
    else:
        return decode()

    logger.warning("%s (HTTP %s)", type(error).__name__, status_code)
    raise error


def _error_payload(decode: Callable[[], Any]) -> ApiErrorPayload:
    try:
        body = decode()
    except ResponseDecodeError as error:
        return ApiErrorPayload(code=0, message=error.body)
    return ApiErrorPayload.from_body(body)
