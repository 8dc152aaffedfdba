from unittest.mock import Mock

import pytest

from createsend_client.decoding import ResponseDecodeError
from createsend_client.errors import (
    ApiHttpError,
    BadRequest,
    ClientError,
    CreateSendError,
    ExpiredOAuthToken,
    NotFound,
    ServerError,
    Unauthorized,
    format_error_message,
    raise_for_status,
)
from createsend_client.models import ApiErrorPayload


def _body(value):
    return lambda: value


@pytest.mark.parametrize(
    "status_code, expected",
    [
        (400, BadRequest),
        (401, Unauthorized),
        (404, NotFound),
        (405, ClientError),
        (409, ClientError),
        (429, ClientError),
        (499, ClientError),
        (500, ServerError),
        (503, ServerError),
        (599, ServerError),
    ],
)
def test_status_codes_map_to_exact_error_type(status_code, expected):
    with pytest.raises(ApiHttpError) as excinfo:
        raise_for_status(status_code, _body({"Code": 1, "Message": "nope"}))
    assert type(excinfo.value) is expected
    assert excinfo.value.status_code == status_code


@pytest.mark.parametrize("status_code", [200, 201, 204, 302])
def test_success_and_redirect_codes_return_body(status_code):
    assert raise_for_status(status_code, _body({"ok": True})) == {"ok": True}


def test_bad_request_carries_payload():
    with pytest.raises(BadRequest) as excinfo:
        raise_for_status(400, _body({"Code": 250, "Message": "List title must be unique", "ResultData": None}))
    assert excinfo.value.payload == ApiErrorPayload(code=250, message="List title must be unique")
    assert excinfo.value.code == 250


def test_expired_token_is_an_unauthorized():
    with pytest.raises(Unauthorized) as excinfo:
        raise_for_status(401, _body({"Code": 121, "Message": "Expired OAuth Token"}))
    assert isinstance(excinfo.value, ExpiredOAuthToken)
    assert excinfo.value.payload.message == "Expired OAuth Token"


def test_other_unauthorized_codes_are_not_expired_token():
    with pytest.raises(Unauthorized) as excinfo:
        raise_for_status(401, _body({"Code": 999, "Message": "Invalid API key"}))
    assert not isinstance(excinfo.value, ExpiredOAuthToken)
    assert excinfo.value.code == 999


@pytest.mark.parametrize("status_code", [404, 418, 500, 502])
def test_bodies_without_payload_are_not_decoded(status_code):
    decode = Mock(side_effect=AssertionError("body should not be decoded"))
    with pytest.raises(ApiHttpError):
        raise_for_status(status_code, decode)
    decode.assert_not_called()


def test_not_found_is_a_client_error_without_payload():
    with pytest.raises(ClientError) as excinfo:
        raise_for_status(404, _body(None))
    assert not isinstance(excinfo.value, CreateSendError)


def test_undecodable_error_body_becomes_raw_message():
    decode = Mock(side_effect=ResponseDecodeError("bad", "Service Unavailable"))
    with pytest.raises(BadRequest) as excinfo:
        raise_for_status(400, decode)
    assert excinfo.value.payload == ApiErrorPayload(code=0, message="Service Unavailable")


def test_message_with_result_data():
    payload = ApiErrorPayload(code=300, message="Invalid EmailAddress", result_data={"Field": "Email"})
    lines = format_error_message(payload).split("\n")
    assert lines[0] == "The CreateSend API responded with the following error - 300: Invalid EmailAddress"
    assert lines[1] == "Extra result data: {'Field': 'Email'}"


def test_message_without_result_data_has_single_line():
    payload = ApiErrorPayload(code=300, message="Invalid EmailAddress")
    message = format_error_message(payload)
    assert "300: Invalid EmailAddress" in message
    assert "Extra result data" not in message
    assert "\n" not in message


def test_raised_error_renders_message():
    with pytest.raises(BadRequest, match="300: Invalid EmailAddress\nExtra result data:"):
        raise_for_status(
            400,
            _body({"Code": 300, "Message": "Invalid EmailAddress", "ResultData": {"Field": "Email"}}),
        )
