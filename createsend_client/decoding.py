from __future__ import annotations

import json
from typing import Any

JSON_MEDIA_TYPES = ("application/json", "text/json")


class ResponseDecodeError(ValueError):
    def __init__(self, message: str, body: str):
        super().__init__(message)
        self.body = body


def decode_body(body: bytes | str | None, content_type: str | None = None) -> Any:
    """Decode a response body into a JSON value.

    The API answers some 201 Created responses with a bare quoted id that is
    not valid JSON. When decoding fails and the body is wrapped in double
    quotes, the text between them is returned untouched.
    """
    if body is None:
        return None
    if isinstance(body, bytes):
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as error:
            raise ResponseDecodeError(
                f"Invalid UTF-8 response: {error}", body.decode("utf-8", "replace")
            ) from error
    else:
        text = body
    if not text.strip():
        return None

    if _is_non_json_media_type(content_type):
        return text

    try:
        return json.loads(text)
    except json.JSONDecodeError as error:
        stripped = text.strip()
        if len(stripped) >= 2 and stripped.startswith('"') and stripped.endswith('"'):
            return stripped[1:-1]
        raise ResponseDecodeError(f"Invalid JSON response: {error}", text) from error


def _is_non_json_media_type(content_type: str | None) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    if not media_type:
        return False
    return media_type not in JSON_MEDIA_TYPES and not media_type.endswith("+json")
