"""Turns raw HTTP responses into decoded payloads or typed errors."""

from __future__ import annotations

import json
import logging
from typing import Any

from .errors import ApiError
from .http import RawResponse

logger = logging.getLogger("b2brouter.response")

UNKNOWN_ERROR = "Unknown error"


def decode_json(body: str) -> Any:
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        return None


def extract_error_message(json_body: Any, body: str) -> str:
    if isinstance(json_body, dict):
        error = json_body.get("error")
        if isinstance(error, dict) and error.get("message") is not None:
            return str(error["message"])
        if json_body.get("message") is not None:
            return str(json_body["message"])
        if error is not None:
            return error if isinstance(error, str) else json.dumps(error)
    return body or UNKNOWN_ERROR


def raise_for_status(response: RawResponse, json_body: Any = None) -> None:
    if response.status < 400:
        return
    message = extract_error_message(json_body, response.body)
    error = ApiError.from_response(
        message,
        response.status,
        response.body,
        json_body,
        response.headers,
    )
    logger.debug(
        "API request failed status=%s kind=%s request_id=%s message=%s",
        response.status,
        error.kind.value,
        error.request_id,
        message,
    )
    raise error


def handle_response(response: RawResponse) -> Any:
    json_body = decode_json(response.body)
    raise_for_status(response, json_body)
    if json_body is None:
        return {}
    return json_body


__all__ = ["decode_json", "extract_error_message", "handle_response", "raise_for_status"]
