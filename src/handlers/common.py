"""Helpers shared by the HTTP API handlers."""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any, Dict, Optional

from pydantic import BaseModel

from utils.error_handling import ValidationError

JSON_HEADERS = {"Content-Type": "application/json"}


def _to_jsonable(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True)
    if isinstance(body, (list, tuple)):
        return [_to_jsonable(item) for item in body]
    if isinstance(body, dict):
        return {key: _to_jsonable(value) for key, value in body.items()}
    return body


def json_response(status: int, body: Any = None) -> Dict[str, Any]:
    """Format a JSON API Gateway HTTP API response."""
    response: Dict[str, Any] = {"statusCode": status, "headers": dict(JSON_HEADERS)}
    response["body"] = "" if body is None else json.dumps(_to_jsonable(body))
    return response


def raw_body(event: Dict[str, Any]) -> str:
    """Request body as text, decoding base64 payloads."""
    body = event.get("body") or ""
    if not event.get("isBase64Encoded"):
        return body
    try:
        return base64.b64decode(body).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ValidationError(
            "Request body is not valid base64-encoded UTF-8", status_code=400
        ) from exc


def json_body(event: Dict[str, Any]) -> Any:
    """Parsed JSON body; an empty body reads as ``{}``."""
    text = raw_body(event)
    if not text.strip():
        return {}
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Invalid JSON body: {exc}", status_code=400) from exc


def path_param(event: Dict[str, Any], name: str) -> str:
    return (event.get("pathParameters") or {})[name]


def query_params(event: Dict[str, Any]) -> Dict[str, str]:
    return dict(event.get("queryStringParameters") or {})


def query_flag(event: Dict[str, Any], name: str) -> bool:
    value: Optional[str] = query_params(event).get(name)
    return (value or "").lower() == "true"
