"""
Bulk import handler for POST /tickets/import.

The file travels as the request body; the ``filename`` query parameter (or an
``X-Filename`` header) picks the parser by extension.
"""

from __future__ import annotations

from typing import Any, Dict

from handlers.common import json_response, query_params, raw_body
from parsers import format_for_filename
from services.registry import ServiceRegistry
from utils.error_handling import PayloadTooLargeError, UnsupportedFormatError, ValidationError


def _filename(event: Dict[str, Any]) -> str:
    headers = {key.lower(): value for key, value in (event.get("headers") or {}).items()}
    return query_params(event).get("filename") or headers.get("x-filename") or ""


def import_tickets(event: Dict[str, Any], services: ServiceRegistry) -> Dict[str, Any]:
    filename = _filename(event)
    if not filename or event.get("body") is None:
        raise ValidationError(
            "No file uploaded. Send the file as the request body with a filename",
            status_code=400,
        )

    fmt = format_for_filename(filename)
    if fmt is None:
        raise UnsupportedFormatError(filename)

    content = raw_body(event)
    size = len(content.encode("utf-8"))
    if size > services.settings.max_import_bytes:
        raise PayloadTooLargeError(size, services.settings.max_import_bytes)

    summary = services.imports.import_content(content, fmt)
    return json_response(201, summary)
