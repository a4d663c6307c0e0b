"""
Single entrypoint Lambda that routes HTTP API requests to thin handler modules.

The service registry is built once per container and threaded through to every
handler; tests build their own and call ``dispatch`` directly.
"""

from __future__ import annotations

import re
import uuid
from typing import Any, Callable, Dict, Optional, Pattern, Tuple

from pydantic import ValidationError as SchemaValidationError

from handlers import accounts, health_check, ticket_import, tickets, transactions
from handlers.common import json_response
from services.registry import ServiceRegistry
from utils.error_handling import AppError, to_response, validation_details
from utils.logging_config import get_logger

logger = get_logger(__name__)

Handler = Callable[[Dict[str, Any], ServiceRegistry], Dict[str, Any]]


def _route(method: str, template: str, handler: Handler) -> Tuple[str, Pattern[str], Handler]:
    """Compile ``/tickets/{id}`` into a regex with named groups."""
    pattern = re.sub(r"\{(\w+)\}", r"(?P<\1>[^/]+)", template)
    return method, re.compile(f"^{pattern}/?$"), handler


# Literal paths sit before the {id} routes they would otherwise shadow.
ROUTE_TABLE: Tuple[Tuple[str, Pattern[str], Handler], ...] = (
    _route("GET", "/health", health_check.lambda_handler),
    _route("POST", "/tickets/import", ticket_import.import_tickets),
    _route("POST", "/tickets/classify", tickets.classify_text),
    _route("POST", "/tickets/{id}/auto-classify", tickets.auto_classify_ticket),
    _route("POST", "/tickets", tickets.create_ticket),
    _route("GET", "/tickets", tickets.list_tickets),
    _route("GET", "/tickets/{id}", tickets.get_ticket),
    _route("PUT", "/tickets/{id}", tickets.update_ticket),
    _route("DELETE", "/tickets/{id}", tickets.delete_ticket),
    _route("GET", "/transactions/export", transactions.export_transactions),
    _route("POST", "/transactions", transactions.create_transaction),
    _route("GET", "/transactions", transactions.list_transactions),
    _route("GET", "/transactions/{id}", transactions.get_transaction),
    _route("GET", "/accounts/{accountId}/balance", accounts.get_balance),
    _route("GET", "/accounts/{accountId}/summary", accounts.get_summary),
)


def resolve(method: str, path: str) -> Optional[Tuple[Handler, Dict[str, str]]]:
    for route_method, pattern, handler in ROUTE_TABLE:
        if route_method != method:
            continue
        match = pattern.match(path)
        if match:
            return handler, match.groupdict()
    return None


def dispatch(event: Dict[str, Any], services: ServiceRegistry) -> Dict[str, Any]:
    """Route one event and convert every failure into an HTTP response."""
    http = event.get("requestContext", {}).get("http", {})
    method = http.get("method", "").upper()
    path = http.get("path", "")
    route_key = f"{method} {path}"

    resolved = resolve(method, path)
    if resolved is None:
        return json_response(404, {"message": "Route not found", "route": route_key})

    handler, path_parameters = resolved
    event = {**event, "pathParameters": {**(event.get("pathParameters") or {}), **path_parameters}}
    correlation_id = str(uuid.uuid4())
    try:
        return handler(event, services)
    except AppError as exc:
        logger.info(
            "Request rejected",
            extra={
                "correlation_id": correlation_id,
                "route": route_key,
                "status_code": exc.status_code,
                "error": str(exc),
            },
        )
        return to_response(exc, correlation_id)
    except SchemaValidationError as exc:
        logger.info(
            "Request failed validation",
            extra={"correlation_id": correlation_id, "route": route_key},
        )
        return json_response(
            400,
            {
                "message": "Validation failed",
                "status": "error",
                "details": validation_details(exc),
                "correlation_id": correlation_id,
            },
        )
    except Exception:
        logger.exception(
            "Unhandled error", extra={"correlation_id": correlation_id, "route": route_key}
        )
        return json_response(
            500,
            {
                "message": "Internal server error",
                "status": "error",
                "correlation_id": correlation_id,
            },
        )


services = ServiceRegistry.create()


def lambda_handler(event, context):
    """Entry point invoked by API Gateway HTTP API."""
    return dispatch(event, services)
