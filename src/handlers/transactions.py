"""Banking transaction handlers."""

from __future__ import annotations

from typing import Any, Dict

from handlers.common import json_body, json_response, path_param, query_params
from models.transaction import TransactionQuery
from services.registry import ServiceRegistry
from utils.error_handling import ValidationError
from utils.validators import validate_query_parameters


def _query(event: Dict[str, Any]) -> TransactionQuery:
    params = query_params(event)
    errors = validate_query_parameters(params)
    if errors:
        raise ValidationError("Invalid query parameters", details=errors, status_code=400)
    return TransactionQuery.model_validate(params)


def create_transaction(event: Dict[str, Any], services: ServiceRegistry) -> Dict[str, Any]:
    payload = json_body(event)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object", status_code=400)
    return json_response(201, services.transactions.create(payload))


def list_transactions(event: Dict[str, Any], services: ServiceRegistry) -> Dict[str, Any]:
    """Handle GET /transactions?accountId=&type=&from=&to=."""
    return json_response(200, services.transactions.search(_query(event)))


def get_transaction(event: Dict[str, Any], services: ServiceRegistry) -> Dict[str, Any]:
    return json_response(200, services.transactions.get(path_param(event, "id")))


def export_transactions(event: Dict[str, Any], services: ServiceRegistry) -> Dict[str, Any]:
    """Handle GET /transactions/export?format=csv with the list filters."""
    fmt = query_params(event).get("format") or ""
    if fmt.lower() != "csv":
        raise ValidationError(
            "Invalid format parameter",
            details='The format parameter must be set to "csv"',
            status_code=400,
        )
    csv_text, filename = services.transactions.export_csv(_query(event))
    return {
        "statusCode": 200,
        "headers": {
            "Content-Type": "text/csv; charset=utf-8",
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
        "body": csv_text,
    }
