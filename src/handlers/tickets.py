"""
Ticket handlers: CRUD plus on-demand classification.

Each handler takes the API Gateway event and the service registry; errors are
raised and turned into responses by the router.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import ValidationError as SchemaValidationError

from handlers.common import json_body, json_response, path_param, query_flag, query_params
from models.classification import ClassificationInput
from models.ticket import TicketCreate, TicketFilters, TicketUpdate
from services.registry import ServiceRegistry
from utils.error_handling import ValidationError


def create_ticket(event: Dict[str, Any], services: ServiceRegistry) -> Dict[str, Any]:
    """Handle POST /tickets (``?auto_classify=true`` forces classification)."""
    data = TicketCreate.model_validate(json_body(event))
    ticket, classification = services.tickets.create(
        data, auto_classify=query_flag(event, "auto_classify")
    )
    body = ticket.model_dump(mode="json")
    if classification is not None:
        body["classification_confidence"] = classification.confidence
        body["classification_reasoning"] = classification.reasoning
    return json_response(201, body)


def list_tickets(event: Dict[str, Any], services: ServiceRegistry) -> Dict[str, Any]:
    """Handle GET /tickets with optional category/priority/status filters."""
    params = query_params(event)
    raw_filters = {
        name: params[name] for name in ("category", "priority", "status") if params.get(name)
    }
    try:
        filters = TicketFilters.model_validate(raw_filters)
    except SchemaValidationError as exc:
        field = str(exc.errors()[0]["loc"][0])
        raise ValidationError(
            f"Invalid {field} filter: {raw_filters[field]}", status_code=400
        ) from exc
    tickets = services.tickets.list(filters)
    return json_response(200, {"total": len(tickets), "tickets": tickets})


def get_ticket(event: Dict[str, Any], services: ServiceRegistry) -> Dict[str, Any]:
    return json_response(200, services.tickets.get(path_param(event, "id")))


def update_ticket(event: Dict[str, Any], services: ServiceRegistry) -> Dict[str, Any]:
    changes = TicketUpdate.model_validate(json_body(event))
    return json_response(200, services.tickets.update(path_param(event, "id"), changes))


def delete_ticket(event: Dict[str, Any], services: ServiceRegistry) -> Dict[str, Any]:
    services.tickets.delete(path_param(event, "id"))
    return json_response(204)


def auto_classify_ticket(event: Dict[str, Any], services: ServiceRegistry) -> Dict[str, Any]:
    """Handle POST /tickets/{id}/auto-classify."""
    ticket, classification = services.tickets.auto_classify(path_param(event, "id"))
    return json_response(200, {"ticket": ticket, "classification": classification})


def classify_text(event: Dict[str, Any], services: ServiceRegistry) -> Dict[str, Any]:
    """Handle POST /tickets/classify; nothing is stored."""
    ticket = ClassificationInput.model_validate(json_body(event))
    return json_response(200, services.classifier.classify(ticket))
