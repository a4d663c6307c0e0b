"""Handlers for GET /accounts/{accountId}/balance and /summary."""

from typing import Any, Dict

from handlers.common import json_response, path_param
from services.registry import ServiceRegistry


def get_balance(event: Dict[str, Any], services: ServiceRegistry) -> Dict[str, Any]:
    return json_response(200, services.accounts.balance(path_param(event, "accountId")))


def get_summary(event: Dict[str, Any], services: ServiceRegistry) -> Dict[str, Any]:
    return json_response(200, services.accounts.summary(path_param(event, "accountId")))
