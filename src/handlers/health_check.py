"""Lightweight health check handler."""

from datetime import datetime, timezone

from handlers.common import json_response


def lambda_handler(event, services):
    """Return a 200 with store sizes to verify the container is alive."""
    return json_response(
        200,
        {
            "status": "ok",
            "environment": services.settings.environment,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "tickets": services.ticket_storage.count(),
            "transactions": services.transaction_store.count(),
        },
    )
