"""In-memory ticket store."""

from __future__ import annotations

import uuid
from threading import Lock
from typing import Dict, List, Optional

from models.ticket import CLOSED_STATUSES, Ticket, TicketCreate, TicketFilters, TicketUpdate
from utils.date_utils import utc_now_iso


class TicketStorage:
    """Thread-safe dict of tickets keyed by id; reads return copies."""

    def __init__(self) -> None:
        self._tickets: Dict[str, Ticket] = {}
        self._lock = Lock()

    def create(self, data: TicketCreate) -> Ticket:
        now = utc_now_iso()
        ticket = Ticket(
            **data.model_dump(),
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            resolved_at=now if data.status in CLOSED_STATUSES else None,
        )
        with self._lock:
            self._tickets[ticket.id] = ticket
        return ticket.model_copy(deep=True)

    def find_by_id(self, ticket_id: str) -> Optional[Ticket]:
        with self._lock:
            ticket = self._tickets.get(ticket_id)
            return ticket.model_copy(deep=True) if ticket else None

    def find_all(self, filters: Optional[TicketFilters] = None) -> List[Ticket]:
        """All tickets in insertion order, narrowed by any set filter."""
        with self._lock:
            tickets = [t.model_copy(deep=True) for t in self._tickets.values()]
        if filters is None:
            return tickets
        for field, wanted in filters.model_dump(exclude_none=True).items():
            tickets = [t for t in tickets if getattr(t, field) == wanted]
        return tickets

    def update(self, ticket_id: str, changes: TicketUpdate) -> Optional[Ticket]:
        """Apply the fields set on ``changes``; id and created_at never change."""
        fields = changes.model_dump(exclude_unset=True)
        with self._lock:
            existing = self._tickets.get(ticket_id)
            if existing is None:
                return None
            now = utc_now_iso()
            resolved_at = existing.resolved_at
            if changes.status in CLOSED_STATUSES and not resolved_at:
                resolved_at = now
            updated = Ticket.model_validate(
                {
                    **existing.model_dump(),
                    **fields,
                    "id": existing.id,
                    "created_at": existing.created_at,
                    "updated_at": now,
                    "resolved_at": resolved_at,
                }
            )
            self._tickets[ticket_id] = updated
        return updated.model_copy(deep=True)

    def delete(self, ticket_id: str) -> bool:
        with self._lock:
            return self._tickets.pop(ticket_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._tickets.clear()

    def count(self) -> int:
        with self._lock:
            return len(self._tickets)
