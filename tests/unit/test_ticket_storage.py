"""
In-memory ticket store tests.

Run with: pytest tests/unit/test_ticket_storage.py -v
"""

import threading

from models.ticket import Category, Status, TicketCreate, TicketFilters, TicketUpdate
from services.ticket_storage import TicketStorage


def _create(storage, valid_ticket, **overrides):
    return storage.create(TicketCreate.model_validate({**valid_ticket, **overrides}))


class TestTicketStorage:
    def test_create_assigns_identity(self, valid_ticket):
        storage = TicketStorage()
        ticket = _create(storage, valid_ticket)
        assert ticket.id
        assert ticket.created_at == ticket.updated_at
        assert ticket.resolved_at is None
        assert storage.find_by_id(ticket.id) == ticket

    def test_closed_ticket_gets_resolved_at(self, valid_ticket):
        ticket = _create(TicketStorage(), valid_ticket, status="closed")
        assert ticket.resolved_at == ticket.created_at

    def test_returned_copies_are_detached(self, valid_ticket):
        storage = TicketStorage()
        ticket = _create(storage, valid_ticket)
        ticket.tags.append("mutated")
        assert storage.find_by_id(ticket.id).tags == []

    def test_filters(self, valid_ticket):
        storage = TicketStorage()
        _create(storage, valid_ticket, category="billing_question")
        _create(storage, valid_ticket, category="billing_question", status="closed")
        _create(storage, valid_ticket)

        assert len(storage.find_all()) == 3
        billing = storage.find_all(TicketFilters(category=Category.BILLING_QUESTION))
        assert len(billing) == 2
        closed_billing = storage.find_all(
            TicketFilters(category=Category.BILLING_QUESTION, status=Status.CLOSED)
        )
        assert len(closed_billing) == 1

    def test_partial_update(self, valid_ticket):
        storage = TicketStorage()
        ticket = _create(storage, valid_ticket, tags=["keep"])
        updated = storage.update(ticket.id, TicketUpdate(status=Status.RESOLVED))

        assert updated.status == Status.RESOLVED
        assert updated.tags == ["keep"]
        assert updated.subject == ticket.subject
        assert updated.created_at == ticket.created_at
        assert updated.resolved_at is not None

    def test_update_and_delete_missing(self):
        storage = TicketStorage()
        assert storage.update("missing", TicketUpdate(status=Status.CLOSED)) is None
        assert storage.delete("missing") is False

    def test_concurrent_creates_are_all_kept(self, valid_ticket):
        storage = TicketStorage()
        data = TicketCreate.model_validate(valid_ticket)
        threads = [
            threading.Thread(target=lambda: [storage.create(data) for _ in range(25)])
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert storage.count() == 200
