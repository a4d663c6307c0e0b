"""Explicitly constructed service graph handed to every handler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from services.account_service import AccountService
from services.classification_service import ClassificationService
from services.import_service import ImportService
from services.ticket_service import TicketService
from services.ticket_storage import TicketStorage
from services.transaction_service import TransactionService
from services.transaction_store import TransactionStore
from utils.settings import Settings


@dataclass
class ServiceRegistry:
    """Stores and services sharing one lifetime (one Lambda container)."""

    settings: Settings
    ticket_storage: TicketStorage
    transaction_store: TransactionStore
    classifier: ClassificationService
    tickets: TicketService
    imports: ImportService
    transactions: TransactionService
    accounts: AccountService

    @classmethod
    def create(cls, settings: Optional[Settings] = None) -> "ServiceRegistry":
        settings = settings or Settings.from_environment()
        ticket_storage = TicketStorage()
        transaction_store = TransactionStore()
        classifier = ClassificationService()
        return cls(
            settings=settings,
            ticket_storage=ticket_storage,
            transaction_store=transaction_store,
            classifier=classifier,
            tickets=TicketService(storage=ticket_storage, classifier=classifier),
            imports=ImportService(storage=ticket_storage),
            transactions=TransactionService(store=transaction_store),
            accounts=AccountService(
                store=transaction_store, default_currency=settings.default_currency
            ),
        )

    def reset(self) -> None:
        """Drop all stored data."""
        self.ticket_storage.clear()
        self.transaction_store.clear()
