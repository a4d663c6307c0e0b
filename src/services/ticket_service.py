"""Ticket lifecycle: creation with auto-classification, updates, deletion."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from models.classification import ClassificationInput, ClassificationResult
from models.ticket import (
    DeviceType,
    Source,
    Ticket,
    TicketCreate,
    TicketFilters,
    TicketMetadata,
    TicketUpdate,
)
from services.classification_service import ClassificationService
from services.ticket_storage import TicketStorage
from utils.error_handling import NotFoundError
from utils.logging_config import get_logger

logger = get_logger(__name__)

# Applied when a classified ticket arrives without metadata.
DEFAULT_METADATA = TicketMetadata(source=Source.API, device_type=DeviceType.DESKTOP)


@dataclass
class TicketService:
    """Encapsulates ticket processing logic on top of the store and classifier."""

    storage: TicketStorage
    classifier: ClassificationService

    def create(
        self, data: TicketCreate, auto_classify: bool = False
    ) -> Tuple[Ticket, Optional[ClassificationResult]]:
        """
        Store a ticket, classifying it first when asked to or when category or
        priority is missing. Explicit values are never overwritten.
        """
        if not (auto_classify or data.category is None or data.priority is None):
            ticket = self.storage.create(data)
            logger.info(
                "Ticket created",
                extra={"ticket_id": ticket.id, "category": ticket.category},
            )
            return ticket, None

        classification = self.classify_text(data.subject, data.description)
        data = data.model_copy(
            update={
                "category": data.category or classification.category,
                "priority": data.priority or classification.priority,
                "metadata": data.metadata or DEFAULT_METADATA,
            }
        )
        ticket = self.storage.create(data)
        logger.info(
            "Ticket created with auto-classification",
            extra={
                "ticket_id": ticket.id,
                "category": ticket.category,
                "priority": ticket.priority,
                "confidence": classification.confidence,
            },
        )
        return ticket, classification

    def classify_text(self, subject: str, description: str) -> ClassificationResult:
        return self.classifier.classify(
            ClassificationInput(subject=subject, description=description)
        )

    def get(self, ticket_id: str) -> Ticket:
        ticket = self.storage.find_by_id(ticket_id)
        if ticket is None:
            raise NotFoundError(f"Ticket with id '{ticket_id}' not found")
        return ticket

    def list(self, filters: Optional[TicketFilters] = None) -> List[Ticket]:
        return self.storage.find_all(filters)

    def update(self, ticket_id: str, changes: TicketUpdate) -> Ticket:
        ticket = self.storage.update(ticket_id, changes)
        if ticket is None:
            raise NotFoundError(f"Ticket with id '{ticket_id}' not found")
        return ticket

    def delete(self, ticket_id: str) -> None:
        if not self.storage.delete(ticket_id):
            raise NotFoundError(f"Ticket with id '{ticket_id}' not found")
        logger.info("Ticket deleted", extra={"ticket_id": ticket_id})

    def auto_classify(self, ticket_id: str) -> Tuple[Ticket, ClassificationResult]:
        """Re-run classification on a stored ticket and persist the labels."""
        ticket = self.get(ticket_id)
        classification = self.classify_text(ticket.subject, ticket.description)
        updated = self.update(
            ticket_id,
            TicketUpdate(
                category=classification.category, priority=classification.priority
            ),
        )
        logger.info(
            "Ticket auto-classified",
            extra={
                "ticket_id": ticket_id,
                "category": classification.category,
                "priority": classification.priority,
                "confidence": classification.confidence,
            },
        )
        return updated, classification
