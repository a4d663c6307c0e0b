"""Pydantic models for API payloads."""

from models.classification import ClassificationInput, ClassificationResult  # noqa: F401
from models.imports import ImportSummary, ParseError, ParsedRecord, ParseResult  # noqa: F401
from models.ticket import (  # noqa: F401
    Category,
    DeviceType,
    Priority,
    Source,
    Status,
    Ticket,
    TicketCreate,
    TicketFilters,
    TicketMetadata,
    TicketUpdate,
)
from models.transaction import (  # noqa: F401
    AccountSummary,
    BalanceResponse,
    Transaction,
    TransactionQuery,
    TransactionStatus,
    TransactionType,
)
