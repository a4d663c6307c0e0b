"""Transaction creation, filtering and CSV export."""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from models.transaction import Transaction, TransactionQuery
from services.transaction_store import TransactionStore
from utils.date_utils import parse_from_date, parse_iso, parse_to_date
from utils.error_handling import NotFoundError, ValidationError
from utils.logging_config import get_logger
from utils.validators import validate_transaction

logger = get_logger(__name__)

CSV_HEADER = ("id", "fromAccount", "toAccount", "amount", "currency", "type", "timestamp", "status")


def filter_by_type(transactions: List[Transaction], tx_type: Optional[str]) -> List[Transaction]:
    """Case-insensitive type filter; blank means no filter."""
    if not tx_type or not tx_type.strip():
        return transactions
    wanted = tx_type.lower()
    return [t for t in transactions if t.type.value == wanted]


def filter_by_date_range(
    transactions: List[Transaction],
    date_from: Optional[datetime],
    date_to: Optional[datetime],
) -> List[Transaction]:
    """Inclusive range on the transaction timestamp."""
    if date_from is None and date_to is None:
        return transactions
    selected = []
    for transaction in transactions:
        moment = parse_iso(transaction.timestamp)
        if date_from is not None and moment < date_from:
            continue
        if date_to is not None and moment > date_to:
            continue
        selected.append(transaction)
    return selected


def _format_amount(amount: float) -> str:
    return str(int(amount)) if float(amount).is_integer() else repr(amount)


def transactions_to_csv(transactions: Iterable[Transaction]) -> str:
    """Header plus one row per transaction, ``\\n`` separated, quoted as needed."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for t in transactions:
        writer.writerow(
            (
                t.id,
                t.from_account or "",
                t.to_account or "",
                _format_amount(t.amount),
                t.currency,
                t.type.value,
                t.timestamp,
                t.status.value,
            )
        )
    return buffer.getvalue().rstrip("\n")


@dataclass
class TransactionService:
    """Business rules over the transaction log."""

    store: TransactionStore

    def create(self, payload: Mapping[str, Any]) -> Transaction:
        error = validate_transaction(payload)
        if error:
            raise ValidationError(
                "Validation failed", details=[error.to_dict()], status_code=400
            )
        transaction = self.store.create(payload)
        logger.info(
            "Transaction created",
            extra={
                "transaction_id": transaction.id,
                "type": transaction.type.value,
                "currency": transaction.currency,
            },
        )
        return transaction

    def get(self, transaction_id: str) -> Transaction:
        transaction = self.store.get(transaction_id)
        if transaction is None:
            raise NotFoundError("Transaction not found", details={"id": transaction_id})
        return transaction

    def search(self, query: TransactionQuery) -> List[Transaction]:
        """Apply filters in sequence: account, type, date range."""
        if query.account_id and query.account_id.strip():
            transactions = self.store.by_account(query.account_id)
        else:
            transactions = self.store.all()
        transactions = filter_by_type(transactions, query.type)
        return filter_by_date_range(
            transactions, parse_from_date(query.date_from), parse_to_date(query.date_to)
        )

    def export_csv(self, query: TransactionQuery) -> Tuple[str, str]:
        """Return ``(csv_text, filename)`` for the filtered transactions."""
        csv_text = transactions_to_csv(self.search(query))
        filename = f"transactions-{datetime.now(timezone.utc).date().isoformat()}.csv"
        return csv_text, filename
