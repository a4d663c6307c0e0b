"""In-memory transaction log."""

from __future__ import annotations

import uuid
from threading import Lock
from typing import Any, List, Mapping, Optional

from models.transaction import Transaction, TransactionStatus
from utils.date_utils import utc_now_iso


class TransactionStore:
    """Append-only list of transactions guarded by a lock."""

    def __init__(self) -> None:
        self._transactions: List[Transaction] = []
        self._lock = Lock()

    def create(self, payload: Mapping[str, Any]) -> Transaction:
        """Record an already-validated request as a completed transaction."""
        transaction = Transaction(
            id=str(uuid.uuid4()),
            from_account=payload.get("fromAccount"),
            to_account=payload.get("toAccount"),
            amount=payload["amount"],
            currency=payload["currency"],
            type=payload["type"],
            timestamp=utc_now_iso(),
            status=TransactionStatus.COMPLETED,
        )
        with self._lock:
            self._transactions.append(transaction)
        return transaction

    def all(self) -> List[Transaction]:
        with self._lock:
            return list(self._transactions)

    def get(self, transaction_id: str) -> Optional[Transaction]:
        with self._lock:
            return next(
                (t for t in self._transactions if t.id == transaction_id), None
            )

    def by_account(self, account_id: str) -> List[Transaction]:
        with self._lock:
            return [
                t
                for t in self._transactions
                if account_id in (t.from_account, t.to_account)
            ]

    def clear(self) -> None:
        with self._lock:
            self._transactions.clear()

    def count(self) -> int:
        with self._lock:
            return len(self._transactions)
