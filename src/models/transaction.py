"""Banking transaction models."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class TransactionType(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    TRANSFER = "transfer"


class TransactionStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class Transaction(BaseModel):
    """Stored transaction; serialised with camelCase field names."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    from_account: Optional[str] = Field(default=None, alias="fromAccount")
    to_account: Optional[str] = Field(default=None, alias="toAccount")
    amount: float
    currency: str
    type: TransactionType
    timestamp: str
    status: TransactionStatus = TransactionStatus.COMPLETED


class TransactionQuery(BaseModel):
    """Filters accepted by GET /transactions and the CSV export."""

    model_config = ConfigDict(populate_by_name=True)

    account_id: Optional[str] = Field(default=None, alias="accountId")
    type: Optional[str] = None
    date_from: Optional[str] = Field(default=None, alias="from")
    date_to: Optional[str] = Field(default=None, alias="to")


class BalanceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    account_id: str = Field(alias="accountId")
    balance: float
    currency: str
    transaction_count: int = Field(alias="transactionCount")


class AccountSummary(BaseModel):
    """Per-currency totals for one account."""

    model_config = ConfigDict(populate_by_name=True)

    account_id: str = Field(alias="accountId")
    total_deposits: Dict[str, float] = Field(default_factory=dict, alias="totalDeposits")
    total_withdrawals: Dict[str, float] = Field(
        default_factory=dict, alias="totalWithdrawals"
    )
    transaction_count: int = Field(alias="transactionCount")
    most_recent_transaction_date: Optional[str] = Field(
        default=None, alias="mostRecentTransactionDate"
    )
