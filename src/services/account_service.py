"""Account balance and summary calculations over the transaction log."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict

from models.transaction import AccountSummary, BalanceResponse, Transaction, TransactionType
from services.transaction_store import TransactionStore
from utils.error_handling import MultiCurrencyError


def _signed_amounts(transaction: Transaction, account_id: str):
    """Yield ``(direction, amount)`` pairs for the side(s) ``account_id`` is on."""
    if transaction.type in (TransactionType.DEPOSIT, TransactionType.TRANSFER):
        if transaction.to_account == account_id:
            yield "in", transaction.amount
    if transaction.type in (TransactionType.WITHDRAWAL, TransactionType.TRANSFER):
        if transaction.from_account == account_id:
            yield "out", transaction.amount


def _rounded(totals: Dict[str, float]) -> Dict[str, float]:
    return {currency: round(amount, 2) for currency, amount in totals.items()}


@dataclass
class AccountService:
    store: TransactionStore
    default_currency: str = "USD"

    def balance(self, account_id: str) -> BalanceResponse:
        """
        Net balance for a single-currency account.

        Accounts holding more than one currency are rejected rather than
        summed across currencies.
        """
        transactions = self.store.by_account(account_id)
        balances: Dict[str, float] = {}
        for transaction in transactions:
            balances.setdefault(transaction.currency, 0.0)
            for direction, amount in _signed_amounts(transaction, account_id):
                balances[transaction.currency] += amount if direction == "in" else -amount
        balances = _rounded(balances)

        if len(balances) > 1:
            raise MultiCurrencyError(account_id, list(balances))
        if not balances:
            return BalanceResponse(
                account_id=account_id,
                balance=0,
                currency=self.default_currency,
                transaction_count=0,
            )
        (currency, balance), = balances.items()
        return BalanceResponse(
            account_id=account_id,
            balance=balance,
            currency=currency,
            transaction_count=len(transactions),
        )

    def summary(self, account_id: str) -> AccountSummary:
        """Deposits and withdrawals per currency; transfers count on each side."""
        transactions = self.store.by_account(account_id)
        deposits: Dict[str, float] = defaultdict(float)
        withdrawals: Dict[str, float] = defaultdict(float)
        most_recent = None

        for transaction in transactions:
            if most_recent is None or transaction.timestamp > most_recent:
                most_recent = transaction.timestamp
            for direction, amount in _signed_amounts(transaction, account_id):
                target = deposits if direction == "in" else withdrawals
                target[transaction.currency] += amount

        return AccountSummary(
            account_id=account_id,
            total_deposits=_rounded(deposits),
            total_withdrawals=_rounded(withdrawals),
            transaction_count=len(transactions),
            most_recent_transaction_date=most_recent,
        )
