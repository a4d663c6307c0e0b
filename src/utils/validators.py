"""Field-level validation helpers.

Each check returns ``None`` when the value is acceptable and a
:class:`FieldError` otherwise, so callers can stop at the first failure.
Ticket fields are checked by the ``TicketCreate`` schema, not here.
"""

import math
import re
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

import pycountry

from models.transaction import TransactionType
from utils.date_utils import parse_iso

ACCOUNT_NUMBER_PATTERN = re.compile(r"ACC-[A-Za-z0-9]{5}")
_CURRENCY_CODES = frozenset(currency.alpha_3 for currency in pycountry.currencies)


@dataclass(frozen=True)
class FieldError:
    """A single failed check."""

    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def validate_amount(amount: Any, field: str = "amount") -> Optional[FieldError]:
    """Positive number with at most two decimal places."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return FieldError(
            field, f"Amount must be a number, received: {type(amount).__name__}"
        )
    if not math.isfinite(amount):
        return FieldError(field, f"Amount must be a finite number, received: {amount}")
    if amount <= 0:
        return FieldError(field, f"Amount must be a positive number, received: {amount}")
    # repr() gives the shortest round-tripping literal, so 0.29 stays 0.29.
    if Decimal(repr(amount)).as_tuple().exponent < -2:
        return FieldError(
            field, f"Amount must have maximum 2 decimal places, received: {amount}"
        )
    return None


def validate_currency(currency: Any, field: str = "currency") -> Optional[FieldError]:
    """ISO 4217 alphabetic code, exact match."""
    if not currency:
        return FieldError(field, "Currency is required")
    if not isinstance(currency, str) or currency not in _CURRENCY_CODES:
        return FieldError(
            field, f"Invalid currency code (ISO 4217), received: {currency}"
        )
    return None


def validate_account_number(account: Any, field: str) -> Optional[FieldError]:
    """``ACC-`` followed by exactly five alphanumerics (case-sensitive)."""
    if not account:
        return FieldError(field, f"{field} is required")
    if not isinstance(account, str) or not ACCOUNT_NUMBER_PATTERN.fullmatch(account):
        return FieldError(
            field,
            f"{field} must follow format ACC-XXXXX (5 alphanumeric characters), "
            f"received: {account}",
        )
    return None


def validate_transaction(payload: Mapping[str, Any]) -> Optional[FieldError]:
    """Fail-fast validation of a transaction creation request."""
    error = validate_amount(payload.get("amount"))
    if error:
        return error

    error = validate_currency(payload.get("currency"))
    if error:
        return error

    tx_type = payload.get("type")
    if tx_type not in [t.value for t in TransactionType]:
        return FieldError(
            "type", f"Type must be one of: {', '.join(t.value for t in TransactionType)}"
        )

    from_account = payload.get("fromAccount")
    to_account = payload.get("toAccount")

    if tx_type == TransactionType.DEPOSIT.value:
        if not to_account:
            return FieldError("toAccount", "Deposit requires toAccount")
        if from_account:
            return FieldError("fromAccount", "Deposit should not have fromAccount")
        return validate_account_number(to_account, "toAccount")

    if tx_type == TransactionType.WITHDRAWAL.value:
        if not from_account:
            return FieldError("fromAccount", "Withdrawal requires fromAccount")
        if to_account:
            return FieldError("toAccount", "Withdrawal should not have toAccount")
        return validate_account_number(from_account, "fromAccount")

    if not from_account:
        return FieldError("fromAccount", "Transfer requires fromAccount")
    if not to_account:
        return FieldError("toAccount", "Transfer requires toAccount")
    return validate_account_number(from_account, "fromAccount") or validate_account_number(
        to_account, "toAccount"
    )


def validate_date_format(date_str: Optional[str]) -> Optional[str]:
    """Empty values are ignored; anything else must parse as an ISO date."""
    if not date_str or not date_str.strip():
        return None
    try:
        parse_iso(date_str)
    except ValueError:
        return (
            f"Invalid date format: {date_str}. "
            "Expected YYYY-MM-DD or ISO datetime format."
        )
    return None


def validate_transaction_type(tx_type: Optional[str]) -> Optional[str]:
    """Case-insensitive; empty values are ignored."""
    if not tx_type or not tx_type.strip():
        return None
    if tx_type.lower() not in [t.value for t in TransactionType]:
        return (
            f"Invalid transaction type: {tx_type}. Expected one of: "
            f"{', '.join(t.value for t in TransactionType)}"
        )
    return None


def validate_query_parameters(params: Mapping[str, Optional[str]]) -> List[str]:
    """Collect every problem with the transaction list/export filters."""
    errors = [
        validate_date_format(params.get("from")),
        validate_date_format(params.get("to")),
        validate_transaction_type(params.get("type")),
    ]
    return [error for error in errors if error]
