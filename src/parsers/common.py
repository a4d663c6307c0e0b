"""Shared per-record validation for all import formats."""

from typing import Any, Iterable, Tuple, Union

from pydantic import ValidationError as SchemaValidationError

from models.imports import ParsedRecord, ParseError, ParseResult
from models.ticket import TicketCreate
from utils.error_handling import describe_validation_error

RecordOutcome = Union[ParsedRecord, ParseError]


def validate_candidate(candidate: Any, line: int, raw: Any = None) -> RecordOutcome:
    """
    Validate one normalised candidate against the ticket schema.

    ``raw`` is what ends up in the error entry; it defaults to the candidate
    itself for formats that need no normalisation.
    """
    try:
        data = TicketCreate.model_validate(candidate)
    except SchemaValidationError as exc:
        return ParseError(
            line=line,
            record=candidate if raw is None else raw,
            reason=describe_validation_error(exc),
        )
    return ParsedRecord(data=data, line=line)


def collect(outcomes: Iterable[RecordOutcome]) -> ParseResult:
    """Split per-record outcomes into the success/error ledger, keeping order."""
    result = ParseResult()
    for outcome in outcomes:
        if isinstance(outcome, ParsedRecord):
            result.success.append(outcome)
        else:
            result.errors.append(outcome)
    return result


def build_metadata(*pairs: Tuple[str, Any]) -> Union[dict, None]:
    """Metadata dict from resolved values, or None when every value is empty."""
    metadata = {key: value for key, value in pairs if value not in (None, "")}
    return metadata or None
