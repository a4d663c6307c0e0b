"""JSON ticket import: a single object or an array of objects."""

import json

from models.imports import ParseResult
from parsers.common import collect, validate_candidate


def parse_json(content: str) -> ParseResult:
    """Parse JSON text into a ticket import ledger."""
    if not content or not content.strip():
        return ParseResult.structural_failure("Invalid JSON format: file is empty")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        return ParseResult.structural_failure(f"Invalid JSON format: {exc}")

    records = data if isinstance(data, list) else [data]
    if not records:
        return ParseResult.structural_failure("Invalid JSON format: no records found")

    return collect(
        validate_candidate(record, index + 1) for index, record in enumerate(records)
    )
