"""
CSV ticket import.

The first line is the header. Rows are read in full and then normalised with
named per-column transforms before schema validation.
"""

from __future__ import annotations

import csv
import io
from typing import Dict, List, Optional

from models.imports import ParseError, ParseResult
from parsers.common import RecordOutcome, build_metadata, collect, validate_candidate

REQUIRED_COLUMNS = (
    "customer_id",
    "customer_email",
    "customer_name",
    "subject",
    "description",
    "category",
    "priority",
    "status",
)

# Metadata field -> accepted column names, first non-empty wins.
METADATA_ALIASES = (
    ("source", ("metadata_source", "source")),
    ("browser", ("metadata_browser", "browser")),
    ("device_type", ("metadata_device_type", "device_type")),
)


class _StructureError(Exception):
    """Batch-level CSV problem."""


def split_tags(value: Optional[str]) -> List[str]:
    """``"a | b"`` -> ``["a", "b"]``; empty or missing -> ``[]``."""
    if not value:
        return []
    return [segment.strip() for segment in value.split("|")]


def _first_present(row: Dict[str, str], columns) -> Optional[str]:
    for column in columns:
        value = row.get(column)
        if value:
            return value
    return None


def normalize_row(row: Dict[str, str]) -> dict:
    """Turn a raw row of strings into a ticket candidate."""
    candidate = {column: row[column] for column in REQUIRED_COLUMNS}
    candidate["assigned_to"] = row.get("assigned_to") or None
    candidate["tags"] = split_tags(row.get("tags"))
    metadata = build_metadata(
        *((field, _first_present(row, aliases)) for field, aliases in METADATA_ALIASES)
    )
    if metadata is not None:
        candidate["metadata"] = metadata
    return candidate


def _read_rows(content: str) -> List[Dict[str, str]]:
    reader = csv.reader(io.StringIO(content), strict=True)
    header: Optional[List[str]] = None
    rows: List[Dict[str, str]] = []
    try:
        for cells in reader:
            cells = [cell.strip() for cell in cells]
            if not any(cells):
                continue
            if header is None:
                header = cells
                continue
            if len(cells) != len(header):
                raise _StructureError(
                    f"row {reader.line_num} has {len(cells)} fields, "
                    f"expected {len(header)}"
                )
            rows.append(dict(zip(header, cells)))
    except csv.Error as exc:
        raise _StructureError(str(exc)) from exc
    if header is not None:
        missing = [column for column in REQUIRED_COLUMNS if column not in header]
        if missing and rows:
            raise _StructureError(f"missing required columns: {', '.join(missing)}")
    return rows


def _check_row(row: Dict[str, str], line: int) -> RecordOutcome:
    for column in REQUIRED_COLUMNS:
        if not row.get(column, "").strip():
            return ParseError(
                line=line,
                record=row,
                reason=(
                    f"Invalid CSV format at line {line}: "
                    f"missing required field '{column}'"
                ),
            )
    return validate_candidate(normalize_row(row), line, raw=row)


def parse_csv(content: str) -> ParseResult:
    """Parse CSV text into a ticket import ledger."""
    if not content or not content.strip():
        return ParseResult.structural_failure("Invalid CSV format: file is empty")

    try:
        rows = _read_rows(content)
    except _StructureError as exc:
        return ParseResult.structural_failure(f"Invalid CSV format: {exc}")

    if not rows:
        return ParseResult.structural_failure(
            "Invalid CSV format: no valid records found"
        )

    # Line numbers count the header, so the first data row is line 2.
    return collect(_check_row(row, index + 2) for index, row in enumerate(rows))
