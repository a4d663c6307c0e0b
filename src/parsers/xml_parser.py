"""
XML ticket import.

Accepted shapes::

    <tickets><ticket>...</ticket><ticket>...</ticket></tickets>
    <ticket>...</ticket>

Elements are first converted into plain dicts (attributes under ``@_name``,
text next to children under ``#text``, repeated children as lists) and then
mapped onto the ticket schema.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from xml.etree import ElementTree as ET

from models.imports import ParseResult
from parsers.common import build_metadata, collect, validate_candidate

ATTRIBUTE_PREFIX = "@_"
TEXT_KEY = "#text"

TICKET_FIELDS = (
    "customer_id",
    "customer_email",
    "customer_name",
    "subject",
    "description",
    "category",
    "priority",
    "status",
)
OPTIONAL_ENUM_FIELDS = ("category", "priority", "status")


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def element_to_value(element: ET.Element) -> Any:
    """Convert an element into a string (leaf) or a dict (branch)."""
    text = (element.text or "").strip()
    children = list(element)
    if not children and not element.attrib:
        return text

    node: Dict[str, Any] = {
        f"{ATTRIBUTE_PREFIX}{name}": value for name, value in element.attrib.items()
    }
    for child in children:
        key = _local_name(child.tag)
        value = element_to_value(child)
        if key not in node:
            node[key] = value
        elif isinstance(node[key], list):
            node[key].append(value)
        else:
            node[key] = [node[key], value]
    if text:
        node[TEXT_KEY] = text
    return node


def _as_list(value: Any) -> List[Any]:
    if value is None or value == "":
        return []
    return value if isinstance(value, list) else [value]


def _extract_tags(record: Dict[str, Any]) -> List[Any]:
    tags = record.get("tags")
    if not isinstance(tags, dict):
        return []
    return _as_list(tags.get("tag"))


def normalize_ticket(record: Any) -> Any:
    """Map one converted ``<ticket>`` element onto a ticket candidate."""
    if not isinstance(record, dict):
        return record

    candidate: Dict[str, Any] = {
        field: record[field] for field in TICKET_FIELDS if field in record
    }
    # Empty optional elements fall back to the schema defaults.
    for field in OPTIONAL_ENUM_FIELDS:
        if candidate.get(field) == "":
            del candidate[field]
    candidate["assigned_to"] = record.get("assigned_to") or None
    candidate["tags"] = _extract_tags(record)

    nested = record.get("metadata")
    nested = nested if isinstance(nested, dict) else {}
    metadata = build_metadata(
        *(
            (field, nested.get(field) or record.get(field))
            for field in ("source", "browser", "device_type")
        )
    )
    if metadata is not None:
        candidate["metadata"] = metadata
    return candidate


def _extract_records(root: ET.Element) -> Optional[List[Any]]:
    name = _local_name(root.tag)
    if name == "ticket":
        return [element_to_value(root)]
    if name == "tickets":
        return [
            element_to_value(child) for child in root if _local_name(child.tag) == "ticket"
        ]
    return None


def parse_xml(content: str) -> ParseResult:
    """Parse XML text into a ticket import ledger."""
    if not content or not content.strip():
        return ParseResult.structural_failure("Invalid XML format: file is empty")

    try:
        root = ET.fromstring(content.strip())
    except ET.ParseError as exc:
        return ParseResult.structural_failure(f"Invalid XML format: {exc}")

    records = _extract_records(root)
    if records is None:
        return ParseResult.structural_failure(
            "Invalid XML structure: expected <tickets> or <ticket> root element"
        )
    if not records:
        return ParseResult.structural_failure("Invalid XML format: no records found")

    return collect(
        validate_candidate(normalize_ticket(record), index + 1, raw=record)
        for index, record in enumerate(records)
    )
