"""
Import orchestration tests: parsing, persistence and the summary ledger.

Run with: pytest tests/unit/test_import_service.py -v
"""

import json

import pytest

from utils.error_handling import UnsupportedFormatError

CSV_CONTENT = """customer_id,customer_email,customer_name,subject,description,category,priority,status,tags
c1,one@example.com,One,First subject,First valid description,other,low,new,a|b
c2,bad-email,Two,Second subject,Second valid description,other,low,new,
c3,three@example.com,Three,Third subject,Third valid description,bug_report,high,resolved,
"""


def test_csv_import_persists_only_successes(registry):
    summary = registry.imports.import_content(CSV_CONTENT, "csv")

    assert summary.total == 3
    assert summary.successful == 2
    assert summary.failed == 1
    assert summary.total == summary.successful + summary.failed
    assert summary.errors[0].line == 3
    assert [t.customer_id for t in summary.tickets] == ["c1", "c3"]
    assert registry.ticket_storage.count() == 2
    assert summary.tickets[1].resolved_at is not None


def test_structural_failure_persists_nothing(registry):
    summary = registry.imports.import_content("", "csv")
    assert summary.successful == 0
    assert summary.failed == 1
    assert "file is empty" in summary.errors[0].reason
    assert registry.ticket_storage.count() == 0


def test_json_empty_array(registry):
    summary = registry.imports.import_content("[]", "json")
    assert (summary.successful, summary.failed) == (0, 1)
    assert "no records found" in summary.errors[0].reason


def test_json_import_keeps_order(registry, valid_ticket):
    records = [
        {**valid_ticket, "customer_id": "first"},
        {**valid_ticket, "customer_email": "nope"},
        {**valid_ticket, "customer_id": "third"},
    ]
    summary = registry.imports.import_content(json.dumps(records), "json")
    assert [t.customer_id for t in summary.tickets] == ["first", "third"]
    assert [e.line for e in summary.errors] == [2]


def test_imported_tickets_are_not_reclassified(registry, valid_ticket):
    record = {k: v for k, v in valid_ticket.items() if k not in ("category", "priority")}
    summary = registry.imports.import_content(json.dumps(record), "json")
    assert summary.tickets[0].category is None
    assert summary.tickets[0].priority is None


def test_unknown_format(registry):
    with pytest.raises(UnsupportedFormatError):
        registry.imports.import_content("data", "yaml")
