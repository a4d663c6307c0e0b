"""Bulk import ledger models."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from models.ticket import Ticket, TicketCreate


class ParsedRecord(BaseModel):
    """A record that passed validation, with its source line."""

    data: TicketCreate
    line: int


class ParseError(BaseModel):
    """A record (or the whole batch, at line 0) that could not be imported."""

    line: int
    record: Optional[Any] = None
    reason: str


class ParseResult(BaseModel):
    """Ledger produced by one parser run, split into successes and errors."""

    success: List[ParsedRecord] = Field(default_factory=list)
    errors: List[ParseError] = Field(default_factory=list)

    @classmethod
    def structural_failure(cls, reason: str) -> "ParseResult":
        """Whole-batch failure: one line-0 error and nothing imported."""
        return cls(errors=[ParseError(line=0, record=None, reason=reason)])


class ImportSummary(BaseModel):
    """Response body of POST /tickets/import."""

    total: int
    successful: int
    failed: int
    errors: List[ParseError] = Field(default_factory=list)
    tickets: List[Ticket] = Field(default_factory=list)
