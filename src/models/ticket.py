"""Ticket models."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field


class Category(str, Enum):
    """Support categories; ``other`` is the classifier's fallback."""

    ACCOUNT_ACCESS = "account_access"
    TECHNICAL_ISSUE = "technical_issue"
    BILLING_QUESTION = "billing_question"
    FEATURE_REQUEST = "feature_request"
    BUG_REPORT = "bug_report"
    OTHER = "other"


class Priority(str, Enum):
    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Status(str, Enum):
    NEW = "new"
    IN_PROGRESS = "in_progress"
    WAITING_CUSTOMER = "waiting_customer"
    RESOLVED = "resolved"
    CLOSED = "closed"


class Source(str, Enum):
    WEB_FORM = "web_form"
    EMAIL = "email"
    API = "api"
    CHAT = "chat"
    PHONE = "phone"


class DeviceType(str, Enum):
    DESKTOP = "desktop"
    MOBILE = "mobile"
    TABLET = "tablet"


CLOSED_STATUSES = (Status.RESOLVED, Status.CLOSED)


class TicketMetadata(BaseModel):
    """Where the ticket came from."""

    source: Source
    browser: Optional[str] = None
    device_type: Optional[DeviceType] = None


class TicketCreate(BaseModel):
    """Validated ticket input, shared by the API and every import format."""

    customer_id: str = Field(min_length=1)
    customer_email: EmailStr
    customer_name: str = Field(min_length=1)
    subject: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=10, max_length=2000)
    category: Optional[Category] = None
    priority: Optional[Priority] = None
    status: Status = Status.NEW
    assigned_to: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    metadata: Optional[TicketMetadata] = None


class TicketUpdate(BaseModel):
    """Partial update; only fields present in the request are applied."""

    customer_id: Optional[str] = Field(default=None, min_length=1)
    customer_email: Optional[EmailStr] = None
    customer_name: Optional[str] = Field(default=None, min_length=1)
    subject: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, min_length=10, max_length=2000)
    category: Optional[Category] = None
    priority: Optional[Priority] = None
    status: Optional[Status] = None
    assigned_to: Optional[str] = None
    tags: Optional[List[str]] = None
    metadata: Optional[TicketMetadata] = None


class Ticket(TicketCreate):
    """Stored ticket with identity and timestamps."""

    id: str
    created_at: str
    updated_at: str
    resolved_at: Optional[str] = None


class TicketFilters(BaseModel):
    """Optional list filters; unset fields match everything."""

    category: Optional[Category] = None
    priority: Optional[Priority] = None
    status: Optional[Status] = None
