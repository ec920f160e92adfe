from __future__ import annotations

from enum import Enum


class JobStatus(str, Enum):
    """Lifecycle of an interpreting job."""

    NEW = "new"
    OUTREACH_IN_PROGRESS = "outreach_in_progress"
    CONFIRMED = "confirmed"
    COMPLETE = "complete"
    READY_TO_BILL = "ready_to_bill"
    BILLED = "billed"
    PAID = "paid"
    CANCELLED = "cancelled"


class LocationType(str, Enum):
    IN_PERSON = "in_person"
    REMOTE = "remote"


class HoursType(str, Enum):
    """How a job's scheduled minutes fall relative to business hours."""

    BUSINESS = "business"
    AFTER = "after"
    MIXED = "mixed"


class InvoiceStatus(str, Enum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    PAID = "paid"


class BillStatus(str, Enum):
    """Interpreter bill (payable) status."""

    QUEUED = "queued"
    PAID = "paid"


class RecordStatus(str, Enum):
    """Shared status of facilities and interpreters."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
