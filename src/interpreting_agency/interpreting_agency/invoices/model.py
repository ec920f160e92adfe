from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import BillStatus, InvoiceStatus


@dataclass(frozen=True)
class Invoice:
    """Facility-side billing record for a job."""

    invoice_id: int
    facility_id: int
    job_id: Optional[int]
    status: InvoiceStatus = InvoiceStatus.DRAFT
    invoice_number: Optional[str] = None
    total: float = 0.0
    issued_date: Optional[date] = None
    due_date: Optional[date] = None
    paid_date: Optional[date] = None


@dataclass(frozen=True)
class InterpreterBill:
    """Payable: what an interpreter is owed for a job."""

    bill_id: int
    interpreter_id: int
    job_id: int
    status: BillStatus = BillStatus.QUEUED
    hours_amount: float = 0.0
    mileage_amount: float = 0.0
    expenses_amount: float = 0.0
    total: float = 0.0
