from __future__ import annotations

from typing import Optional, Protocol

from .model import InterpreterBill, Invoice


class InvoiceRepository(Protocol):
    def get_for_job(self, job_id: int) -> Optional[Invoice]:
        raise NotImplementedError

    def create_draft(self, *, facility_id: int, job_id: int, total: float) -> int:
        raise NotImplementedError


class InterpreterBillRepository(Protocol):
    def get_for_job(self, job_id: int) -> Optional[InterpreterBill]:
        raise NotImplementedError

    def create_queued(
        self,
        *,
        interpreter_id: int,
        job_id: int,
        hours_amount: float,
        mileage_amount: float,
        expenses_amount: float,
        total: float,
    ) -> int:
        raise NotImplementedError
