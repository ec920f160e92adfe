from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import JobStatus
from .model import BillingTotals, Job, JobDraft


class JobRepository(Protocol):
    def get_by_id(self, job_id: int) -> Optional[Job]:
        raise NotImplementedError

    def create(self, draft: JobDraft) -> int:
        """Insert a new job in status ``new``; returns job_id."""

        raise NotImplementedError

    def list_confirmed_ending_by(self, *, today: date, current_time: str) -> Sequence[Job]:
        """Confirmed jobs whose scheduled end is at or before ``today`` ``current_time``.

        An overnight job (end_time before start_time) ends on the day after its job_date.
        """

        raise NotImplementedError

    def update_status(self, *, job_ids: Sequence[int], status: JobStatus) -> int:
        raise NotImplementedError

    def assign_interpreter(self, *, job_id: int, interpreter_id: int, billable_hours: float) -> bool:
        """Set the interpreter, status ``confirmed`` and billable hours."""

        raise NotImplementedError

    def save_billing_totals(self, *, job_id: int, totals: BillingTotals, status: JobStatus) -> bool:
        raise NotImplementedError
