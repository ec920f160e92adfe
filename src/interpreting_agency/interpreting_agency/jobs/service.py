from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Mapping, Optional

from ..billing.calculations import calculate_job_duration
from ..billing.service import effective_minimum_hours
from ..common.time_utils import is_valid_job_duration, normalize_time_to_hhmm
from ..common.timezones import timezone_from_state
from ..common.validators import optional_email, optional_phone, optional_zip, require_non_empty, require_positive_id
from ..core.constants import DEFAULT_MINIMUM_HOURS
from ..core.enums import JobStatus, LocationType
from ..core.exceptions import NotFoundError, ValidationError
from ..facilities.repository import FacilityRepository
from ..interpreters.repository import InterpreterRepository
from .model import Job, JobDraft
from .repository import JobRepository

logger = logging.getLogger(__name__)

# Jobs in these states can no longer take a new interpreter.
_CLOSED_STATUSES = {JobStatus.BILLED, JobStatus.PAID, JobStatus.CANCELLED, JobStatus.READY_TO_BILL}


@dataclass(frozen=True)
class AutoCompleteResult:
    updated: int
    job_numbers: list[str]


def validate_schedule(start_time: Any, end_time: Any) -> tuple[str, str]:
    """Normalize start/end and enforce the 2-8 hour job window."""
    start = normalize_time_to_hhmm(start_time)
    if not start:
        raise ValidationError("Start time is required")
    end = normalize_time_to_hhmm(end_time)
    if not end:
        raise ValidationError("End time is required")
    if not is_valid_job_duration(start, end):
        raise ValidationError("Job must be between 2 and 8 hours long")
    return start, end


def job_has_ended(job: Job, now: datetime) -> bool:
    """True once the scheduled end has passed; an overnight job ends the day after job_date."""
    end_date = job.job_date
    if job.end_time < job.start_time:
        end_date += timedelta(days=1)
    return (end_date, job.end_time) <= (now.date(), now.strftime("%H:%M"))


def _parse_job_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    raw = require_non_empty(value, "Date")
    try:
        return datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError("Date must be YYYY-MM-DD") from None


class JobService:
    def __init__(
        self,
        jobs: JobRepository,
        facilities: FacilityRepository,
        interpreters: InterpreterRepository,
        *,
        default_minimum_hours: float = DEFAULT_MINIMUM_HOURS,
    ):
        self._jobs = jobs
        self._facilities = facilities
        self._interpreters = interpreters
        self._default_minimum = float(default_minimum_hours)

    def create(self, payload: Mapping[str, Any]) -> int:
        facility_id = require_positive_id(payload.get("facility_id"), "Facility")
        if not self._facilities.get_by_id(facility_id):
            raise NotFoundError("Facility not found")

        start, end = validate_schedule(payload.get("start_time"), payload.get("end_time"))

        try:
            location_type = LocationType(payload.get("location_type") or LocationType.IN_PERSON.value)
        except ValueError:
            raise ValidationError("Location type is invalid") from None

        state = (payload.get("location_state") or "").strip().upper() or None
        draft = JobDraft(
            facility_id=facility_id,
            job_date=_parse_job_date(payload.get("job_date")),
            start_time=start,
            end_time=end,
            location_type=location_type,
            deaf_client_name=payload.get("deaf_client_name") or None,
            location_address=payload.get("location_address") or None,
            location_city=payload.get("location_city") or None,
            location_state=state,
            location_zip=optional_zip(payload.get("location_zip")),
            timezone=payload.get("timezone") or timezone_from_state(state),
            client_contact_phone=optional_phone(payload.get("client_contact_phone"), "Client contact phone"),
            client_contact_email=optional_email(payload.get("client_contact_email"), "Client contact email"),
            internal_notes=payload.get("internal_notes") or None,
        )
        job_id = self._jobs.create(draft)
        logger.info("Created job %s for facility %s on %s", job_id, facility_id, draft.job_date)
        return job_id

    def confirm_interpreter(self, *, job_id: int, interpreter_id: int) -> float:
        """Assign and confirm an interpreter; returns the recomputed billable hours."""
        job = self._jobs.get_by_id(int(job_id))
        if not job:
            raise NotFoundError("Job not found")
        if job.status in _CLOSED_STATUSES:
            raise ValidationError(f"Cannot confirm an interpreter on a {job.status.value} job")

        interpreter = self._interpreters.get_by_id(require_positive_id(interpreter_id, "Interpreter"))
        if not interpreter:
            raise NotFoundError("Interpreter not found")
        facility = self._facilities.get_by_id(job.facility_id)

        minimum = effective_minimum_hours(facility, interpreter, default=self._default_minimum)
        billable_hours = max(calculate_job_duration(job.start_time, job.end_time), minimum)

        if not self._jobs.assign_interpreter(
            job_id=job.job_id,
            interpreter_id=interpreter.interpreter_id,
            billable_hours=billable_hours,
        ):
            raise ValidationError("Failed to confirm interpreter")
        return billable_hours

    def auto_complete(self, *, now: Optional[datetime] = None) -> AutoCompleteResult:
        """Mark confirmed jobs whose scheduled end has passed as complete."""
        now = now or datetime.now()
        current_time = now.strftime("%H:%M:%S")

        candidates = self._jobs.list_confirmed_ending_by(today=now.date(), current_time=current_time)
        jobs = [j for j in candidates if job_has_ended(j, now)]
        if not jobs:
            logger.info("No jobs to auto-complete")
            return AutoCompleteResult(updated=0, job_numbers=[])

        job_numbers = [j.job_number or str(j.job_id) for j in jobs]
        updated = self._jobs.update_status(job_ids=[j.job_id for j in jobs], status=JobStatus.COMPLETE)
        logger.info("Auto-completed %d jobs: %s", updated, ", ".join(job_numbers))
        return AutoCompleteResult(updated=updated, job_numbers=job_numbers)
