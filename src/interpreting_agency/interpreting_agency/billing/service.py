from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.numbers import has_value, to_safe_number
from ..common.time_utils import normalize_time_to_hhmm
from ..core.constants import DEFAULT_MINIMUM_HOURS
from ..core.enums import JobStatus
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..facilities.model import Facility
from ..facilities.repository import FacilityRepository
from ..interpreters.model import Interpreter
from ..interpreters.repository import InterpreterRepository
from ..invoices.repository import InterpreterBillRepository, InvoiceRepository
from ..jobs.model import BillingTotals, Job
from ..jobs.repository import JobRepository
from .calculations import calculate_billable_total, calculate_hours_split
from .calculator.base import HoursSplitCalculator
from .model import BillableInputs, BillingPreview

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedRates:
    facility_business_rate: float = 0.0
    facility_after_hours_rate: float = 0.0
    facility_mileage_rate: float = 0.0
    facility_rate_adjustment: float = 0.0
    facility_trilingual_uplift: float = 0.0
    interpreter_business_rate: float = 0.0
    interpreter_after_hours_rate: float = 0.0
    interpreter_mileage_rate: float = 0.0
    interpreter_rate_adjustment: float = 0.0


@dataclass(frozen=True)
class BillingResult:
    job_id: int
    invoice_id: int
    bill_id: int
    totals: BillingTotals


def _pick(override: Any, default: Optional[float]) -> float:
    """Job-level override when explicitly set (0 counts), else the record default."""
    if has_value(override):
        return to_safe_number(override)
    return to_safe_number(default)


def resolve_rates(job: Job, facility: Optional[Facility], interpreter: Optional[Interpreter]) -> ResolvedRates:
    return ResolvedRates(
        facility_business_rate=_pick(job.facility_rate_business, facility.rate_business_hours if facility else None),
        facility_after_hours_rate=_pick(job.facility_rate_after_hours, facility.rate_after_hours if facility else None),
        facility_mileage_rate=_pick(job.facility_rate_mileage, facility.rate_mileage if facility else None),
        facility_rate_adjustment=to_safe_number(job.facility_rate_adjustment),
        facility_trilingual_uplift=to_safe_number(job.trilingual_rate_uplift),
        interpreter_business_rate=_pick(
            job.interpreter_rate_business, interpreter.rate_business_hours if interpreter else None
        ),
        interpreter_after_hours_rate=_pick(
            job.interpreter_rate_after_hours, interpreter.rate_after_hours if interpreter else None
        ),
        interpreter_mileage_rate=_pick(job.interpreter_rate_mileage, interpreter.rate_mileage if interpreter else None),
        interpreter_rate_adjustment=to_safe_number(job.interpreter_rate_adjustment),
    )


def effective_minimum_hours(
    facility: Optional[Facility],
    interpreter: Optional[Interpreter],
    *,
    default: float = DEFAULT_MINIMUM_HOURS,
) -> float:
    """The higher of the facility and interpreter minimums."""
    facility_min = to_safe_number(facility.minimum_billable_hours if facility else None, default)
    interpreter_min = to_safe_number(interpreter.minimum_hours if interpreter else None, default)
    return max(facility_min, interpreter_min)


def build_preview(
    *,
    start_time: Any,
    end_time: Any,
    minimum_hours: Any = None,
    rates: Optional[ResolvedRates] = None,
    expenses: Optional[Mapping[str, Any]] = None,
    default_minimum_hours: float = DEFAULT_MINIMUM_HOURS,
    calculator: Optional[HoursSplitCalculator] = None,
    job_id: Optional[int] = None,
) -> Optional[BillingPreview]:
    """Hours split + totals for a set of raw form values.

    Returns None when either time cannot be read; every numeric field
    degrades to 0 instead of failing.
    """
    start = normalize_time_to_hhmm(start_time)
    end = normalize_time_to_hhmm(end_time)
    if not start or not end:
        return None

    rates = rates or ResolvedRates()
    expenses = expenses or {}
    minimum = to_safe_number(minimum_hours, default_minimum_hours)

    split = calculate_hours_split(start, end, minimum, calculator=calculator)
    totals = calculate_billable_total(
        BillableInputs(
            hours_split=split,
            facility_business_rate=rates.facility_business_rate,
            facility_after_hours_rate=rates.facility_after_hours_rate,
            facility_mileage_rate=rates.facility_mileage_rate,
            facility_rate_adjustment=rates.facility_rate_adjustment,
            facility_trilingual_uplift=rates.facility_trilingual_uplift,
            interpreter_business_rate=rates.interpreter_business_rate,
            interpreter_after_hours_rate=rates.interpreter_after_hours_rate,
            interpreter_mileage_rate=rates.interpreter_mileage_rate,
            interpreter_rate_adjustment=rates.interpreter_rate_adjustment,
            mileage=to_safe_number(expenses.get("mileage")),
            travel_time_hours=to_safe_number(expenses.get("travel_time_hours")),
            parking=to_safe_number(expenses.get("parking")),
            tolls=to_safe_number(expenses.get("tolls")),
            misc_fee=to_safe_number(expenses.get("misc_fee")),
        )
    )
    return BillingPreview(
        hours_split=split,
        totals=totals,
        minimum_hours=minimum,
        start_time=start,
        end_time=end,
        job_id=job_id,
    )


class BillingService:
    def __init__(
        self,
        jobs: JobRepository,
        facilities: FacilityRepository,
        interpreters: InterpreterRepository,
        invoices: InvoiceRepository,
        bills: InterpreterBillRepository,
        *,
        default_minimum_hours: float = DEFAULT_MINIMUM_HOURS,
        calculator: Optional[HoursSplitCalculator] = None,
    ):
        self._jobs = jobs
        self._facilities = facilities
        self._interpreters = interpreters
        self._invoices = invoices
        self._bills = bills
        self._default_minimum = float(default_minimum_hours)
        self._calculator = calculator

    def preview(self, values: Mapping[str, Any]) -> Optional[BillingPreview]:
        """Preview for unsaved form values (no lookups)."""
        rates = ResolvedRates(
            facility_business_rate=to_safe_number(values.get("facility_rate_business")),
            facility_after_hours_rate=to_safe_number(values.get("facility_rate_after_hours")),
            facility_mileage_rate=to_safe_number(values.get("facility_rate_mileage")),
            facility_rate_adjustment=to_safe_number(values.get("facility_rate_adjustment")),
            facility_trilingual_uplift=to_safe_number(values.get("trilingual_rate_uplift")),
            interpreter_business_rate=to_safe_number(values.get("interpreter_rate_business")),
            interpreter_after_hours_rate=to_safe_number(values.get("interpreter_rate_after_hours")),
            interpreter_mileage_rate=to_safe_number(values.get("interpreter_rate_mileage")),
            interpreter_rate_adjustment=to_safe_number(values.get("interpreter_rate_adjustment")),
        )
        return build_preview(
            start_time=values.get("start_time"),
            end_time=values.get("end_time"),
            minimum_hours=values.get("minimum_hours"),
            rates=rates,
            expenses=values,
            default_minimum_hours=self._default_minimum,
            calculator=self._calculator,
        )

    def preview_job(self, job_id: int) -> BillingPreview:
        job = self._get_job(job_id)
        facility = self._facilities.get_by_id(job.facility_id)
        interpreter = self._interpreters.get_by_id(job.interpreter_id) if job.interpreter_id else None
        return self._preview_for(job, facility, interpreter)

    def generate_billing(self, job_id: int) -> BillingResult:
        """Create the draft invoice and queued interpreter bill for a completed job."""
        job = self._get_job(job_id)
        if job.status == JobStatus.PAID:
            raise ValidationError("Job is paid and locked")
        if job.status != JobStatus.COMPLETE:
            raise ValidationError("Only completed jobs can be billed")
        if not job.interpreter_id:
            raise ValidationError("No interpreter assigned to job")
        if self._invoices.get_for_job(job.job_id) or self._bills.get_for_job(job.job_id):
            raise ConflictError("Billing already generated for this job")

        facility = self._facilities.get_by_id(job.facility_id)
        if not facility:
            raise NotFoundError("Facility not found")
        interpreter = self._interpreters.get_by_id(job.interpreter_id)
        if not interpreter:
            raise NotFoundError("Interpreter not found")

        preview = self._preview_for(job, facility, interpreter)
        t = preview.totals
        # Billable hours set at confirmation already include the interpreter minimum.
        billable_hours = preview.hours_split.billable_hours
        if has_value(job.billable_hours):
            billable_hours = to_safe_number(job.billable_hours)
        totals = BillingTotals(
            billable_hours=billable_hours,
            facility_hourly_total=t.facility_hourly_total,
            facility_billable_total=t.facility_total,
            interpreter_hourly_total=t.interpreter_hourly_total,
            interpreter_billable_total=t.interpreter_total,
        )

        self._jobs.save_billing_totals(job_id=job.job_id, totals=totals, status=JobStatus.READY_TO_BILL)
        invoice_id = self._invoices.create_draft(
            facility_id=job.facility_id,
            job_id=job.job_id,
            total=t.facility_total,
        )
        bill_id = self._bills.create_queued(
            interpreter_id=job.interpreter_id,
            job_id=job.job_id,
            hours_amount=t.interpreter_hourly_total + t.interpreter_travel_time_total,
            mileage_amount=t.interpreter_mileage_total,
            expenses_amount=t.interpreter_fees_total,
            total=t.interpreter_total,
        )

        logger.info(
            "Generated billing for job %s (%s): invoice=%s bill=%s facility_total=%.2f interpreter_total=%.2f",
            job.job_number or job.job_id,
            interpreter.full_name,
            invoice_id,
            bill_id,
            t.facility_total,
            t.interpreter_total,
        )
        return BillingResult(job_id=job.job_id, invoice_id=invoice_id, bill_id=bill_id, totals=totals)

    def _get_job(self, job_id: int) -> Job:
        job = self._jobs.get_by_id(int(job_id))
        if not job:
            raise NotFoundError("Job not found")
        return job

    def _preview_for(
        self,
        job: Job,
        facility: Optional[Facility],
        interpreter: Optional[Interpreter],
    ) -> BillingPreview:
        minimum = facility.minimum_billable_hours if facility else None
        preview = build_preview(
            start_time=job.start_time,
            end_time=job.end_time,
            minimum_hours=minimum,
            rates=resolve_rates(job, facility, interpreter),
            expenses={
                "mileage": job.mileage,
                "travel_time_hours": job.travel_time_hours,
                "parking": job.parking,
                "tolls": job.tolls,
                "misc_fee": job.misc_fee,
            },
            default_minimum_hours=self._default_minimum,
            calculator=self._calculator,
            job_id=job.job_id,
        )
        if preview is None:
            raise ValidationError("Job start/end time is invalid")
        return preview
