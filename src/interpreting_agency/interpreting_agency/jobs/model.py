from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import JobStatus, LocationType


@dataclass(frozen=True)
class Job:
    """Domain entity: a scheduled interpreting assignment.

    Rate fields are per-job overrides; None means "use the facility or
    interpreter default".
    """

    job_id: int
    job_number: Optional[str]
    facility_id: int
    job_date: date
    start_time: str
    end_time: str
    status: JobStatus = JobStatus.NEW
    interpreter_id: Optional[int] = None
    location_type: LocationType = LocationType.IN_PERSON
    deaf_client_name: Optional[str] = None
    location_address: Optional[str] = None
    location_city: Optional[str] = None
    location_state: Optional[str] = None
    location_zip: Optional[str] = None
    timezone: Optional[str] = None

    facility_rate_business: Optional[float] = None
    facility_rate_after_hours: Optional[float] = None
    facility_rate_mileage: Optional[float] = None
    facility_rate_adjustment: Optional[float] = None
    interpreter_rate_business: Optional[float] = None
    interpreter_rate_after_hours: Optional[float] = None
    interpreter_rate_mileage: Optional[float] = None
    interpreter_rate_adjustment: Optional[float] = None
    trilingual_rate_uplift: Optional[float] = None

    mileage: Optional[float] = None
    travel_time_hours: Optional[float] = None
    parking: Optional[float] = None
    tolls: Optional[float] = None
    misc_fee: Optional[float] = None

    billable_hours: Optional[float] = None
    emergency_fee_applied: bool = False
    holiday_fee_applied: bool = False
    internal_notes: Optional[str] = None


@dataclass(frozen=True)
class JobDraft:
    """Validated input for creating a job."""

    facility_id: int
    job_date: date
    start_time: str
    end_time: str
    location_type: LocationType = LocationType.IN_PERSON
    deaf_client_name: Optional[str] = None
    location_address: Optional[str] = None
    location_city: Optional[str] = None
    location_state: Optional[str] = None
    location_zip: Optional[str] = None
    timezone: Optional[str] = None
    client_contact_phone: Optional[str] = None
    client_contact_email: Optional[str] = None
    internal_notes: Optional[str] = None


@dataclass(frozen=True)
class BillingTotals:
    """Derived totals written back to a job when billing is generated."""

    billable_hours: float
    facility_hourly_total: float
    facility_billable_total: float
    interpreter_hourly_total: float
    interpreter_billable_total: float
