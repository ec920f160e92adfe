from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..common.numbers import format_currency, format_duration
from ..core.enums import HoursType


@dataclass(frozen=True)
class HoursSplit:
    """Scheduled hours of a job split into business vs after-hours.

    ``business_hours`` already includes the minimum-hours top-up;
    ``scheduled_business_hours`` is the raw split before it.
    """

    business_hours: float
    after_hours: float
    total_hours: float
    billable_hours: float
    minimum_applied: float
    hours_type: HoursType
    scheduled_business_hours: float

    def as_dict(self) -> dict:
        data = asdict(self)
        data["hours_type"] = self.hours_type.value
        return data


@dataclass(frozen=True)
class BillableInputs:
    hours_split: HoursSplit
    facility_business_rate: float = 0.0
    facility_after_hours_rate: float = 0.0
    facility_mileage_rate: float = 0.0
    facility_rate_adjustment: float = 0.0
    facility_trilingual_uplift: float = 0.0
    interpreter_business_rate: float = 0.0
    interpreter_after_hours_rate: float = 0.0
    interpreter_mileage_rate: float = 0.0
    interpreter_rate_adjustment: float = 0.0
    mileage: float = 0.0
    travel_time_hours: float = 0.0
    parking: float = 0.0
    tolls: float = 0.0
    misc_fee: float = 0.0


@dataclass(frozen=True)
class BillableTotal:
    """Facility (invoiced) and interpreter (payable) breakdown of one job.

    Rates are the adjusted effective rates. Amounts keep full precision;
    round only when formatting.
    """

    facility_business_total: float
    facility_after_hours_total: float
    facility_mileage_total: float
    facility_fees_total: float
    facility_total: float
    facility_business_rate: float
    facility_after_hours_rate: float
    facility_mileage_rate: float
    facility_rate_adjustment: float
    facility_trilingual_uplift: float

    interpreter_business_total: float
    interpreter_after_hours_total: float
    interpreter_mileage_total: float
    interpreter_travel_time_total: float
    interpreter_fees_total: float
    interpreter_total: float
    interpreter_business_rate: float
    interpreter_after_hours_rate: float
    interpreter_mileage_rate: float
    interpreter_travel_time_rate: float
    interpreter_rate_adjustment: float

    mileage: float
    travel_time_hours: float
    parking: float
    tolls: float
    misc_fee: float

    @property
    def facility_hourly_total(self) -> float:
        return self.facility_business_total + self.facility_after_hours_total

    @property
    def interpreter_hourly_total(self) -> float:
        return self.interpreter_business_total + self.interpreter_after_hours_total

    def as_dict(self) -> dict:
        data = asdict(self)
        data["facility_hourly_total"] = self.facility_hourly_total
        data["interpreter_hourly_total"] = self.interpreter_hourly_total
        return data


@dataclass(frozen=True)
class BillingPreview:
    hours_split: HoursSplit
    totals: BillableTotal
    minimum_hours: float
    start_time: str
    end_time: str
    job_id: Optional[int] = None

    def as_dict(self) -> dict:
        return {
            "job_id": self.job_id,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "minimum_hours": self.minimum_hours,
            "hours_split": self.hours_split.as_dict(),
            "totals": self.totals.as_dict(),
            "display": {
                "billable_duration": format_duration(self.hours_split.billable_hours),
                "facility_total": format_currency(self.totals.facility_total),
                "interpreter_total": format_currency(self.totals.interpreter_total),
            },
        }
