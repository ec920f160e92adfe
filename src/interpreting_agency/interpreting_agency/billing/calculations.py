"""Job hours split and billing totals.

Pure functions: no I/O and no exceptions. Numeric inputs are sanitized with
``to_safe_number`` so a half-filled form still gets a preview. Time strings
are expected as "HH:MM"; anything unparsable counts as midnight.
"""

from __future__ import annotations

from typing import Any, Optional

from ..common.numbers import to_safe_number
from ..common.time_utils import parse_time_to_minutes, span_minutes
from ..core.constants import DEFAULT_MINIMUM_HOURS
from ..core.enums import HoursType
from .calculator.base import HoursSplitCalculator
from .calculator.interval_calculator import IntervalCalculator
from .model import BillableInputs, BillableTotal, HoursSplit

_default_calculator: HoursSplitCalculator = IntervalCalculator()


def calculate_job_duration(start_time: str, end_time: str) -> float:
    """Job length in hours; an end before the start wraps past midnight."""
    start = parse_time_to_minutes(start_time) or 0
    end = parse_time_to_minutes(end_time) or 0
    return span_minutes(start, end) / 60


def calculate_hours_split(
    start_time: str,
    end_time: str,
    minimum_hours: Any = DEFAULT_MINIMUM_HOURS,
    *,
    calculator: Optional[HoursSplitCalculator] = None,
) -> HoursSplit:
    calculator = calculator or _default_calculator
    minimum = to_safe_number(minimum_hours, DEFAULT_MINIMUM_HOURS)

    start = parse_time_to_minutes(start_time) or 0
    end = parse_time_to_minutes(end_time) or 0
    total_minutes = span_minutes(start, end)
    total_hours = total_minutes / 60

    business_minutes, after_minutes = calculator.split_minutes(start, total_minutes)

    # Any shortfall against the minimum is billed as business hours.
    billable_hours = max(total_hours, minimum)
    minimum_applied = billable_hours - total_hours if billable_hours > total_hours else 0.0

    if after_minutes == 0:
        hours_type = HoursType.BUSINESS
    elif business_minutes == 0:
        hours_type = HoursType.AFTER
    else:
        hours_type = HoursType.MIXED

    return HoursSplit(
        business_hours=business_minutes / 60 + minimum_applied,
        after_hours=after_minutes / 60,
        total_hours=total_hours,
        billable_hours=billable_hours,
        minimum_applied=minimum_applied,
        hours_type=hours_type,
        scheduled_business_hours=business_minutes / 60,
    )


def calculate_billable_total(inputs: BillableInputs) -> BillableTotal:
    split = inputs.hours_split

    facility_business_rate = to_safe_number(inputs.facility_business_rate)
    facility_after_hours_rate = to_safe_number(inputs.facility_after_hours_rate)
    facility_mileage_rate = to_safe_number(inputs.facility_mileage_rate)
    facility_adjustment = to_safe_number(inputs.facility_rate_adjustment)
    trilingual_uplift = to_safe_number(inputs.facility_trilingual_uplift)
    interpreter_business_rate = to_safe_number(inputs.interpreter_business_rate)
    interpreter_after_hours_rate = to_safe_number(inputs.interpreter_after_hours_rate)
    interpreter_mileage_rate = to_safe_number(inputs.interpreter_mileage_rate)
    interpreter_adjustment = to_safe_number(inputs.interpreter_rate_adjustment)

    mileage = to_safe_number(inputs.mileage)
    travel_time_hours = to_safe_number(inputs.travel_time_hours)
    parking = to_safe_number(inputs.parking)
    tolls = to_safe_number(inputs.tolls)
    misc_fee = to_safe_number(inputs.misc_fee)

    # Adjustments apply to hourly rates only, never to mileage or fees.
    # The trilingual uplift is billed to the facility only.
    adj_facility_business = facility_business_rate + trilingual_uplift + facility_adjustment
    adj_facility_after = facility_after_hours_rate + trilingual_uplift + facility_adjustment
    adj_interpreter_business = interpreter_business_rate + interpreter_adjustment
    adj_interpreter_after = interpreter_after_hours_rate + interpreter_adjustment

    # Travel time follows the dominant hour type; a tie bills at the business rate.
    if split.business_hours >= split.after_hours:
        travel_rate = adj_interpreter_business
    else:
        travel_rate = adj_interpreter_after

    fees = parking + tolls + misc_fee

    facility_business_total = split.business_hours * adj_facility_business
    facility_after_total = split.after_hours * adj_facility_after
    facility_mileage_total = mileage * facility_mileage_rate

    interpreter_business_total = split.business_hours * adj_interpreter_business
    interpreter_after_total = split.after_hours * adj_interpreter_after
    interpreter_mileage_total = mileage * interpreter_mileage_rate
    interpreter_travel_total = travel_time_hours * travel_rate

    return BillableTotal(
        facility_business_total=facility_business_total,
        facility_after_hours_total=facility_after_total,
        facility_mileage_total=facility_mileage_total,
        facility_fees_total=fees,
        facility_total=facility_business_total + facility_after_total + facility_mileage_total + fees,
        facility_business_rate=adj_facility_business,
        facility_after_hours_rate=adj_facility_after,
        facility_mileage_rate=facility_mileage_rate,
        facility_rate_adjustment=facility_adjustment,
        facility_trilingual_uplift=trilingual_uplift,
        interpreter_business_total=interpreter_business_total,
        interpreter_after_hours_total=interpreter_after_total,
        interpreter_mileage_total=interpreter_mileage_total,
        interpreter_travel_time_total=interpreter_travel_total,
        interpreter_fees_total=fees,
        interpreter_total=(
            interpreter_business_total
            + interpreter_after_total
            + interpreter_mileage_total
            + interpreter_travel_total
            + fees
        ),
        interpreter_business_rate=adj_interpreter_business,
        interpreter_after_hours_rate=adj_interpreter_after,
        interpreter_mileage_rate=interpreter_mileage_rate,
        interpreter_travel_time_rate=travel_rate,
        interpreter_rate_adjustment=interpreter_adjustment,
        mileage=mileage,
        travel_time_hours=travel_time_hours,
        parking=parking,
        tolls=tolls,
        misc_fee=misc_fee,
    )
