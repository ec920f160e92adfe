import pytest

from src.interpreting_agency.interpreting_agency.billing.calculations import (
    calculate_hours_split,
    calculate_job_duration,
)
from src.interpreting_agency.interpreting_agency.billing.calculator.interval_calculator import IntervalCalculator
from src.interpreting_agency.interpreting_agency.billing.calculator.minute_calculator import MinuteByMinuteCalculator
from src.interpreting_agency.interpreting_agency.core.enums import HoursType


def test_business_hours_job():
    split = calculate_hours_split("09:00", "12:00", 2)

    assert split.business_hours == pytest.approx(3.0)
    assert split.after_hours == 0
    assert split.total_hours == pytest.approx(3.0)
    assert split.billable_hours == pytest.approx(3.0)
    assert split.minimum_applied == 0
    assert split.hours_type == HoursType.BUSINESS


def test_short_after_hours_job_tops_up_business_hours():
    split = calculate_hours_split("22:00", "23:00", 2)

    assert split.hours_type == HoursType.AFTER
    assert split.after_hours == pytest.approx(1.0)
    assert split.scheduled_business_hours == 0
    assert split.billable_hours == pytest.approx(2.0)
    assert split.minimum_applied == pytest.approx(1.0)
    assert split.business_hours == pytest.approx(1.0)


def test_overnight_job_wraps_midnight():
    split = calculate_hours_split("23:00", "01:00", 2)

    assert split.total_hours == pytest.approx(2.0)
    assert split.after_hours == pytest.approx(2.0)
    assert split.business_hours == 0
    assert split.minimum_applied == 0
    assert split.hours_type == HoursType.AFTER


def test_minimum_applied_to_short_business_job():
    split = calculate_hours_split("09:00", "09:30", 2)

    assert split.total_hours == pytest.approx(0.5)
    assert split.billable_hours == pytest.approx(2.0)
    assert split.minimum_applied == pytest.approx(1.5)
    assert split.business_hours == pytest.approx(2.0)


@pytest.mark.parametrize(
    "start,end,business,after,hours_type",
    [
        ("16:00", "18:00", 1.0, 1.0, HoursType.MIXED),
        ("07:00", "09:00", 1.0, 1.0, HoursType.MIXED),
        ("08:00", "17:00", 9.0, 0.0, HoursType.BUSINESS),
        ("17:00", "19:00", 0.0, 2.0, HoursType.AFTER),
        ("06:00", "08:00", 0.0, 2.0, HoursType.AFTER),
        ("16:00", "09:00", 2.0, 15.0, HoursType.MIXED),
    ],
)
def test_split_at_business_window_edges(start, end, business, after, hours_type):
    split = calculate_hours_split(start, end, 0)

    assert split.scheduled_business_hours == pytest.approx(business)
    assert split.after_hours == pytest.approx(after)
    assert split.hours_type == hours_type


def test_zero_span_is_all_minimum():
    split = calculate_hours_split("10:00", "10:00", 2)

    assert split.total_hours == 0
    assert split.billable_hours == pytest.approx(2.0)
    assert split.minimum_applied == pytest.approx(2.0)
    assert split.hours_type == HoursType.BUSINESS


def test_billable_hours_never_below_total():
    split = calculate_hours_split("08:00", "16:00", 2)

    assert split.billable_hours == pytest.approx(split.total_hours)
    assert split.business_hours + split.after_hours == pytest.approx(split.billable_hours)


@pytest.mark.parametrize("minimum", [None, "", "abc", float("nan")])
def test_unusable_minimum_falls_back_to_two_hours(minimum):
    split = calculate_hours_split("09:00", "09:30", minimum)

    assert split.billable_hours == pytest.approx(2.0)


def test_zero_minimum_bills_actual_time():
    split = calculate_hours_split("09:00", "09:30", 0)

    assert split.billable_hours == pytest.approx(0.5)
    assert split.minimum_applied == 0


def test_unparsable_time_does_not_raise():
    split = calculate_hours_split("garbage", "09:00", 2)

    assert split.total_hours == pytest.approx(9.0)


def test_calculators_agree_on_quarter_hour_grid():
    minute = MinuteByMinuteCalculator()
    interval = IntervalCalculator()

    for start in range(0, 1440, 15):
        for end in range(0, 1440, 15):
            total = end - start if end >= start else 1440 - start + end
            assert interval.split_minutes(start, total) == minute.split_minutes(start, total), (start, end)


@pytest.mark.parametrize("start", [479, 480, 481, 1019, 1020, 1021, 0, 1439])
@pytest.mark.parametrize("total", [0, 1, 59, 60, 540, 541, 1439])
def test_calculators_agree_on_boundary_minutes(start, total):
    assert IntervalCalculator().split_minutes(start, total) == MinuteByMinuteCalculator().split_minutes(start, total)


def test_explicit_calculator_is_used():
    split = calculate_hours_split("16:30", "18:00", 0, calculator=MinuteByMinuteCalculator())

    assert split.scheduled_business_hours == pytest.approx(0.5)
    assert split.after_hours == pytest.approx(1.0)


def test_job_duration_in_hours():
    assert calculate_job_duration("09:00", "11:30") == pytest.approx(2.5)
    assert calculate_job_duration("22:00", "02:00") == pytest.approx(4.0)
    assert calculate_job_duration("10:00", "10:00") == 0
