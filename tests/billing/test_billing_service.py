from __future__ import annotations

import pytest

from conftest import (
    FakeBillsRepo,
    FakeFacilitiesRepo,
    FakeInterpretersRepo,
    FakeInvoicesRepo,
    FakeJobsRepo,
    make_facility,
    make_interpreter,
    make_job,
)

from src.interpreting_agency.interpreting_agency.billing.service import (
    BillingService,
    effective_minimum_hours,
    resolve_rates,
)
from src.interpreting_agency.interpreting_agency.core.enums import BillStatus, InvoiceStatus, JobStatus
from src.interpreting_agency.interpreting_agency.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.interpreting_agency.interpreting_agency.jobs.service import JobService


def _service(*jobs, facility=None, interpreter=None):
    jobs_repo = FakeJobsRepo(jobs or [make_job()])
    invoices = FakeInvoicesRepo()
    bills = FakeBillsRepo()
    svc = BillingService(
        jobs_repo,
        FakeFacilitiesRepo([facility or make_facility()]),
        FakeInterpretersRepo([interpreter or make_interpreter()]),
        invoices,
        bills,
    )
    return svc, jobs_repo, invoices, bills


def test_resolve_rates_falls_back_to_defaults():
    rates = resolve_rates(make_job(), make_facility(), make_interpreter())

    assert rates.facility_business_rate == 50
    assert rates.facility_after_hours_rate == 75
    assert rates.interpreter_business_rate == 40
    assert rates.interpreter_mileage_rate == pytest.approx(0.4)
    assert rates.facility_rate_adjustment == 0


def test_resolve_rates_prefers_job_overrides_including_zero():
    job = make_job(facility_rate_business=0, interpreter_rate_after_hours=70, interpreter_rate_adjustment=2.5)

    rates = resolve_rates(job, make_facility(), make_interpreter())

    assert rates.facility_business_rate == 0
    assert rates.interpreter_after_hours_rate == 70
    assert rates.interpreter_business_rate == 40
    assert rates.interpreter_rate_adjustment == 2.5


def test_resolve_rates_without_records_is_zero():
    rates = resolve_rates(make_job(interpreter_id=None), None, None)

    assert rates.facility_business_rate == 0
    assert rates.interpreter_after_hours_rate == 0


def test_effective_minimum_is_the_larger_of_both():
    assert effective_minimum_hours(make_facility(), make_interpreter(minimum_hours=3)) == 3
    assert effective_minimum_hours(make_facility(minimum_billable_hours=4), make_interpreter()) == 4
    assert effective_minimum_hours(None, None) == 2


def test_preview_from_form_values():
    svc, *_ = _service()

    preview = svc.preview(
        {
            "start_time": "9:00:00",
            "end_time": "11:00",
            "minimum_hours": "3",
            "facility_rate_business": "50",
            "interpreter_rate_business": 40,
            "mileage": "abc",
        }
    )

    assert preview.start_time == "09:00"
    assert preview.hours_split.billable_hours == pytest.approx(3.0)
    assert preview.totals.facility_total == pytest.approx(150)
    assert preview.totals.interpreter_total == pytest.approx(120)
    assert preview.totals.mileage == 0


def test_preview_without_usable_times_is_none():
    svc, *_ = _service()

    assert svc.preview({"start_time": "", "end_time": "10:00"}) is None
    assert svc.preview({"start_time": "25:00", "end_time": "10:00"}) is None


def test_preview_ignores_unknown_keys():
    svc, *_ = _service()

    preview = svc.preview({"self": 1, "values": 2, "start_time": "09:00", "end_time": "10:00"})

    assert preview.hours_split.billable_hours == pytest.approx(2.0)


def test_preview_job_uses_facility_minimum():
    svc, *_ = _service(
        make_job(start_time="09:00", end_time="10:00"),
        facility=make_facility(minimum_billable_hours=3),
    )

    preview = svc.preview_job(1)

    assert preview.minimum_hours == 3
    assert preview.hours_split.billable_hours == pytest.approx(3.0)
    assert preview.job_id == 1


def test_preview_job_unknown_job():
    svc, *_ = _service()

    with pytest.raises(NotFoundError):
        svc.preview_job(99)


def test_generate_billing_creates_invoice_and_bill():
    svc, jobs_repo, invoices, bills = _service(make_job(mileage=10, parking=5))

    result = svc.generate_billing(1)

    invoice = invoices.invoices[result.invoice_id]
    bill = bills.bills[result.bill_id]
    assert invoice.status == InvoiceStatus.DRAFT
    assert invoice.total == pytest.approx(150 + 5 + 5)
    assert bill.status == BillStatus.QUEUED
    assert bill.hours_amount == pytest.approx(120)
    assert bill.mileage_amount == pytest.approx(4)
    assert bill.expenses_amount == pytest.approx(5)
    assert bill.total == pytest.approx(129)

    job = jobs_repo.get_by_id(1)
    assert job.status == JobStatus.READY_TO_BILL
    assert job.billable_hours == pytest.approx(3.0)
    assert jobs_repo.saved_totals[1].facility_billable_total == pytest.approx(160)


def test_generate_billing_includes_travel_in_hours_amount():
    svc, _, _, bills = _service(make_job(travel_time_hours=1))

    result = svc.generate_billing(1)

    assert bills.bills[result.bill_id].hours_amount == pytest.approx(120 + 40)


def test_generate_billing_refuses_duplicates():
    svc, *_ = _service()
    svc.generate_billing(1)

    with pytest.raises(ValidationError):
        # status moved on to ready_to_bill
        svc.generate_billing(1)


def test_generate_billing_refuses_existing_invoice():
    svc, _, invoices, _ = _service()
    invoices.create_draft(facility_id=1, job_id=1, total=10)

    with pytest.raises(ConflictError):
        svc.generate_billing(1)


@pytest.mark.parametrize(
    "job,message",
    [
        (make_job(status=JobStatus.PAID), "locked"),
        (make_job(status=JobStatus.CONFIRMED), "completed"),
        (make_job(interpreter_id=None), "interpreter"),
    ],
)
def test_generate_billing_validation(job, message):
    svc, *_ = _service(job)

    with pytest.raises(ValidationError, match=message):
        svc.generate_billing(1)


def test_generate_billing_unknown_job():
    svc, *_ = _service()

    with pytest.raises(NotFoundError):
        svc.generate_billing(42)


def test_generate_billing_missing_interpreter_record():
    svc, *_ = _service(make_job(interpreter_id=8))

    with pytest.raises(NotFoundError, match="Interpreter"):
        svc.generate_billing(1)


def test_generate_billing_keeps_confirmed_billable_hours():
    jobs_repo = FakeJobsRepo(
        [make_job(status=JobStatus.OUTREACH_IN_PROGRESS, interpreter_id=None, start_time="09:00", end_time="10:00")]
    )
    facilities = FakeFacilitiesRepo([make_facility()])
    interpreters = FakeInterpretersRepo([make_interpreter(minimum_hours=3)])
    job_service = JobService(jobs_repo, facilities, interpreters)
    billing = BillingService(jobs_repo, facilities, interpreters, FakeInvoicesRepo(), FakeBillsRepo())

    assert job_service.confirm_interpreter(job_id=1, interpreter_id=7) == 3
    jobs_repo.update_status(job_ids=[1], status=JobStatus.COMPLETE)
    result = billing.generate_billing(1)

    assert result.totals.billable_hours == 3
    assert jobs_repo.get_by_id(1).billable_hours == 3
    assert jobs_repo.saved_totals[1].billable_hours == 3


def test_generate_billing_without_confirmed_hours_uses_split():
    svc, jobs_repo, *_ = _service(make_job(start_time="09:00", end_time="10:00", billable_hours=None))

    svc.generate_billing(1)

    assert jobs_repo.get_by_id(1).billable_hours == pytest.approx(2.0)


def test_trilingual_uplift_raises_facility_hourly_rates_only():
    job = make_job(start_time="16:00", end_time="18:00", trilingual_rate_uplift=10)
    svc, _, invoices, bills = _service(job)

    preview = svc.preview_job(1)
    result = svc.generate_billing(1)

    assert preview.totals.facility_business_rate == pytest.approx(60)
    assert preview.totals.facility_after_hours_rate == pytest.approx(85)
    assert preview.totals.facility_trilingual_uplift == 10
    assert invoices.invoices[result.invoice_id].total == pytest.approx(60 + 85)
    assert bills.bills[result.bill_id].total == pytest.approx(40 + 60)


def test_resolve_rates_carries_trilingual_uplift():
    rates = resolve_rates(make_job(trilingual_rate_uplift="7.5"), make_facility(), make_interpreter())

    assert rates.facility_trilingual_uplift == 7.5
    assert resolve_rates(make_job(), make_facility(), make_interpreter()).facility_trilingual_uplift == 0


def test_preview_form_trilingual_uplift():
    svc, *_ = _service()

    preview = svc.preview(
        {"start_time": "09:00", "end_time": "11:00", "facility_rate_business": 50, "trilingual_rate_uplift": 5}
    )

    assert preview.totals.facility_total == pytest.approx(110)
