from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime

import pytest

from src.interpreting_agency.interpreting_agency.container import build_services
from src.interpreting_agency.interpreting_agency.core.enums import JobStatus, RecordStatus
from src.interpreting_agency.interpreting_agency.facilities.model import Facility
from src.interpreting_agency.interpreting_agency.interpreters.model import Interpreter
from src.interpreting_agency.interpreting_agency.invoices.model import InterpreterBill, Invoice
from src.interpreting_agency.interpreting_agency.jobs.model import Job


class FakeJobsRepo:
    def __init__(self, jobs=()):
        self._jobs: dict[int, Job] = {j.job_id: j for j in jobs}
        self._next_id = max(self._jobs, default=0) + 1
        self.saved_totals = {}
        self.created_drafts = []

    def get_by_id(self, job_id):
        return self._jobs.get(int(job_id))

    def create(self, draft):
        job_id = self._next_id
        self._next_id += 1
        self.created_drafts.append(draft)
        self._jobs[job_id] = Job(
            job_id=job_id,
            job_number=f"{draft.job_date.year}-{job_id:05d}",
            facility_id=draft.facility_id,
            job_date=draft.job_date,
            start_time=draft.start_time,
            end_time=draft.end_time,
            location_type=draft.location_type,
            location_state=draft.location_state,
            timezone=draft.timezone,
        )
        return job_id

    def list_confirmed_ending_by(self, *, today, current_time):
        return [
            j
            for j in self._jobs.values()
            if j.status == JobStatus.CONFIRMED
            and j.job_date <= today  # coarse; the service checks the actual end
        ]

    def update_status(self, *, job_ids, status):
        for job_id in job_ids:
            self._jobs[job_id] = replace(self._jobs[job_id], status=status)
        return len(job_ids)

    def assign_interpreter(self, *, job_id, interpreter_id, billable_hours):
        job = self._jobs.get(int(job_id))
        if not job:
            return False
        self._jobs[job.job_id] = replace(
            job,
            interpreter_id=interpreter_id,
            status=JobStatus.CONFIRMED,
            billable_hours=billable_hours,
        )
        return True

    def save_billing_totals(self, *, job_id, totals, status):
        job = self._jobs[int(job_id)]
        self._jobs[job.job_id] = replace(job, status=status, billable_hours=totals.billable_hours)
        self.saved_totals[job.job_id] = totals
        return True


class FakeFacilitiesRepo:
    def __init__(self, facilities=()):
        self._facilities = {f.facility_id: f for f in facilities}

    def get_by_id(self, facility_id):
        return self._facilities.get(int(facility_id))


class FakeInterpretersRepo:
    def __init__(self, interpreters=()):
        self._interpreters = {i.interpreter_id: i for i in interpreters}

    def get_by_id(self, interpreter_id):
        return self._interpreters.get(int(interpreter_id))


class FakeInvoicesRepo:
    def __init__(self):
        self.invoices: dict[int, Invoice] = {}

    def get_for_job(self, job_id):
        return next((inv for inv in self.invoices.values() if inv.job_id == job_id), None)

    def create_draft(self, *, facility_id, job_id, total):
        invoice_id = len(self.invoices) + 1
        self.invoices[invoice_id] = Invoice(invoice_id=invoice_id, facility_id=facility_id, job_id=job_id, total=total)
        return invoice_id


class FakeBillsRepo:
    def __init__(self):
        self.bills: dict[int, InterpreterBill] = {}

    def get_for_job(self, job_id):
        return next((b for b in self.bills.values() if b.job_id == job_id), None)

    def create_queued(self, *, interpreter_id, job_id, hours_amount, mileage_amount, expenses_amount, total):
        bill_id = len(self.bills) + 1
        self.bills[bill_id] = InterpreterBill(
            bill_id=bill_id,
            interpreter_id=interpreter_id,
            job_id=job_id,
            hours_amount=hours_amount,
            mileage_amount=mileage_amount,
            expenses_amount=expenses_amount,
            total=total,
        )
        return bill_id


def make_facility(**overrides) -> Facility:
    values = dict(
        facility_id=1,
        name="General Hospital",
        status=RecordStatus.ACTIVE,
        rate_business_hours=50.0,
        rate_after_hours=75.0,
        rate_mileage=0.5,
        minimum_billable_hours=2.0,
    )
    values.update(overrides)
    return Facility(**values)


def make_interpreter(**overrides) -> Interpreter:
    values = dict(
        interpreter_id=7,
        first_name="Sam",
        last_name="Rivera",
        email="sam@example.com",
        status=RecordStatus.ACTIVE,
        rate_business_hours=40.0,
        rate_after_hours=60.0,
        rate_mileage=0.4,
        minimum_hours=2.0,
    )
    values.update(overrides)
    return Interpreter(**values)


def make_job(**overrides) -> Job:
    values = dict(
        job_id=1,
        job_number="2026-00001",
        facility_id=1,
        job_date=date(2026, 2, 2),
        start_time="09:00",
        end_time="12:00",
        status=JobStatus.COMPLETE,
        interpreter_id=7,
    )
    values.update(overrides)
    return Job(**values)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 14, 30, 0)


@pytest.fixture
def repos():
    return {
        "jobs_repo": FakeJobsRepo([make_job()]),
        "facilities_repo": FakeFacilitiesRepo([make_facility()]),
        "interpreters_repo": FakeInterpretersRepo([make_interpreter()]),
        "invoices_repo": FakeInvoicesRepo(),
        "bills_repo": FakeBillsRepo(),
    }


@pytest.fixture
def container(repos):
    return build_services(**repos)


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.interpreting_agency.interpreting_agency.main import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
