from __future__ import annotations

from dataclasses import dataclass

from .billing.service import BillingService
from .core.constants import DEFAULT_MINIMUM_HOURS
from .database.connection import DBConfig, DatabaseConnection
from .facilities.mysql_facility_repository import MySQLFacilityRepository
from .facilities.repository import FacilityRepository
from .interpreters.mysql_interpreter_repository import MySQLInterpreterRepository
from .interpreters.repository import InterpreterRepository
from .invoices.mysql_invoice_repository import MySQLInterpreterBillRepository, MySQLInvoiceRepository
from .invoices.repository import InterpreterBillRepository, InvoiceRepository
from .jobs.mysql_job_repository import MySQLJobRepository
from .jobs.repository import JobRepository
from .jobs.service import JobService


@dataclass(frozen=True)
class Container:
    jobs_repo: JobRepository
    facilities_repo: FacilityRepository
    interpreters_repo: InterpreterRepository
    invoices_repo: InvoiceRepository
    bills_repo: InterpreterBillRepository

    job_service: JobService
    billing_service: BillingService


def build_services(
    *,
    jobs_repo: JobRepository,
    facilities_repo: FacilityRepository,
    interpreters_repo: InterpreterRepository,
    invoices_repo: InvoiceRepository,
    bills_repo: InterpreterBillRepository,
    default_minimum_hours: float = DEFAULT_MINIMUM_HOURS,
) -> Container:
    job_service = JobService(
        jobs_repo,
        facilities_repo,
        interpreters_repo,
        default_minimum_hours=default_minimum_hours,
    )
    billing_service = BillingService(
        jobs_repo,
        facilities_repo,
        interpreters_repo,
        invoices_repo,
        bills_repo,
        default_minimum_hours=default_minimum_hours,
    )
    return Container(
        jobs_repo=jobs_repo,
        facilities_repo=facilities_repo,
        interpreters_repo=interpreters_repo,
        invoices_repo=invoices_repo,
        bills_repo=bills_repo,
        job_service=job_service,
        billing_service=billing_service,
    )


def build_container(*, db_config: dict, default_minimum_hours: float = DEFAULT_MINIMUM_HOURS) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        jobs_repo=MySQLJobRepository(conn),
        facilities_repo=MySQLFacilityRepository(conn),
        interpreters_repo=MySQLInterpreterRepository(conn),
        invoices_repo=MySQLInvoiceRepository(conn),
        bills_repo=MySQLInterpreterBillRepository(conn),
        default_minimum_hours=default_minimum_hours,
    )
