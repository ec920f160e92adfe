from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Dict, Optional, Sequence

from ..core.enums import JobStatus, LocationType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time, optional_float
from .model import BillingTotals, Job, JobDraft
from .repository import JobRepository

_JOB_COLUMNS = """
    job_id, job_number, facility_id, interpreter_id, job_date, start_time, end_time,
    status, location_type, deaf_client_name, location_address, location_city,
    location_state, location_zip, timezone,
    facility_rate_business, facility_rate_after_hours, facility_rate_mileage, facility_rate_adjustment,
    interpreter_rate_business, interpreter_rate_after_hours, interpreter_rate_mileage,
    interpreter_rate_adjustment,
    trilingual_rate_uplift,
    mileage, travel_time_hours, parking, tolls, misc_fee,
    billable_hours, emergency_fee_applied, holiday_fee_applied, internal_notes
"""

_RATE_AND_EXPENSE_FIELDS = (
    "facility_rate_business",
    "facility_rate_after_hours",
    "facility_rate_mileage",
    "facility_rate_adjustment",
    "interpreter_rate_business",
    "interpreter_rate_after_hours",
    "interpreter_rate_mileage",
    "interpreter_rate_adjustment",
    "trilingual_rate_uplift",
    "mileage",
    "travel_time_hours",
    "parking",
    "tolls",
    "misc_fee",
    "billable_hours",
)


def _row_to_job(r: Dict[str, Any]) -> Job:
    return Job(
        job_id=int(r["job_id"]),
        job_number=r.get("job_number"),
        facility_id=int(r["facility_id"]),
        interpreter_id=int(r["interpreter_id"]) if r.get("interpreter_id") else None,
        job_date=r["job_date"],
        start_time=normalize_mysql_time(r["start_time"]),
        end_time=normalize_mysql_time(r["end_time"]),
        status=JobStatus(r["status"]),
        location_type=LocationType(r.get("location_type") or LocationType.IN_PERSON.value),
        deaf_client_name=r.get("deaf_client_name"),
        location_address=r.get("location_address"),
        location_city=r.get("location_city"),
        location_state=r.get("location_state"),
        location_zip=r.get("location_zip"),
        timezone=r.get("timezone"),
        emergency_fee_applied=bool(r.get("emergency_fee_applied")),
        holiday_fee_applied=bool(r.get("holiday_fee_applied")),
        internal_notes=r.get("internal_notes"),
        **{field: optional_float(r.get(field)) for field in _RATE_AND_EXPENSE_FIELDS},
    )


class MySQLJobRepository(JobRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, job_id: int) -> Optional[Job]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_JOB_COLUMNS} FROM jobs WHERE job_id=%s", (int(job_id),))
            r = fetchone(cur)
            return _row_to_job(r) if r else None

    def create(self, draft: JobDraft) -> int:
        year = draft.job_date.year
        with db_cursor(self._conn_factory) as (_, cur):
            # Job numbers run per year: YYYY-00001, YYYY-00002, ...
            cur.execute(
                """
                SELECT COALESCE(MAX(CAST(SUBSTRING(job_number, 6) AS UNSIGNED)), 0) AS last_seq
                FROM jobs
                WHERE job_number LIKE %s
                FOR UPDATE
                """,
                (f"{year}-%",),
            )
            r = fetchone(cur)
            next_seq = int(r["last_seq"] if r else 0) + 1

            cur.execute(
                """
                INSERT INTO jobs(
                    job_number, facility_id, job_date, start_time, end_time, status, location_type,
                    deaf_client_name, location_address, location_city, location_state, location_zip,
                    timezone, client_contact_phone, client_contact_email, internal_notes
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    f"{year}-{next_seq:05d}",
                    int(draft.facility_id),
                    draft.job_date,
                    draft.start_time,
                    draft.end_time,
                    JobStatus.NEW.value,
                    draft.location_type.value,
                    draft.deaf_client_name,
                    draft.location_address,
                    draft.location_city,
                    draft.location_state,
                    draft.location_zip,
                    draft.timezone,
                    draft.client_contact_phone,
                    draft.client_contact_email,
                    draft.internal_notes,
                ),
            )
            return int(cur.lastrowid)

    def list_confirmed_ending_by(self, *, today: date, current_time: str) -> Sequence[Job]:
        # Overnight jobs (end before start) finish on the day after job_date.
        yesterday = today - timedelta(days=1)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_JOB_COLUMNS}
                FROM jobs
                WHERE status=%s
                  AND (
                    (end_time >= start_time AND (job_date < %s OR (job_date = %s AND end_time <= %s)))
                    OR (end_time < start_time AND (job_date < %s OR (job_date = %s AND end_time <= %s)))
                  )
                ORDER BY job_date, end_time
                """,
                (JobStatus.CONFIRMED.value, today, today, current_time, yesterday, yesterday, current_time),
            )
            return [_row_to_job(r) for r in fetchall(cur)]

    def update_status(self, *, job_ids: Sequence[int], status: JobStatus) -> int:
        ids = [int(i) for i in job_ids]
        if not ids:
            return 0
        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE jobs SET status=%s WHERE job_id IN ({placeholders})",
                (status.value, *ids),
            )
            return cur.rowcount

    def assign_interpreter(self, *, job_id: int, interpreter_id: int, billable_hours: float) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE jobs
                SET interpreter_id=%s, status=%s, billable_hours=%s
                WHERE job_id=%s
                """,
                (int(interpreter_id), JobStatus.CONFIRMED.value, float(billable_hours), int(job_id)),
            )
            return cur.rowcount > 0

    def save_billing_totals(self, *, job_id: int, totals: BillingTotals, status: JobStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE jobs
                SET billable_hours=%s,
                    facility_hourly_total=%s,
                    facility_billable_total=%s,
                    interpreter_hourly_total=%s,
                    interpreter_billable_total=%s,
                    status=%s
                WHERE job_id=%s
                """,
                (
                    totals.billable_hours,
                    totals.facility_hourly_total,
                    totals.facility_billable_total,
                    totals.interpreter_hourly_total,
                    totals.interpreter_billable_total,
                    status.value,
                    int(job_id),
                ),
            )
            return cur.rowcount > 0
