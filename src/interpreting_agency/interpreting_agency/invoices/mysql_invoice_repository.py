from __future__ import annotations

from typing import Optional

from ..core.enums import BillStatus, InvoiceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, optional_float
from .model import InterpreterBill, Invoice
from .repository import InterpreterBillRepository, InvoiceRepository


class MySQLInvoiceRepository(InvoiceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_job(self, job_id: int) -> Optional[Invoice]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT invoice_id, invoice_number, facility_id, job_id, status, total,
                       issued_date, due_date, paid_date
                FROM invoices
                WHERE job_id=%s
                ORDER BY invoice_id DESC
                LIMIT 1
                """,
                (int(job_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Invoice(
                invoice_id=int(r["invoice_id"]),
                invoice_number=r.get("invoice_number"),
                facility_id=int(r["facility_id"]),
                job_id=int(r["job_id"]) if r.get("job_id") else None,
                status=InvoiceStatus(r["status"]),
                total=optional_float(r.get("total")) or 0.0,
                issued_date=r.get("issued_date"),
                due_date=r.get("due_date"),
                paid_date=r.get("paid_date"),
            )

    def create_draft(self, *, facility_id: int, job_id: int, total: float) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO invoices(facility_id, job_id, status, total) VALUES(%s,%s,%s,%s)",
                (int(facility_id), int(job_id), InvoiceStatus.DRAFT.value, round(float(total), 2)),
            )
            return int(cur.lastrowid)


class MySQLInterpreterBillRepository(InterpreterBillRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_job(self, job_id: int) -> Optional[InterpreterBill]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT bill_id, interpreter_id, job_id, status, hours_amount, mileage_amount,
                       expenses_amount, total
                FROM interpreter_bills
                WHERE job_id=%s
                ORDER BY bill_id DESC
                LIMIT 1
                """,
                (int(job_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return InterpreterBill(
                bill_id=int(r["bill_id"]),
                interpreter_id=int(r["interpreter_id"]),
                job_id=int(r["job_id"]),
                status=BillStatus(r["status"]),
                hours_amount=optional_float(r.get("hours_amount")) or 0.0,
                mileage_amount=optional_float(r.get("mileage_amount")) or 0.0,
                expenses_amount=optional_float(r.get("expenses_amount")) or 0.0,
                total=optional_float(r.get("total")) or 0.0,
            )

    def create_queued(
        self,
        *,
        interpreter_id: int,
        job_id: int,
        hours_amount: float,
        mileage_amount: float,
        expenses_amount: float,
        total: float,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO interpreter_bills(
                    interpreter_id, job_id, status, hours_amount, mileage_amount, expenses_amount, total
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(interpreter_id),
                    int(job_id),
                    BillStatus.QUEUED.value,
                    round(float(hours_amount), 2),
                    round(float(mileage_amount), 2),
                    round(float(expenses_amount), 2),
                    round(float(total), 2),
                ),
            )
            return int(cur.lastrowid)
