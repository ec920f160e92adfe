from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_MINIMUM_HOURS
from ..core.enums import RecordStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, optional_float
from .model import Interpreter
from .repository import InterpreterRepository


class MySQLInterpreterRepository(InterpreterRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, interpreter_id: int) -> Optional[Interpreter]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT interpreter_id, first_name, last_name, email, status, rate_business_hours,
                       rate_after_hours, rate_mileage, minimum_hours, state, timezone
                FROM interpreters
                WHERE interpreter_id=%s
                """,
                (int(interpreter_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            minimum = optional_float(r.get("minimum_hours"))
            return Interpreter(
                interpreter_id=int(r["interpreter_id"]),
                first_name=r["first_name"],
                last_name=r["last_name"],
                email=r["email"],
                status=RecordStatus(r["status"]),
                rate_business_hours=optional_float(r.get("rate_business_hours")),
                rate_after_hours=optional_float(r.get("rate_after_hours")),
                rate_mileage=optional_float(r.get("rate_mileage")),
                minimum_hours=DEFAULT_MINIMUM_HOURS if minimum is None else minimum,
                state=r.get("state"),
                timezone=r.get("timezone"),
            )
