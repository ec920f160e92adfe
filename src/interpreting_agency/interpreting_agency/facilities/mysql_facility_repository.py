from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_MINIMUM_HOURS
from ..core.enums import RecordStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, optional_float
from .model import Facility
from .repository import FacilityRepository


class MySQLFacilityRepository(FacilityRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, facility_id: int) -> Optional[Facility]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT facility_id, name, status, rate_business_hours, rate_after_hours, rate_mileage,
                       minimum_billable_hours, emergency_fee, holiday_fee, invoice_prefix, net_terms,
                       physical_state, timezone
                FROM facilities
                WHERE facility_id=%s
                """,
                (int(facility_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            minimum = optional_float(r.get("minimum_billable_hours"))
            return Facility(
                facility_id=int(r["facility_id"]),
                name=r["name"],
                status=RecordStatus(r["status"]),
                rate_business_hours=optional_float(r.get("rate_business_hours")),
                rate_after_hours=optional_float(r.get("rate_after_hours")),
                rate_mileage=optional_float(r.get("rate_mileage")),
                minimum_billable_hours=DEFAULT_MINIMUM_HOURS if minimum is None else minimum,
                emergency_fee=optional_float(r.get("emergency_fee")),
                holiday_fee=optional_float(r.get("holiday_fee")),
                invoice_prefix=r.get("invoice_prefix"),
                net_terms=int(r.get("net_terms") or 30),
                physical_state=r.get("physical_state"),
                timezone=r.get("timezone"),
            )
