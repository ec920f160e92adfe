from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_MINIMUM_HOURS
from ..core.enums import RecordStatus


@dataclass(frozen=True)
class Facility:
    """Domain entity: a client that is invoiced for jobs."""

    facility_id: int
    name: str
    status: RecordStatus = RecordStatus.PENDING
    rate_business_hours: Optional[float] = None
    rate_after_hours: Optional[float] = None
    rate_mileage: Optional[float] = None
    minimum_billable_hours: float = DEFAULT_MINIMUM_HOURS
    emergency_fee: Optional[float] = None
    holiday_fee: Optional[float] = None
    invoice_prefix: Optional[str] = None
    net_terms: int = 30
    physical_state: Optional[str] = None
    timezone: Optional[str] = None
