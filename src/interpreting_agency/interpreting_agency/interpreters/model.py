from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_MINIMUM_HOURS
from ..core.enums import RecordStatus


@dataclass(frozen=True)
class Interpreter:
    """Domain entity: an interpreter who is paid per job."""

    interpreter_id: int
    first_name: str
    last_name: str
    email: str
    status: RecordStatus = RecordStatus.PENDING
    rate_business_hours: Optional[float] = None
    rate_after_hours: Optional[float] = None
    rate_mileage: Optional[float] = None
    minimum_hours: float = DEFAULT_MINIMUM_HOURS
    state: Optional[str] = None
    timezone: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
