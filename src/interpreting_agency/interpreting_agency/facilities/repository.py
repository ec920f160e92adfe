from __future__ import annotations

from typing import Optional, Protocol

from .model import Facility


class FacilityRepository(Protocol):
    def get_by_id(self, facility_id: int) -> Optional[Facility]:
        raise NotImplementedError
