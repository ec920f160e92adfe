from __future__ import annotations

from abc import ABC, abstractmethod


class HoursSplitCalculator(ABC):
    """Calculator interface (Strategy Pattern for the business/after-hours split)."""

    @abstractmethod
    def split_minutes(self, start_minute: int, total_minutes: int) -> tuple[int, int]:
        """Return ``(business_minutes, after_minutes)`` for a span.

        ``start_minute`` is minutes after midnight; the span may run past
        midnight (``start_minute + total_minutes`` above one day).
        """
        raise NotImplementedError
