from __future__ import annotations

from ...core.constants import BUSINESS_END_MINUTE, BUSINESS_START_MINUTE, MINUTES_PER_DAY
from .base import HoursSplitCalculator


class IntervalCalculator(HoursSplitCalculator):
    """Closed-form rule: overlap of the span with each day's business window.

    Same result as :class:`MinuteByMinuteCalculator` for any span shorter than
    two days; job spans are always under one.
    """

    def split_minutes(self, start_minute: int, total_minutes: int) -> tuple[int, int]:
        total = max(int(total_minutes), 0)
        start = int(start_minute) % MINUTES_PER_DAY
        end = start + total

        business = 0
        for day in (0, 1):
            window_start = BUSINESS_START_MINUTE + day * MINUTES_PER_DAY
            window_end = BUSINESS_END_MINUTE + day * MINUTES_PER_DAY
            business += max(0, min(end, window_end) - max(start, window_start))

        return business, total - business
