from __future__ import annotations

from ...core.constants import BUSINESS_END_MINUTE, BUSINESS_START_MINUTE, MINUTES_PER_DAY
from .base import HoursSplitCalculator


class MinuteByMinuteCalculator(HoursSplitCalculator):
    """Reference rule: classify every minute of the span on its own."""

    def split_minutes(self, start_minute: int, total_minutes: int) -> tuple[int, int]:
        business = 0
        after = 0
        for i in range(max(int(total_minutes), 0)):
            minute = (start_minute + i) % MINUTES_PER_DAY
            if BUSINESS_START_MINUTE <= minute < BUSINESS_END_MINUTE:
                business += 1
            else:
                after += 1
        return business, after
