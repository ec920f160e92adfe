"""Time-of-day helpers for job scheduling.

Job times travel as "HH:MM" strings. MySQL TIME columns, CSV imports and form
posts hand us other shapes ("9:00", "09:00:00", "09:00:00.000"), so everything
is funnelled through :func:`normalize_time_to_hhmm` first.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from ..core.constants import (
    MAX_JOB_DURATION_MINUTES,
    MIN_JOB_DURATION_MINUTES,
    MINUTES_PER_DAY,
    TIME_OPTION_STEP_MINUTES,
)

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2})(?:\.\d+)?)?$")
_CANONICAL_RE = re.compile(r"^\d{2}:\d{2}$")


def normalize_time_to_hhmm(value: Any) -> str:
    """Coerce a time value to zero-padded "HH:MM".

    Returns "" for None, non-strings, blank strings and anything that is not a
    valid time of day. Seconds and fractional seconds are dropped.
    """
    if not isinstance(value, str):
        return ""

    m = _TIME_RE.match(value.strip())
    if not m:
        return ""

    hours = int(m.group(1))
    minutes = int(m.group(2))
    seconds = int(m.group(3)) if m.group(3) else 0
    if hours > 23 or minutes > 59 or seconds > 59:
        return ""
    return f"{hours:02d}:{minutes:02d}"


def is_valid_time_format(value: Optional[str]) -> bool:
    """True only for an already canonical "HH:MM" string."""
    if not isinstance(value, str) or not _CANONICAL_RE.match(value):
        return False
    return normalize_time_to_hhmm(value) == value


def needs_time_normalization(value: Optional[str]) -> bool:
    """True when ``value`` parses as a time but is not canonical yet.

    Canonical values and unparsable values both return False.
    """
    if not isinstance(value, str) or not value:
        return False
    normalized = normalize_time_to_hhmm(value)
    return bool(normalized) and normalized != value


def parse_time_to_minutes(value: Any) -> Optional[int]:
    """Minutes after midnight, or None when ``value`` is not a time."""
    normalized = normalize_time_to_hhmm(value)
    if not normalized:
        return None
    hours, minutes = normalized.split(":")
    return int(hours) * 60 + int(minutes)


def minutes_to_hhmm(total_minutes: int) -> str:
    total_minutes = int(total_minutes) % MINUTES_PER_DAY
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def span_minutes(start_minutes: int, end_minutes: int) -> int:
    """Length of a start→end span; an end before the start crosses midnight."""
    if end_minutes >= start_minutes:
        return end_minutes - start_minutes
    return (MINUTES_PER_DAY - start_minutes) + end_minutes


def calculate_duration_minutes(start_time: str, end_time: str) -> int:
    start = parse_time_to_minutes(start_time) or 0
    end = parse_time_to_minutes(end_time) or 0
    return span_minutes(start, end)


def calculate_end_time(start_time: str, duration_minutes: int) -> str:
    start = parse_time_to_minutes(start_time) or 0
    return minutes_to_hhmm(start + int(duration_minutes))


def is_valid_job_duration(start_time: str, end_time: str) -> bool:
    duration = calculate_duration_minutes(start_time, end_time)
    return MIN_JOB_DURATION_MINUTES <= duration <= MAX_JOB_DURATION_MINUTES


def clamp_duration(start_time: str, end_time: str) -> str:
    """Return an end time that keeps the job inside the allowed length window."""
    duration = calculate_duration_minutes(start_time, end_time)
    if MIN_JOB_DURATION_MINUTES <= duration <= MAX_JOB_DURATION_MINUTES:
        return end_time

    clamped = max(MIN_JOB_DURATION_MINUTES, min(MAX_JOB_DURATION_MINUTES, duration))
    return calculate_end_time(start_time, clamped)


def format_time_for_display(value: Optional[str]) -> str:
    """Render "13:05" as "1:05 PM"; "-" when there is nothing to show."""
    minutes = parse_time_to_minutes(value)
    if minutes is None:
        return "-" if not value else str(value)

    hours, mins = divmod(minutes, 60)
    hour12 = 12 if hours == 0 else hours - 12 if hours > 12 else hours
    ampm = "AM" if hours < 12 else "PM"
    return f"{hour12}:{mins:02d} {ampm}"


def generate_time_options() -> list[dict]:
    options: list[dict] = []
    for minutes in range(0, MINUTES_PER_DAY, TIME_OPTION_STEP_MINUTES):
        value = minutes_to_hhmm(minutes)
        options.append({"value": value, "label": format_time_for_display(value)})
    return options


def generate_duration_options() -> list[dict]:
    options: list[dict] = []
    for minutes in range(MIN_JOB_DURATION_MINUTES, MAX_JOB_DURATION_MINUTES + 1, TIME_OPTION_STEP_MINUTES):
        hours, mins = divmod(minutes, 60)
        label = f"{hours}h" if mins == 0 else f"{hours}h {mins}m"
        options.append({"value": minutes, "label": label})
    return options


TIME_OPTIONS = generate_time_options()
DURATION_OPTIONS = generate_duration_options()
