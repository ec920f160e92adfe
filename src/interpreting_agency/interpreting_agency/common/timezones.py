"""US state → IANA timezone lookup used to default a job/facility timezone.

Some states span two zones (FL, IN, KY, TN, TX, KS, NE, ND, SD, ID, OR, NV);
the mapping picks the majority zone and border locations are edited by hand.
"""

from __future__ import annotations

from typing import Optional

EASTERN = "America/New_York"
CENTRAL = "America/Chicago"
MOUNTAIN = "America/Denver"
PACIFIC = "America/Los_Angeles"

STATE_TIMEZONES: dict[str, str] = {
    # Eastern
    "CT": EASTERN, "DE": EASTERN, "DC": EASTERN, "FL": EASTERN, "GA": EASTERN,
    "IN": "America/Indiana/Indianapolis", "KY": EASTERN, "ME": EASTERN, "MD": EASTERN,
    "MA": EASTERN, "MI": "America/Detroit", "NH": EASTERN, "NJ": EASTERN, "NY": EASTERN,
    "NC": EASTERN, "OH": EASTERN, "PA": EASTERN, "RI": EASTERN, "SC": EASTERN,
    "VT": EASTERN, "VA": EASTERN, "WV": EASTERN,
    # Central
    "AL": CENTRAL, "AR": CENTRAL, "IL": CENTRAL, "IA": CENTRAL, "KS": CENTRAL,
    "LA": CENTRAL, "MN": CENTRAL, "MS": CENTRAL, "MO": CENTRAL, "NE": CENTRAL,
    "ND": CENTRAL, "OK": CENTRAL, "SD": CENTRAL, "TN": CENTRAL, "TX": CENTRAL,
    "WI": CENTRAL,
    # Mountain
    "AZ": "America/Phoenix", "CO": MOUNTAIN, "ID": "America/Boise", "MT": MOUNTAIN,
    "NM": MOUNTAIN, "UT": MOUNTAIN, "WY": MOUNTAIN,
    # Pacific
    "CA": PACIFIC, "NV": PACIFIC, "OR": PACIFIC, "WA": PACIFIC,
    "AK": "America/Anchorage",
    "HI": "America/Honolulu",
    # Territories
    "PR": "America/Puerto_Rico", "VI": "America/Virgin", "GU": "Pacific/Guam",
    "AS": "Pacific/Pago_Pago", "MP": "Pacific/Guam",
}

TIMEZONE_DISPLAY_NAMES: dict[str, str] = {
    EASTERN: "Eastern Time (ET)",
    "America/Indiana/Indianapolis": "Eastern Time (ET)",
    "America/Detroit": "Eastern Time (ET)",
    CENTRAL: "Central Time (CT)",
    MOUNTAIN: "Mountain Time (MT)",
    "America/Boise": "Mountain Time (MT)",
    "America/Phoenix": "Arizona Time (MST - No DST)",
    PACIFIC: "Pacific Time (PT)",
    "America/Anchorage": "Alaska Time (AKT)",
    "America/Honolulu": "Hawaii Time (HT)",
    "America/Puerto_Rico": "Atlantic Time (AT)",
    "America/Virgin": "Atlantic Time (AT)",
    "Pacific/Guam": "Chamorro Time (ChST)",
    "Pacific/Pago_Pago": "Samoa Time (SST)",
}

TIMEZONE_OPTIONS: list[dict] = [
    {"value": tz, "label": TIMEZONE_DISPLAY_NAMES[tz]}
    for tz in (
        EASTERN,
        CENTRAL,
        MOUNTAIN,
        "America/Phoenix",
        PACIFIC,
        "America/Anchorage",
        "America/Honolulu",
        "America/Puerto_Rico",
        "Pacific/Guam",
        "Pacific/Pago_Pago",
    )
]


def timezone_from_state(state_code: Optional[str]) -> Optional[str]:
    if not state_code:
        return None
    return STATE_TIMEZONES.get(state_code.strip().upper())


def timezone_display_name(timezone: Optional[str]) -> str:
    if not timezone:
        return ""
    return TIMEZONE_DISPLAY_NAMES.get(timezone, timezone)
