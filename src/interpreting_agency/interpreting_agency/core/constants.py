"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60

# Business hours: 08:00 (inclusive) to 17:00 (exclusive), in minutes after midnight.
BUSINESS_START_MINUTE = 8 * 60
BUSINESS_END_MINUTE = 17 * 60

DEFAULT_MINIMUM_HOURS = 2.0

MIN_JOB_DURATION_MINUTES = 120
MAX_JOB_DURATION_MINUTES = 480

TIME_OPTION_STEP_MINUTES = 15
