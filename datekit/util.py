"""Utility constants for datekit.

Time unit constants represent durations in milliseconds, the resolution of
an Instant.
"""

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60000
HOUR = 3600000
DAY = 86400000
WEEK = 604800000

# Largest distance from the epoch an Instant may hold (100,000,000 days)
MAX_MILLIS = 8_640_000_000_000_000
