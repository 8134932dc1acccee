"""Configuration constants for the forecast engine."""

# 16-point compass, clockwise from north
COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]
COMPASS_SECTOR_DEG = 22.5

# Levels a paraglider can actually reach: 1000 hPa (~100m) to 850 hPa (~1500m).
# 700 hPa is jet stream territory and is always windy.
FLYABLE_PRESSURE_MIN = 850
FLYABLE_PRESSURE_MAX = 1000

# Lapse rate (°C/km)
LAPSE_RATE_LOWER_LEVEL = 925
LAPSE_RATE_UPPER_LEVEL = 700
STANDARD_LAPSE_RATE = 6.5
STRONG_LAPSE_RATE = 9.0

# Cloudbase rises 1000ft per 2.5°C of temperature/dewpoint spread
CLOUDBASE_SPREAD_PER_1000FT = 2.5

# Unit conversion
M_TO_FT = 3.28084

# Daylight window (local hours, inclusive)
DAYLIGHT_START_HOUR = 8
DAYLIGHT_END_HOUR = 18

# Day aggregation
TOP_N_HOURS = 3
BEST_WINDOW_MIN_SCORE = 3
DEFAULT_DETAILED_DAYS = 3
BEST_WINDOW_FORMAT = "%a %H:%M"

# Flyability score range
MIN_SCORE = 1
MAX_SCORE = 5

# Display units for wind speed
SUPPORTED_UNITS = ["mph", "kph", "knots", "ms"]
DEFAULT_UNITS = "mph"
