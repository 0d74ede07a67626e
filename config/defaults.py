"""Default configuration constants for the Attendance Tracker."""

# Event types
CHECK_IN_TYPE = "in"
CHECK_OUT_TYPE = "out"
EVENT_TYPES = [CHECK_IN_TYPE, CHECK_OUT_TYPE]

# Day splitting
MINUTES_PER_DAY = 1440

# Calendar policy (weekday numbers follow date.weekday(): 0=Mon ... 6=Sun)
# Defaults match the facility's locale: weeks start on Sunday and
# week 1 is the week containing January 1st.
DEFAULT_FIRST_WEEKDAY = 6
DEFAULT_FIRST_WEEK_MIN_DAYS = 1
DEFAULT_WEEKEND_DAYS = (5, 6)

# Key formats
DAY_KEY_FORMAT = "%Y-%m-%d"
MONTH_KEY_FORMAT = "%Y-%m"

# Record keeping
RECENT_RECORDS_DAYS = 7
PERIOD_FETCH_MARGIN_DAYS = 1  # Widen period lookups by this many days each side

# Period options for the dashboard
PERIOD_TYPES = ["Week", "Month", "Custom"]
DEFAULT_PERIOD_TYPE = "Month"

# Logging
LOG_LEVEL = "INFO"
LOG_LEVEL_ENV_VAR = "ATTENDANCE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
