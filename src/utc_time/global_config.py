"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only the policy
constants that the parser, the conversion engine and the CLI share.
"""

# Core Names
PROJECT_NAME = "utc-time"
PACKAGE_NAME = "utc_time"

# Local civil zone. Brisbane observes no daylight saving, so every local
# wall-clock time maps to exactly one UTC instant.
LOCAL_TZ = "Australia/Brisbane"
LOCAL_LABEL = "Brisbane"

# Two-digit years below the pivot land in the 2000s, the rest in the 1900s.
TWO_DIGIT_YEAR_PIVOT = 69
