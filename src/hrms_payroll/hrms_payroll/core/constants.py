"""Constants and defaults.

Note: Keep payroll constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DAILY_OT_THRESHOLD = "17:00"
MONTHLY_OT_THRESHOLD = "19:00"

WORKING_DAYS_PER_MONTH = 26
HOURS_PER_DAY = 8
OT_MULTIPLIER = Decimal("1.5")

DEFAULT_HOLIDAY_PAY_MULTIPLIER = Decimal("1.5")
LUNCH_ALLOWANCE_PER_HOUR = Decimal("1.0")

REMARK_MC = "MC"
REMARK_OFF = "OFF"

# Column width of attendance.remarks / site_location.
MAX_TEXT_LENGTH = 255
