"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import AttendanceStatus, LeaveType

ANNUAL_LEAVE_ALLOWANCE = 25

# Display-only per-type allowances (the aggregate allowance is authoritative).
LEAVE_ALLOWANCES = {
    LeaveType.VACATION: 25,
    LeaveType.SICK: 15,
    LeaveType.PERSONAL: 5,
    LeaveType.EMERGENCY: 3,
    LeaveType.MATERNITY: 90,
    LeaveType.PATERNITY: 14,
}

PAYDAY_TARGET_DAY = 30
TREND_LOOKBACK_MONTHS = 2

MANAGER_ATTENDANCE_LOOKBACK_DAYS = 6
MANAGER_MARKABLE_STATUSES = (AttendanceStatus.PRESENT, AttendanceStatus.ABSENT)

DEFAULT_LEAVE_LIST_LIMIT = 10
DEFAULT_MANAGER_LEAVE_LIMIT = 100
DEFAULT_SALARY_HISTORY_LIMIT = 5
DEFAULT_EVALUATION_LIMIT = 3

MAX_NAME_LENGTH = 255
MAX_ADDRESS_LENGTH = 1024
MAX_REASON_LENGTH = 1024

EMPLOYEE_CODE_ATTEMPTS = 5
