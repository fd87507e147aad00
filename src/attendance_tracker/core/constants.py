"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_JWT_EXPIRE_MINUTES = 60
DEFAULT_JWT_ALGORITHM = "HS256"

ATTENDANCE_CSV_HEADER = ("EmployeeId", "EmployeeName", "DepartmentName", "Date", "Status")
CSV_DATE_FORMAT = "%Y-%m-%d"

ERROR_PREFIX = "Error occurred: "
NO_RECORDS_MESSAGE = "No attendance records found for the given criteria."
