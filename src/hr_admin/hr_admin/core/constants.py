"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_API_TIMEOUT_SECONDS = 30.0
DEFAULT_PAGE_LIMIT = 50
DEFAULT_APPROVER_NAME = "HR Admin"
UNKNOWN_EMPLOYEE = "Unknown"
LOOKUP_WORKERS = 2
EXPORT_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
