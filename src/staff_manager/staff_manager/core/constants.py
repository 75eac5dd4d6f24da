"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

HISTORY_LIMIT = 100
UNDONE_SUFFIX = " (UNDONE)"

DEFAULT_ORGANIZATION_NAME = "My Company"
DEFAULT_LEAVE_DEDUCTION_VALUE = 10.0

# Entity ids used by history entries that do not point at a single record.
BULK_ENTITY_ID = "bulk"
CLEANUP_ENTITY_ID = "cleanup"

UNKNOWN_EMPLOYEE_NAME = "Unknown"
