from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    ON_LEAVE = "On Leave"
    TERMINATED = "Terminated"


class ActivityType(str, Enum):
    MEETING = "Meeting"
    CALL = "Call"
    EMAIL = "Email"
    TASK = "Task"
    OTHER = "Other"


class AttendanceStatus(str, Enum):
    """Values offered by the attendance form; the backend stores free text."""

    PRESENT = "Present"
    LATE = "Late"
    ABSENT = "Absent"
    HALF_DAY = "Half Day"
    ON_LEAVE = "On Leave"


class LeaveType(str, Enum):
    VACATION = "Vacation"
    SICK = "Sick"
    PERSONAL = "Personal"
    EMERGENCY = "Emergency"
    MATERNITY = "Maternity"
    PATERNITY = "Paternity"


class LeaveStatus(str, Enum):
    """Approval flow of a leave request."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class PaymentStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    FAILED = "Failed"
    REFUNDED = "Refunded"


class PenaltyType(str, Enum):
    VERBAL_WARNING = "Verbal Warning"
    WRITTEN_WARNING = "Written Warning"
    SUSPENSION = "Suspension"
    TERMINATION = "Termination"


class PenaltyStatus(str, Enum):
    ACTIVE = "Active"
    RESOLVED = "Resolved"


class FieldKind(str, Enum):
    """How a column is coerced on the way in and parsed on the way out."""

    TEXT = "text"
    REFERENCE = "reference"
    INTEGER = "integer"
    AMOUNT = "amount"
    DATE = "date"
    DATETIME = "datetime"


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"
    VIEW = "view"


class ViewMode(str, Enum):
    GRID = "grid"
    LIST = "list"


def enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]
