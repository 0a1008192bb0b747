from __future__ import annotations

from enum import Enum


class SalaryType(str, Enum):
    """Salary model: basic salary is a per-day rate or a monthly total."""

    DAILY = "Daily"
    MONTHLY = "Monthly"


class AttendanceStatus(str, Enum):
    """Denormalized day label, always derived from times and remarks."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LEAVE = "Leave"
    MC = "MC"


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    CANCELLED = "Cancelled"
