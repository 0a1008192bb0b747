from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .payroll.mysql_payroll_repository import MySQLAdjustmentRepository
from .payroll.repository import AdjustmentRepository
from .payroll.service import PayrollService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    adjustments_repo: AdjustmentRepository
    settings_repo: SettingsRepository

    attendance_service: AttendanceService
    payroll_service: PayrollService
    settings_service: SettingsService


def build_services(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    adjustments_repo: AdjustmentRepository,
    settings_repo: SettingsRepository,
) -> Container:
    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        adjustments_repo=adjustments_repo,
        settings_repo=settings_repo,
        attendance_service=AttendanceService(attendance_repo, employees_repo, settings_repo),
        payroll_service=PayrollService(employees_repo, attendance_repo, adjustments_repo, settings_repo),
        settings_service=SettingsService(settings_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        adjustments_repo=MySQLAdjustmentRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
    )
