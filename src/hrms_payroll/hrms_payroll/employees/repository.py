from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Read-only view of the HR employee records."""

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError
