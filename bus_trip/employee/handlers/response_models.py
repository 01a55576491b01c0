from __future__ import annotations

from pydantic import BaseModel

from bus_trip.employee.domain.entity import Employee


class EmployeeData(BaseModel):
    """従業員のレスポンスモデル"""

    employee_id: int
    name: str
    email: str | None
    phone: str | None
    role: str
    commission_percent: str
    active: bool


def to_employee_data(employee: Employee) -> dict:
    """Employee エンティティをレスポンス辞書に変換する"""
    return EmployeeData(
        employee_id=employee.id.value,
        name=str(employee.name),
        email=str(employee.email) if employee.email is not None else None,
        phone=employee.phone,
        role=employee.role,
        commission_percent=str(employee.commission_percent),
        active=employee.active,
    ).model_dump()
